import pytest

from appinsights.contracts.contexttags import ContextTags

FIELDS = [
    ("application", "ver", "ai.application.ver"),
    ("device", "id", "ai.device.id"),
    ("device", "locale", "ai.device.locale"),
    ("device", "model", "ai.device.model"),
    ("device", "oem_name", "ai.device.oemName"),
    ("device", "os_version", "ai.device.osVersion"),
    ("device", "type", "ai.device.type"),
    ("location", "ip", "ai.location.ip"),
    ("operation", "id", "ai.operation.id"),
    ("operation", "name", "ai.operation.name"),
    ("operation", "parent_id", "ai.operation.parentId"),
    ("operation", "synthetic_source", "ai.operation.syntheticSource"),
    ("operation", "correlation_vector", "ai.operation.correlationVector"),
    ("session", "id", "ai.session.id"),
    ("session", "is_first", "ai.session.isFirst"),
    ("user", "account_id", "ai.user.accountId"),
    ("user", "id", "ai.user.id"),
    ("user", "auth_user_id", "ai.user.authUserId"),
    ("cloud", "role", "ai.cloud.role"),
    ("cloud", "role_instance", "ai.cloud.roleInstance"),
    ("internal", "sdk_version", "ai.internal.sdkVersion"),
    ("internal", "agent_version", "ai.internal.agentVersion"),
    ("internal", "node_name", "ai.internal.nodeName"),
]


@pytest.mark.parametrize("group,attr,key", FIELDS)
def test_set_writes_expected_key(group, attr, key):
    tags = ContextTags()
    setattr(getattr(tags, group)(), attr, "value-1")
    assert tags == {key: "value-1"}


@pytest.mark.parametrize("group,attr,key", FIELDS)
def test_get_reads_expected_key(group, attr, key):
    tags = ContextTags({key: "stored"})
    assert getattr(getattr(tags, group)(), attr) == "stored"


@pytest.mark.parametrize("group,attr,key", FIELDS)
def test_absent_reads_empty(group, attr, key):
    tags = ContextTags()
    assert getattr(getattr(tags, group)(), attr) == ""
    assert key not in tags


@pytest.mark.parametrize("group,attr,key", FIELDS)
def test_empty_value_deletes(group, attr, key):
    tags = ContextTags({key: "present", "other": "kept"})
    setattr(getattr(tags, group)(), attr, "")
    assert key not in tags
    assert tags == {"other": "kept"}


def test_empty_on_absent_key_is_harmless():
    tags = ContextTags()
    tags.cloud().role = ""
    assert tags == {}


def test_views_share_underlying_dict():
    tags = ContextTags()
    device = tags.device()
    device.id = "host-a"
    assert tags.device().id == "host-a"
    tags["ai.device.id"] = "host-b"
    assert device.id == "host-b"


def test_same_name_in_different_groups_is_distinct():
    tags = ContextTags()
    tags.device().id = "d"
    tags.operation().id = "o"
    tags.session().id = "s"
    tags.user().id = "u"
    assert tags.device().id == "d"
    assert tags.operation().id == "o"
    assert tags.session().id == "s"
    assert tags.user().id == "u"
    assert len(tags) == 4


def test_context_tags_behaves_as_dict():
    tags = ContextTags(custom="x")
    tags.internal().sdk_version = "sdk:1"
    assert dict(tags) == {"custom": "x", "ai.internal.sdkVersion": "sdk:1"}


def test_del_removes_tag():
    tags = ContextTags()
    tags.location().ip = "10.0.0.1"
    del tags.location().ip
    assert "ai.location.ip" not in tags
    assert tags.location().ip == ""