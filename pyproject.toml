[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "appinsights"
version = "0.1.0"
description = "Telemetry data contracts, context tags, diagnostics and exception capture for Application Insights"
requires-python = ">=3.10"
dependencies = []
keywords = ["telemetry", "monitoring", "application-insights", "diagnostics", "tracing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["appinsights"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
