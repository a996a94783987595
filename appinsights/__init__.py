"""Telemetry data contracts, context tags, diagnostics and exception capture for Application Insights."""

__version__ = "0.1.0"