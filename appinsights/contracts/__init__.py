"""Data contracts, context tags and enumerations for Application Insights telemetry."""