"""HTTP API for ZenReader."""
