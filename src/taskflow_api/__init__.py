"""TaskFlow API - in-memory task service with a JSON HTTP interface."""

__version__ = "1.0.0"
