"""Endpoint services and error types for a managed DNS REST API."""

__version__ = "2.0.0"