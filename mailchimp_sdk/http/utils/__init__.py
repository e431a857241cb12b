"""Utility functions for HTTP client operations.

This package contains the helpers used by the HTTP client for:
- API key parsing and masking
- Request data building and body encoding
- Request execution through the transport
- Response classification and error extraction
"""
