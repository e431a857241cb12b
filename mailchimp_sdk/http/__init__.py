"""Mailchimp SDK HTTP module.

This module provides the HTTP-based functionality of the SDK: the client which
authenticates and executes calls against the Mailchimp Marketing API, the data
model of batch operations and the error hierarchy every call reports failures
with.

The module includes utilities for:
- Parsing and masking API keys
- Encoding request bodies and assembling authenticated requests
- Executing requests through an injectable transport
- Classifying responses and extracting API-reported errors
"""
