"""
Test suite for the Hospital Registry.

Contains unit tests for the registry and integration tests for the API.
"""
