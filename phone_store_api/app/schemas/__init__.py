"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies for the OpenAPI document;
phone records themselves are stored as plain JSON objects.
"""
