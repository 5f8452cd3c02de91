"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, middleware and the
phone store), ``services`` (business logic), ``schemas`` (pydantic
models for documentation) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
