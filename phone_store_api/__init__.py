"""
Top-level package for the Phone Store API.

This file makes ``phone_store_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``phone_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
