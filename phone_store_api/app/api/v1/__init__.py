"""
Version 1 of the API.

This subpackage bundles the phone endpoints and the welcome route.
"""
