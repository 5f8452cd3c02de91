"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on an
explicitly supplied store, so the file-backed store can be swapped for
an in-memory one without changing API handlers.
"""
