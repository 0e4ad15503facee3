"""
Core utilities for the product service.

- configuration helpers (env vars)
- request identity resolution (bearer JWT -> owning user id)

Routers and services depend on these primitives instead of reading
os.environ or request headers directly.
"""
