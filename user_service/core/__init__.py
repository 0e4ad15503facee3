"""
Core utilities for the user service.

- configuration helpers (env vars, downstream URLs, token lifetimes)
- password hashing and access token issuing
- the link notifier used for confirmation/reset links
"""
