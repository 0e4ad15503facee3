"""
Primitives shared by the product and user services.

This package hosts the cross-cutting pieces both services need:
- bearer/JWT helpers (issue, decode, read the Authorization header)
- the global exception middleware and validation error mapping
- logging setup
- the command mediator used by the write endpoints

Service packages import from here instead of re-implementing them, but each
service keeps its own configuration and database.
"""
