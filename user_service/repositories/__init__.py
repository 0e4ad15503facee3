"""
Persistence adapters for the user service.

Services depend on UserRepository rather than touching SQLAlchemy sessions.
"""
