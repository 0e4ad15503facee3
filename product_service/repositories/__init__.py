"""
Persistence adapters for the product service.

Services depend on ProductRepository rather than touching SQLAlchemy sessions.
"""
