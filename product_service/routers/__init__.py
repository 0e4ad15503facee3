"""FastAPI routers of the product service."""
