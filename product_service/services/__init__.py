"""
Use cases for the product service.

ProductService is a thin pass-through over the repository; the write
endpoints go through the command handlers in ``commands`` which in turn call
the service. Routers call these instead of touching the repository directly.
"""
