"""
Presentation layer: FastAPI routers, schemas and dependency providers.
"""
