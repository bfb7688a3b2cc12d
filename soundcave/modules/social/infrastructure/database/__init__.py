"""
SQLAlchemy models and repository implementations.
"""
