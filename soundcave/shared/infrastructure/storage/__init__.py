"""
Object storage clients (Supabase Storage).
"""

__all__ = []
