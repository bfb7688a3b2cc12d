"""
HTTP middleware for the SoundCave API.

- error_handling: exception to JSON envelope mapping
- logging: request/response logging with request ids
- rate_limiting: slowapi limiter for credential endpoints
"""

__all__ = []
