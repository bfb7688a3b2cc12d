"""
External identity providers (Google Sign-In token verification).
"""
