# 📄 File: soundcave/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules shared by the whole app: who is allowed to do what, how login tokens
# work, and what errors look like.
# 🧪 Purpose (Technical Summary):
# Core package for roles, token validation, password hashing, the exception
# hierarchy and FastAPI guard dependencies.
# 🔗 Dependencies:
# python-jose, passlib, FastAPI
# 🔄 Connected Modules / Calls From:
# All module services and routers

__all__ = []
