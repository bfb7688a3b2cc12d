# 📄 File: soundcave/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles user accounts: signing up, logging in (with a password or Google), viewing
# your profile, and letting admins manage accounts.
# 🧪 Purpose (Technical Summary):
# User management module: authentication, token issuance and user administration.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, soundcave.shared.core, pydantic, passlib, httpx
# 🔄 Connected Modules / Calls From:
# soundcave.api.v1.router, soundcave.modules.social (follow targets)

"""
User Management Module

- Registration and password login
- Google Sign-In
- Profile lookup
- Admin user CRUD with soft delete
"""

__module_name__ = "user_management"

__all__ = ["__module_name__"]
