# 📄 File: soundcave/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core user data model: what we store about each account.
# 🧪 Purpose (Technical Summary):
# Package initialization for the User domain entity.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer

from .user import User

__all__ = ["User"]
