# 📄 File: soundcave/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every
# part of SoundCave uses, like the database connection and security checks.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, security, infrastructure
# clients and cross-cutting utilities.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (settings, database)
- Security and access control (tokens, roles, password hashing)
- Object storage client
- Logging and response helpers
"""

__all__ = []
