# 📄 File: soundcave/shared/core/roles.py
# 🧭 Purpose (Layman Explanation):
# Lists the kinds of accounts SoundCave knows about (listener, admin, premium subscriber,
# independent artist, record label) and turns text into one of them safely.
# 🧪 Purpose (Technical Summary):
# Closed Role enumeration with the single string-to-role parser used at every
# boundary (token claims, request bodies, query filters, database rows).
# 🔗 Dependencies:
# enum, soundcave.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# soundcave.shared.core.security, soundcave.shared.core.dependencies,
# user_management domain and schemas, social follow service

from enum import Enum
from typing import FrozenSet, Iterable, Optional

from .exceptions import ValidationError


class Role(str, Enum):
    """Account role. Values are the strings stored in tokens and rows."""
    USER = "user"
    ADMIN = "admin"
    PREMIUM = "premium"
    INDEPENDENT = "independent"
    LABEL = "label"


# Roles whose accounts can be followed by fans
FOLLOWABLE_ROLES: FrozenSet[Role] = frozenset({Role.INDEPENDENT, Role.LABEL})

# Roles an admin may assign when creating an account directly
ADMIN_ASSIGNABLE_ROLES: FrozenSet[Role] = frozenset({Role.USER, Role.ADMIN, Role.PREMIUM})


def parse_role(value: object, allowed: Optional[Iterable[Role]] = None) -> Role:
    """
    Convert a raw value into a Role.

    Args:
        value: Role instance or role string (case-insensitive, surrounding space ignored)
        allowed: Optional subset of roles accepted in this context

    Returns:
        Role: The parsed role

    Raises:
        ValidationError: If the value is not a known role or not allowed here
    """
    if isinstance(value, Role):
        role = value
    elif isinstance(value, str):
        try:
            role = Role(value.strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown role: {value!r}",
                field="role",
                value=value,
                details={"allowed": [r.value for r in Role]},
            ) from None
    else:
        raise ValidationError("Role must be a string", field="role", value=value)

    if allowed is not None:
        allowed_set = frozenset(allowed)
        if role not in allowed_set:
            raise ValidationError(
                f"Role '{role.value}' is not allowed here",
                field="role",
                value=role.value,
                details={"allowed": sorted(r.value for r in allowed_set)},
            )
    return role
