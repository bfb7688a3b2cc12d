# 📄 File: soundcave/modules/catalog/domain/services/ownership.py
# 🧭 Purpose (Layman Explanation):
# Decides whether an account may change an artist page and everything published under it
# (songs and albums). Admins may change anything; everyone else only their own pages.
# 🧪 Purpose (Technical Summary):
# Ownership checks shared by the artist, music and album services. An artist is owned by
# the identity in its ref_user_id; tracks and albums inherit their artist's owner.
# 🔗 Dependencies:
# soundcave.shared.core.security.Identity, AuthorizationError
# 🔄 Connected Modules / Calls From:
# artist_service.py, music_service.py, album_service.py

from typing import Optional

from soundcave.shared.core.exceptions import AuthorizationError
from soundcave.shared.core.security import Identity

from ..models.artist import Artist


def ensure_manages_artist(actor: Identity, artist: Optional[Artist]) -> None:
    """
    Raise AuthorizationError unless the actor is an admin or the artist's manager.

    Args:
        actor: Authenticated caller
        artist: Artist page being changed, or owning the record being changed;
            None when that page no longer exists

    Raises:
        AuthorizationError: reason ``not_owner``
    """
    if actor.is_admin() or (artist is not None and artist.is_managed_by(actor.id)):
        return
    raise AuthorizationError(
        "You can only manage your own artist pages",
        actual_role=actor.role.value,
        reason="not_owner",
    )


def ensure_may_assign_manager(actor: Identity, ref_user_id: Optional[int]) -> None:
    """Only admins may link an artist page to an account other than their own."""
    if actor.is_admin() or ref_user_id is None or ref_user_id == actor.id:
        return
    raise AuthorizationError(
        "You can only link artist pages to your own account",
        actual_role=actor.role.value,
        reason="not_owner",
    )
