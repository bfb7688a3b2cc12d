# 📄 File: soundcave/modules/user_management/infrastructure/external/google_identity.py
# 🧭 Purpose (Layman Explanation):
# Checks with Google that a "Sign in with Google" token is genuine and was issued for
# SoundCave, and reads the person's name, email and picture from it.
#
# 🧪 Purpose (Technical Summary):
# Google ID token verification through the tokeninfo endpoint using httpx. Validates
# audience, issuer and email verification, and normalizes the profile fields.
#
# 🔗 Dependencies:
# - httpx: Async HTTP client
# - soundcave.shared.config.settings (client id, endpoint, timeout)
#
# 🔄 Connected Modules / Calls From:
# - auth_service.py (google_sign_in)
# - soundcave.main (instance stored on app.state)

"""
Google Identity Verification

Supported flow:
- The client obtains an ID token from Google Sign-In
- The API posts it to Google's tokeninfo endpoint for verification
- The verified claims are normalized into a GoogleProfile
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from soundcave.shared.config.settings import Settings, get_settings
from soundcave.shared.core.exceptions import AuthenticationError, ExternalServiceError

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = frozenset({"accounts.google.com", "https://accounts.google.com"})


class GoogleProfile(BaseModel):
    """Verified subset of Google ID token claims."""
    subject: str
    email: str
    full_name: str
    picture: Optional[str] = None


class GoogleIdentityVerifier:
    """
    Verifies Google ID tokens.

    Handles Google Sign-In following Google's tokeninfo contract:
    the ``aud`` claim must equal our client id and ``email_verified``
    must be true.
    """

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.client_id = settings.GOOGLE_CLIENT_ID
        self.tokeninfo_url = settings.GOOGLE_TOKENINFO_URL
        self.timeout = settings.GOOGLE_HTTP_TIMEOUT

    async def verify(self, id_token: str) -> GoogleProfile:
        """
        Verify ``id_token`` with Google.

        Args:
            id_token: ID token from Google Sign-In

        Returns:
            GoogleProfile: Verified profile data

        Raises:
            AuthenticationError: If Google rejects the token or its claims do not match
            ExternalServiceError: If Google sign-in is not configured or unreachable
        """
        if not self.client_id:
            raise ExternalServiceError("Google sign-in is not configured", service_name="google")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.tokeninfo_url, params={"id_token": id_token})
        except httpx.HTTPError as e:
            logger.error(f"HTTP error during Google token verification: {e}")
            raise ExternalServiceError("Google verification is unavailable", service_name="google") from e

        if response.status_code != 200:
            logger.info(f"Google rejected ID token with status {response.status_code}")
            raise AuthenticationError(
                "Invalid Google token",
                reason=AuthenticationError.INVALID_CREDENTIAL,
                cause="rejected by identity provider",
            )

        return self._normalize(response.json())

    def _normalize(self, claims: Dict[str, Any]) -> GoogleProfile:
        """Check audience, issuer and email verification, then map the claims."""
        if claims.get("aud") != self.client_id:
            raise AuthenticationError("Invalid Google token", cause="audience mismatch")
        if claims.get("iss") not in GOOGLE_ISSUERS:
            raise AuthenticationError("Invalid Google token", cause="issuer mismatch")

        email = claims.get("email")
        # tokeninfo returns booleans as strings
        if not email or str(claims.get("email_verified", "")).lower() != "true":
            raise AuthenticationError("Google account email is not verified", cause="email not verified")

        full_name = claims.get("name") or email.split("@")[0]
        logger.debug(f"Verified Google identity for: {email}")
        return GoogleProfile(
            subject=str(claims.get("sub", "")),
            email=email,
            full_name=full_name,
            picture=claims.get("picture"),
        )
