# 📄 File: soundcave/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for signing up, logging in (with a password or
# with Google) and viewing your own profile.
#
# 🧪 Purpose (Technical Summary):
# FastAPI authentication endpoints issuing bearer tokens, rate limited with slowapi,
# plus the authenticated profile endpoint.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - soundcave.modules.user_management.domain.services.auth_service
# - soundcave.api.middleware.rate_limiting (shared slowapi limiter)
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

"""
Authentication API Endpoints

Endpoints:
- POST /auth/register: Listener registration
- POST /auth/login: Email/password authentication
- POST /auth/google: Google ID token sign-in
- GET /profile: Caller's stored profile
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from soundcave.api.middleware.rate_limiting import auth_rate_limit, limiter
from soundcave.shared.core.dependencies import get_current_identity
from soundcave.shared.core.security import Identity

from ...dependencies import get_auth_service
from ....domain.services.auth_service import AuthService
from ..schemas.auth_schemas import AuthResponse, GoogleSignInRequest, LoginRequest, RegisterRequest
from ..schemas.user_schemas import UserDataResponse, UserResponse

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
profile_router = APIRouter(tags=["Authentication"])


@auth_router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account",
    description="Register a listener account and receive a bearer token",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "Email already registered"},
        422: {"description": "Validation error"},
        429: {"description": "Too many registration attempts"},
    }
)
@limiter.limit(auth_rate_limit)
async def register(
    request: Request,
    registration_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    user, token = await auth_service.register(
        full_name=registration_data.full_name,
        email=registration_data.email,
        password=registration_data.password,
        phone=registration_data.phone,
        location=registration_data.location,
        bio=registration_data.bio,
    )
    logger.info(f"User registered successfully: {user.id}")
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.from_domain(user),
    )


@auth_router.post(
    "/login",
    response_model=AuthResponse,
    summary="User login",
    description="Authenticate with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many login attempts"},
    }
)
@limiter.limit(auth_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    user, token = await auth_service.login(login_data.email, login_data.password)
    return AuthResponse(message="Login successful", token=token, user=UserResponse.from_domain(user))


@auth_router.post(
    "/google",
    response_model=AuthResponse,
    summary="Sign in with Google",
    description="Verify a Google ID token; the account is created on first sign-in",
    responses={
        200: {"description": "Signed in"},
        201: {"description": "Account created and signed in"},
        401: {"description": "Google rejected the token"},
        502: {"description": "Google verification unavailable"},
    }
)
@limiter.limit(auth_rate_limit)
async def google_sign_in(
    request: Request,
    response: Response,
    payload: GoogleSignInRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    user, token, created = await auth_service.google_sign_in(payload.id_token)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return AuthResponse(
        message="Account created" if created else "Login successful",
        token=token,
        user=UserResponse.from_domain(user),
    )


@profile_router.get(
    "/profile",
    response_model=UserDataResponse,
    summary="Get own profile",
    responses={
        200: {"description": "Profile returned"},
        401: {"description": "Not authenticated"},
        404: {"description": "Account no longer exists"},
    }
)
async def get_profile(
    identity: Identity = Depends(get_current_identity),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserDataResponse:
    user = await auth_service.get_profile(identity)
    return UserDataResponse(data=UserResponse.from_domain(user))
