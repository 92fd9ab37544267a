"""Account endpoints: sign-up, sign-in and profile management."""

from __future__ import annotations

from flask import Blueprint, request

from profilehub.api.deps import (
    auth_service,
    json_response,
    profile_service,
    registration_service,
    timing,
)
from profilehub.schemas import (
    AccountPublicSchema,
    ProfileDataSchema,
    ProfileQuerySchema,
    ProfileUpdateSchema,
    SignInSchema,
    SignUpSchema,
)
from profilehub.services._shared.base import translate_service_error
from profilehub.services._shared.errors import ServiceError
from profilehub.services.auth.dto import SignInIn
from profilehub.services.profile.dto import ProfileUpdateIn
from profilehub.services.registration.dto import UserRegistrationIn

bp = Blueprint("accounts", __name__)

signup_schema = SignUpSchema()
signin_schema = SignInSchema()
profile_update_schema = ProfileUpdateSchema()
profile_query_schema = ProfileQuerySchema()
account_schema = AccountPublicSchema()
profile_data_schema = ProfileDataSchema()

SIGNUP_MESSAGE = "Account created. Welcome to LINKEDIN."
SIGNIN_MESSAGE = "Signed in. Redirecting you to LINKEDIN."
PROFILE_UPDATED_MESSAGE = "Profile updated successfully."


@bp.post("/signup")
@timing
def signup():
    """Register a new account and return its public view."""

    data = signup_schema.load(request.get_json(silent=True) or {})
    try:
        result = registration_service().register(UserRegistrationIn(**data))
    except ServiceError as exc:
        raise translate_service_error(exc) from exc
    body = {"message": SIGNUP_MESSAGE, "profile": account_schema.dump(result.account)}
    return json_response(body, status=201)


@bp.post("/signin")
@timing
def signin():
    """Verify credentials and issue a session token."""

    data = signin_schema.load(request.get_json(silent=True) or {})
    try:
        result = auth_service().sign_in(SignInIn(**data))
    except ServiceError as exc:
        raise translate_service_error(exc) from exc
    body = {
        "message": SIGNIN_MESSAGE,
        "token": result.token,
        "profile": account_schema.dump(result.account),
        "profileData": profile_data_schema.dump(result.profile),
    }
    return json_response(body)


@bp.post("/update-profile")
@timing
def update_profile():
    """Replace the caller's profile sequences."""

    data = profile_update_schema.load(request.get_json(silent=True) or {})
    try:
        profile_service().update_profile(ProfileUpdateIn(**data))
    except ServiceError as exc:
        raise translate_service_error(exc) from exc
    return json_response({"message": PROFILE_UPDATED_MESSAGE})


@bp.get("/profile")
@timing
def get_profile():
    """Return the stored profile sequences for ``?email=``."""

    args = profile_query_schema.load(request.args)
    try:
        profile = profile_service().get_profile(args["email"])
    except ServiceError as exc:
        raise translate_service_error(exc, not_found_message="Profile not found.") from exc
    return json_response({"profileData": profile_data_schema.dump(profile)})
