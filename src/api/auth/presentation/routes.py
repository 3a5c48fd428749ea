"""Google sign-in routes: OAuth2 authorization code flow with PKCE.

The login round trip keeps its state and PKCE verifier in short-lived
httponly cookies, so any instance of the service can handle the callback.
On success the verified ID token becomes the session cookie.
"""

from __future__ import annotations

import base64
import hashlib
import secrets
import urllib.parse
from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import RedirectResponse

from auth.observability import AuthFlowProbe, DefaultAuthFlowProbe
from iam.application.services import UserService
from iam.application.value_objects import SessionIdentity
from iam.dependencies.authentication import get_jwt_validator
from iam.dependencies.user import get_user_service
from iam.ports.exceptions import ConcurrencyConflictError, ConstraintViolationError
from infrastructure.settings import OIDCSettings, get_oidc_settings
from shared_kernel.auth import InvalidTokenError, JWTValidator

router = APIRouter(tags=["auth"])

STATE_COOKIE = "oauth2_state"
VERIFIER_COOKIE = "oauth2_code_verifier"
FLOW_COOKIE_MAX_AGE = 600

LOGIN_SUCCESS_PATH = "/login/success"
LOGIN_FAILURE_PATH = "/login/fail"


def _generate_pkce_pair() -> tuple[str, str]:
    """Generate PKCE code_verifier and code_challenge.

    Uses S256 challenge method as recommended by RFC 7636.

    Returns:
        Tuple of (code_verifier, code_challenge)
    """
    code_verifier = secrets.token_urlsafe(32)
    code_challenge = (
        base64.urlsafe_b64encode(hashlib.sha256(code_verifier.encode()).digest())
        .decode()
        .rstrip("=")
    )
    return code_verifier, code_challenge


def get_auth_probe_dep() -> AuthFlowProbe:
    """Dependency for auth flow probe."""
    return DefaultAuthFlowProbe()


async def _discover(
    client: httpx.AsyncClient, settings: OIDCSettings
) -> dict[str, Any]:
    response = await client.get(settings.discovery_url)
    response.raise_for_status()
    return response.json()


def _json_object(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body; anything else (HTML error pages) is empty."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _set_flow_cookie(
    response: Response, key: str, value: str, settings: OIDCSettings
) -> None:
    response.set_cookie(
        key,
        value,
        max_age=FLOW_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def _login_failed(probe: AuthFlowProbe, reason: str) -> RedirectResponse:
    probe.login_failed(reason=reason)
    response = RedirectResponse(url=LOGIN_FAILURE_PATH)
    response.delete_cookie(STATE_COOKIE)
    response.delete_cookie(VERIFIER_COOKIE)
    return response


@router.get("/login")
async def login(
    settings: Annotated[OIDCSettings, Depends(get_oidc_settings)],
    probe: Annotated[AuthFlowProbe, Depends(get_auth_probe_dep)],
) -> RedirectResponse:
    """Initiate Google sign-in.

    Generates state and PKCE challenge and redirects to the provider's
    authorization endpoint with an account chooser.
    """
    probe.login_initiated()

    code_verifier, code_challenge = _generate_pkce_pair()
    state = secrets.token_urlsafe(32)

    try:
        async with httpx.AsyncClient() as client:
            discovery = await _discover(client, settings)
            auth_endpoint = discovery["authorization_endpoint"]
    except httpx.HTTPError as e:
        probe.discovery_failed(error=str(e))
        return _login_failed(probe, reason="discovery_failed")
    except KeyError as e:
        probe.discovery_failed(error=f"Missing key in discovery: {e}")
        return _login_failed(probe, reason="discovery_failed")
    except ValueError as e:
        probe.discovery_failed(error=f"Discovery document is not JSON: {e}")
        return _login_failed(probe, reason="discovery_failed")

    params = {
        "client_id": settings.client_id,
        "response_type": "code",
        "scope": settings.scopes,
        "redirect_uri": settings.callback_url,
        "state": state,
        "code_challenge": code_challenge,
        "code_challenge_method": "S256",
        "prompt": "select_account",
    }

    response = RedirectResponse(url=f"{auth_endpoint}?{urllib.parse.urlencode(params)}")
    _set_flow_cookie(response, STATE_COOKIE, state, settings)
    _set_flow_cookie(response, VERIFIER_COOKIE, code_verifier, settings)
    return response


@router.get("/login/oauth2/code/google")
async def callback(
    request: Request,
    settings: Annotated[OIDCSettings, Depends(get_oidc_settings)],
    probe: Annotated[AuthFlowProbe, Depends(get_auth_probe_dep)],
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    code: Annotated[str | None, Query()] = None,
    state: Annotated[str | None, Query()] = None,
    error: Annotated[str | None, Query()] = None,
) -> RedirectResponse:
    """Complete Google sign-in.

    Exchanges the authorization code using the PKCE verifier, validates the
    ID token, provisions the user and starts the session. Every failure
    ends on the login failure page.
    """
    probe.callback_received(state=state or "")

    if error is not None:
        return _login_failed(probe, reason=error)

    expected_state = request.cookies.get(STATE_COOKIE)
    code_verifier = request.cookies.get(VERIFIER_COOKIE)
    if (
        not code
        or not state
        or not expected_state
        or not code_verifier
        or not secrets.compare_digest(state, expected_state)
    ):
        probe.invalid_state(state=state or "")
        return _login_failed(probe, reason="invalid_state")

    try:
        async with httpx.AsyncClient() as client:
            token_endpoint = (await _discover(client, settings))["token_endpoint"]
            token_response = await client.post(
                token_endpoint,
                data={
                    "grant_type": "authorization_code",
                    "client_id": settings.client_id,
                    "client_secret": settings.client_secret.get_secret_value(),
                    "code": code,
                    "redirect_uri": settings.callback_url,
                    "code_verifier": code_verifier,
                },
            )
    except (httpx.HTTPError, KeyError, ValueError) as e:
        probe.token_exchange_failed(error=str(e))
        return _login_failed(probe, reason="token_exchange_failed")

    token_data = _json_object(token_response)

    if token_response.status_code != 200:
        error_detail = token_data.get(
            "error_description", f"HTTP {token_response.status_code}"
        )
        probe.token_exchange_failed(error=str(error_detail))
        return _login_failed(probe, reason="token_exchange_failed")

    id_token = token_data.get("id_token")
    if not id_token:
        probe.token_exchange_failed(error="Token response without id_token")
        return _login_failed(probe, reason="token_exchange_failed")

    try:
        identity = SessionIdentity.from_claims(await validator.validate_token(id_token))
        await user_service.ensure_user(identity)
    except InvalidTokenError as e:
        return _login_failed(probe, reason=str(e))
    except (ValueError, ConstraintViolationError, ConcurrencyConflictError) as e:
        return _login_failed(probe, reason=f"User provisioning failed: {e}")

    probe.login_succeeded(subject=identity.subject)

    response = RedirectResponse(url=LOGIN_SUCCESS_PATH)
    response.delete_cookie(STATE_COOKIE)
    response.delete_cookie(VERIFIER_COOKIE)
    response.set_cookie(
        settings.session_cookie_name,
        id_token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return response


@router.get(LOGIN_SUCCESS_PATH)
async def login_success(
    settings: Annotated[OIDCSettings, Depends(get_oidc_settings)],
) -> RedirectResponse:
    """Send the browser to the frontend after a completed sign-in."""
    return RedirectResponse(url=settings.login_success_redirect_url)


@router.get(LOGIN_FAILURE_PATH)
async def login_fail(
    settings: Annotated[OIDCSettings, Depends(get_oidc_settings)],
) -> RedirectResponse:
    """Send the browser to the frontend after a failed sign-in."""
    return RedirectResponse(url=settings.login_failure_redirect_url)


@router.api_route("/logout", methods=["GET", "POST"])
async def logout(
    settings: Annotated[OIDCSettings, Depends(get_oidc_settings)],
    probe: Annotated[AuthFlowProbe, Depends(get_auth_probe_dep)],
) -> Response:
    """Terminate the session. Always responds 200 with an empty body."""
    response = Response(status_code=200)
    response.delete_cookie(
        settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    probe.logged_out()
    return response
