# sffhub/auth.py
import os
import logging
from typing import Optional

import requests
from fastapi import Cookie, Header, HTTPException
from jose import jwt, JWTError
from supabase import Client

from .errors import AuthError
from .models import AdminUser

log = logging.getLogger("uvicorn.error")

SESSION_COOKIE = "sff_session"


def _supabase_url() -> str:
    return (os.environ.get("SUPABASE_URL") or "").rstrip("/")


def _issuer() -> Optional[str]:
    url = _supabase_url()
    return f"{url}/auth/v1" if url else None


def _fetch_user_from_supabase(token: str) -> AdminUser:
    """Fallback: ask Supabase who this token belongs to."""
    url = _supabase_url()
    if not url:
        raise AuthError("Cannot verify token: SUPABASE_URL not set")
    headers = {
        "Authorization": f"Bearer {token}",
        "apikey": os.environ.get("SUPABASE_ANON_KEY", ""),
    }
    try:
        r = requests.get(f"{url}/auth/v1/user", headers=headers, timeout=10)
    except requests.RequestException as e:
        raise AuthError(f"Could not verify token with Supabase: {e}") from e
    if r.status_code != 200:
        raise AuthError("Invalid or expired token")
    data = r.json() or {}
    uid = data.get("id") or (data.get("user") or {}).get("id")
    if not uid:
        raise AuthError("User id not found from Supabase")
    return AdminUser(id=uid, email=data.get("email"))


def verify_token(token: str) -> AdminUser:
    """
    Accepts Supabase access tokens:
      - HS256 with SUPABASE_JWT_SECRET set -> verified locally
      - anything else                      -> checked against /auth/v1/user
    """
    try:
        header = jwt.get_unverified_header(token)
    except JWTError:
        return _fetch_user_from_supabase(token)

    secret = os.environ.get("SUPABASE_JWT_SECRET", "")
    if header.get("alg", "").upper() != "HS256" or not secret:
        return _fetch_user_from_supabase(token)

    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            options={"verify_aud": False},
            issuer=_issuer(),
        )
    except JWTError as e:
        raise AuthError(f"Invalid token: {e}") from e
    sub = claims.get("sub")
    if not sub:
        raise AuthError("Token missing subject (sub)")
    return AdminUser(id=sub, email=claims.get("email"))


def current_user(
    session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
    authorization: Optional[str] = Header(default=None),
) -> AdminUser:
    """Session guard for every admin route: cookie first, then bearer header.

    A cookie that fails verification does not hide a valid bearer token.
    """
    tokens = []
    if session:
        tokens.append(session)
    if authorization and authorization.lower().startswith("bearer "):
        tokens.append(authorization.split(" ", 1)[1])
    if not tokens:
        raise HTTPException(status_code=401, detail="Not signed in")

    error = None
    for token in tokens:
        try:
            return verify_token(token)
        except AuthError as e:
            error = e
    raise HTTPException(status_code=401, detail=error.message)


# ──────────────────────────────────────────────────────────────────────────────
# Email + password sign-in
# ──────────────────────────────────────────────────────────────────────────────
def sign_in(client: Client, email: str, password: str):
    try:
        resp = client.auth.sign_in_with_password({"email": email, "password": password})
    except Exception as e:
        # gotrue raises for bad credentials, unconfirmed email, rate limits...
        raise AuthError(f"Sign-in failed: {e}") from e
    if not resp or not resp.session:
        raise AuthError("Sign-in failed")
    log.info(f"Admin signed in: {email}")
    return resp.session


def sign_out(client: Client, access_token: str) -> None:
    try:
        client.auth.admin.sign_out(access_token)
    except Exception as e:
        log.warning(f"Supabase sign-out failed: {e}")
