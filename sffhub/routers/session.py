# sffhub/routers/session.py
import os
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response
from supabase import Client

from ..auth import SESSION_COOKIE, sign_in, sign_out
from ..deps import get_supabase
from ..models import LoginIn

router = APIRouter(prefix="/auth", tags=["auth"])


def _secure_cookie() -> bool:
    return os.environ.get("SESSION_COOKIE_SECURE", "1") != "0"


@router.post("/login")
def login(payload: LoginIn, response: Response, client: Client = Depends(get_supabase)):
    session = sign_in(client, payload.email, payload.password)
    response.set_cookie(
        SESSION_COOKIE,
        session.access_token,
        max_age=session.expires_in or 3600,
        httponly=True,
        secure=_secure_cookie(),
        samesite="lax",
    )
    user = session.user
    return {
        "success": True,
        "user": {"id": str(user.id), "email": user.email} if user else None,
    }


@router.post("/logout")
def logout(
    response: Response,
    session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
    client: Client = Depends(get_supabase),
):
    if session:
        sign_out(client, session)
    response.delete_cookie(SESSION_COOKIE)
    return {"success": True}
