from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Request, Response
from loguru import logger

from skipsave.services.deps import get_auth_service, get_settings_service

ALGORITHM = "HS256"


def create_access_token(data: dict, expires_delta: timedelta) -> str:
    settings_service = get_settings_service()
    to_encode = data.copy()
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings_service.settings.jwt_secret, algorithm=ALGORITHM)


def jwt_decode(token: str) -> Optional[str]:
    try:
        settings_service = get_settings_service()
        payload = jwt.decode(token, settings_service.settings.jwt_secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.PyJWTError as exc:
        logger.debug(f"Rejected session token: {exc}")
        return None
    if payload.get("type") != "session":
        return None
    return payload.get("sub")


async def get_current_user_id(request: Request, response: Response) -> str:
    """Resolve the session cookie to a user id.

    This build has a single demo user: a missing, expired or foreign cookie
    is replaced by a fresh one for that user.
    """
    auth = get_auth_service()
    token = request.cookies.get(auth.cookie_name)
    user_id = jwt_decode(token) if token else None

    if user_id != auth.demo_user_id:
        user_id = auth.demo_user_id
        auth.set_session_cookie(response, user_id)

    return user_id
