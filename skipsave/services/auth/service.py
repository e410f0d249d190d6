from __future__ import annotations

from datetime import timedelta

from fastapi import Response

from skipsave.services.base import Service
from skipsave.services.settings.service import SettingsService

DEMO_USER_ID = "demo-user-123"
DEMO_USER_EMAIL = "demo@skipsave.app"
DEMO_USER_NAME = "Demo User"


class AuthService(Service):
    name = "auth_service"
    demo_user_id = DEMO_USER_ID

    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service

    @property
    def cookie_name(self) -> str:
        return self.settings_service.settings.session_cookie_name

    def issue_session_token(self, user_id: str) -> str:
        from skipsave.services.auth.utils import create_access_token

        days = self.settings_service.settings.session_expire_days
        return create_access_token({"sub": user_id, "type": "session"}, timedelta(days=days))

    def set_session_cookie(self, response: Response, user_id: str) -> None:
        settings = self.settings_service.settings
        response.set_cookie(
            key=self.cookie_name,
            value=self.issue_session_token(user_id),
            max_age=settings.session_expire_days * 24 * 60 * 60,
            httponly=True,
            samesite="lax",
            secure=settings.environment == "production",
        )
