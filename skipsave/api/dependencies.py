from typing import Annotated

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.api.errors import RateLimitExceededError
from skipsave.services.auth.utils import get_current_user_id
from skipsave.services.deps import get_rate_limit_service, get_session

DbSession = Annotated[AsyncSession, Depends(get_session)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def write_rate_limit(request: Request) -> None:
    limiter = get_rate_limit_service()
    key = client_key(request)
    if not limiter.hit(key):
        raise RateLimitExceededError(
            "Too many requests, please try again later",
            headers={"Retry-After": str(limiter.retry_after(key))},
        )
