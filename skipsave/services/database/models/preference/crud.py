from typing import Any, Optional

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.database.models.preference.model import Preference


async def get_preferences(db: AsyncSession, user_id: str) -> Optional[Preference]:
    result = await db.exec(select(Preference).where(Preference.user_id == user_id))
    return result.first()


async def create_or_update_preferences(db: AsyncSession, user_id: str, data: dict[str, Any]) -> Preference:
    prefs = await get_preferences(db, user_id)

    if prefs:
        for key, value in data.items():
            setattr(prefs, key, value)
    else:
        prefs = Preference(user_id=user_id, **data)
        logger.debug(f"Creating preferences for user {user_id}")

    db.add(prefs)
    await db.commit()
    await db.refresh(prefs)
    return prefs


async def get_or_create_preferences(db: AsyncSession, user_id: str) -> Preference:
    prefs = await get_preferences(db, user_id)
    if prefs:
        return prefs
    return await create_or_update_preferences(db, user_id, {})
