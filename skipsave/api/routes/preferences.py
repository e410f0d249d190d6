from fastapi import APIRouter, Depends

from skipsave.api.dependencies import CurrentUserId, DbSession, write_rate_limit
from skipsave.api.schemas import PreferenceOut, PreferencesUpdate
from skipsave.services.database.models.preference.crud import (
    create_or_update_preferences,
    get_or_create_preferences,
)

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=PreferenceOut)
async def get_user_preferences(db: DbSession, user_id: CurrentUserId):
    """Stored preferences, created with defaults on first access"""
    return await get_or_create_preferences(db, user_id)


@router.patch("", response_model=PreferenceOut, dependencies=[Depends(write_rate_limit)])
async def update_user_preferences(payload: PreferencesUpdate, db: DbSession, user_id: CurrentUserId):
    return await create_or_update_preferences(db, user_id, payload.model_dump(exclude_unset=True))
