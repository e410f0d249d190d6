from fastapi import APIRouter, Depends

from skipsave.api.dependencies import CurrentUserId, DbSession, write_rate_limit
from skipsave.api.schemas import PreferenceOut, ProviderInfo, ProviderUpdate
from skipsave.services.bank import get_provider_by_name
from skipsave.services.database.models.preference.crud import create_or_update_preferences, get_preferences

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/provider", response_model=ProviderInfo)
async def get_provider_settings(db: DbSession, user_id: CurrentUserId):
    prefs = await get_preferences(db, user_id)
    provider = get_provider_by_name(prefs.bank_provider if prefs else None)
    return ProviderInfo(
        provider=provider.method,
        display_name=provider.display_name,
        capabilities=provider.capabilities.to_dict(),
        from_account_label=prefs.from_account_label if prefs else None,
        to_account_label=prefs.to_account_label if prefs else None,
    )


@router.post("/provider", response_model=PreferenceOut, dependencies=[Depends(write_rate_limit)])
async def update_provider_settings(payload: ProviderUpdate, db: DbSession, user_id: CurrentUserId):
    data = payload.model_dump(exclude_unset=True)
    data["bank_provider"] = data.pop("provider")
    return await create_or_update_preferences(db, user_id, data)
