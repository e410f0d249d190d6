from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi_pagination import Page, paginate

from skipsave.api.dependencies import CurrentUserId, DbSession, write_rate_limit
from skipsave.api.errors import NotFoundError
from skipsave.api.schemas import EntryCreate, EntryOut, EntryUpdate
from skipsave.services.database.models.base import as_naive_utc
from skipsave.services.database.models.entry.crud import (
    EntryFilters,
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    update_entry,
)
from skipsave.services.database.models.entry.model import Entry

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("", response_model=list[EntryOut])
async def get_entries(db: DbSession, user_id: CurrentUserId):
    """All entries of the current user, newest first"""
    return await list_entries(db, user_id)


@router.get("/search", response_model=Page[EntryOut])
async def search_entries(
    db: DbSession,
    user_id: CurrentUserId,
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None, max_length=120),
):
    """Filtered, paginated entries (`page` and `size` query parameters)."""
    filters = EntryFilters(
        date_from=as_naive_utc(date_from),
        date_to=as_naive_utc(date_to),
        category=category,
        search=search,
    )
    entries = await list_entries(db, user_id, filters)
    return paginate([EntryOut.model_validate(entry) for entry in entries])


@router.get("/{entry_id}", response_model=EntryOut)
async def get_single_entry(entry_id: str, db: DbSession, user_id: CurrentUserId):
    entry = await get_entry(db, entry_id, user_id)
    if not entry:
        raise NotFoundError("Entry not found")
    return entry


@router.post(
    "",
    response_model=EntryOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(write_rate_limit)],
)
async def add_entry(payload: EntryCreate, db: DbSession, user_id: CurrentUserId):
    entry = Entry(user_id=user_id, **payload.model_dump(exclude_none=True))
    return await create_entry(db, entry)


@router.patch("/{entry_id}", response_model=EntryOut, dependencies=[Depends(write_rate_limit)])
async def edit_entry(entry_id: str, payload: EntryUpdate, db: DbSession, user_id: CurrentUserId):
    updated = await update_entry(db, entry_id, user_id, payload.model_dump(exclude_unset=True))
    if not updated:
        raise NotFoundError("Entry not found")
    return updated


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(write_rate_limit)],
)
async def remove_entry(entry_id: str, db: DbSession, user_id: CurrentUserId):
    # deleting an unknown id is still a 204
    await delete_entry(db, entry_id, user_id)
    return None
