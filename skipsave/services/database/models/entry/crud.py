from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from loguru import logger
from sqlalchemy import or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.database.models.entry.model import Entry


@dataclass
class EntryFilters:
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    category: Optional[str] = None
    search: Optional[str] = None


def escape_like(text: str) -> str:
    """Make % and _ in user text match literally inside a LIKE pattern."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def list_entries(db: AsyncSession, user_id: str, filters: Optional[EntryFilters] = None) -> Sequence[Entry]:
    query = select(Entry).where(Entry.user_id == user_id)

    if filters:
        if filters.date_from:
            query = query.where(Entry.date >= filters.date_from)
        if filters.date_to:
            query = query.where(Entry.date <= filters.date_to)
        if filters.category:
            query = query.where(Entry.category == filters.category)
        if filters.search:
            pattern = f"%{escape_like(filters.search)}%"
            query = query.where(
                or_(
                    col(Entry.item).ilike(pattern, escape="\\"),
                    col(Entry.note).ilike(pattern, escape="\\"),
                )
            )

    query = query.order_by(col(Entry.date).desc(), col(Entry.created_at).desc())
    result = await db.exec(query)
    return result.all()


async def get_entry(db: AsyncSession, entry_id: str, user_id: str) -> Optional[Entry]:
    result = await db.exec(select(Entry).where(Entry.id == entry_id, Entry.user_id == user_id))
    return result.first()


async def get_entries_by_ids(db: AsyncSession, entry_ids: Sequence[str], user_id: str) -> Sequence[Entry]:
    if not entry_ids:
        return []
    result = await db.exec(
        select(Entry).where(col(Entry.id).in_(list(entry_ids)), Entry.user_id == user_id)
    )
    return result.all()


async def create_entry(db: AsyncSession, entry: Entry) -> Entry:
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    logger.debug(f"Created entry {entry.id} for user {entry.user_id}")
    return entry


async def update_entry(db: AsyncSession, entry_id: str, user_id: str, data: dict[str, Any]) -> Optional[Entry]:
    entry = await get_entry(db, entry_id, user_id)
    if not entry:
        return None

    for key, value in data.items():
        setattr(entry, key, value)

    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry


async def delete_entry(db: AsyncSession, entry_id: str, user_id: str) -> bool:
    entry = await get_entry(db, entry_id, user_id)
    if not entry:
        return False

    await db.delete(entry)
    await db.commit()
    return True


async def link_entries_to_transfer(
    db: AsyncSession, entry_ids: Sequence[str], transfer_id: str, user_id: str, commit: bool = True
) -> int:
    """Stamp transfer_id on the caller's entries; ids owned by other users are skipped."""
    entries = await get_entries_by_ids(db, entry_ids, user_id)
    for entry in entries:
        entry.transfer_id = transfer_id
        db.add(entry)

    if commit:
        await db.commit()
    return len(entries)
