from typing import Optional

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.database.models.user.model import User


async def get_user_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.exec(select(User).where(User.email == email))
    return result.first()


async def create_user(db: AsyncSession, user: User) -> User:
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info(f"Created user {user.email}")
    return user


async def get_or_create_user(db: AsyncSession, user_id: str, email: str, name: Optional[str] = None) -> User:
    user = await get_user_by_id(db, user_id)
    if user:
        return user
    return await create_user(db, User(id=user_id, email=email, name=name))
