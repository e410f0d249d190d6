from datetime import timedelta
from decimal import Decimal

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.auth.service import DEMO_USER_EMAIL, DEMO_USER_ID, DEMO_USER_NAME
from skipsave.services.database.models import Entry, Preference, User
from skipsave.services.database.models.base import utcnow
from skipsave.services.database.models.user.crud import get_or_create_user

# (item, amount, category, days ago)
SAMPLE_ENTRIES = [
    ("Morning coffee", "5.50", "Coffee & Tea", 1),
    ("Lunch out", "15.00", "Food & Dining", 1),
    ("Movie ticket", "14.00", "Entertainment", 2),
    ("Coffee", "5.50", "Coffee & Tea", 3),
    ("Impulse book purchase", "22.00", "Shopping", 4),
    ("Coffee", "5.50", "Coffee & Tea", 5),
    ("Takeout dinner", "28.00", "Food & Dining", 5),
    ("Ride share", "12.00", "Transportation", 6),
    ("Snacks", "8.50", "Shopping", 7),
    ("Coffee", "5.50", "Coffee & Tea", 8),
    ("Chocolate bar", "3.50", "Food & Dining", 9),
    ("Magazine subscription", "9.99", "Subscriptions", 10),
    ("Coffee", "5.50", "Coffee & Tea", 11),
    ("Fast food", "11.00", "Food & Dining", 12),
    ("Coffee", "5.50", "Coffee & Tea", 14),
    ("Concert ticket", "45.00", "Entertainment", 15),
    ("Coffee", "5.50", "Coffee & Tea", 16),
    ("Clothing item", "35.00", "Shopping", 18),
    ("Coffee", "5.50", "Coffee & Tea", 19),
    ("Pizza delivery", "22.00", "Food & Dining", 20),
]


async def ensure_demo_user(db: AsyncSession) -> User:
    return await get_or_create_user(db, DEMO_USER_ID, DEMO_USER_EMAIL, DEMO_USER_NAME)


async def seed_demo_data(db: AsyncSession) -> None:
    """Insert demo preferences and sample entries once; later runs are no-ops."""
    existing = await db.exec(select(Entry).where(Entry.user_id == DEMO_USER_ID).limit(1))
    if existing.first():
        logger.info("Demo data already present, skipping seed")
        return

    prefs = await db.exec(select(Preference).where(Preference.user_id == DEMO_USER_ID))
    if not prefs.first():
        db.add(
            Preference(
                user_id=DEMO_USER_ID,
                from_account_label="Checking (****1234)",
                to_account_label="Savings (****5678)",
                monthly_goal=Decimal("500.00"),
                yearly_goal=Decimal("6000.00"),
            )
        )

    now = utcnow()
    for item, amount, category, days_ago in SAMPLE_ENTRIES:
        db.add(
            Entry(
                user_id=DEMO_USER_ID,
                item=item,
                amount=Decimal(amount),
                category=category,
                date=now - timedelta(days=days_ago),
            )
        )

    await db.commit()
    logger.info(f"Seeded {len(SAMPLE_ENTRIES)} demo entries")
