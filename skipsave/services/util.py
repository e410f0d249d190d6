from loguru import logger

from skipsave.services.deps import get_db_service, get_settings_service


async def initialize_services() -> None:
    """Create tables, make sure the demo user exists and optionally seed sample data."""
    from skipsave.services.database.seed import ensure_demo_user, seed_demo_data

    settings = get_settings_service().settings
    db_service = get_db_service()
    await db_service.create_db_and_tables()

    async with db_service.with_session() as session:
        await ensure_demo_user(session)
        if settings.seed_demo_data:
            await seed_demo_data(session)

    logger.info(f"Services initialized ({settings.environment})")


async def teardown_services() -> None:
    from skipsave.services.manager import service_manager

    try:
        await service_manager.teardown()
    except Exception as exc:
        logger.exception(exc)
