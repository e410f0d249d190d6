from fastapi import APIRouter

from skipsave.api.routes import (
    bank_router,
    dashboard_router,
    entries_router,
    health_router,
    preferences_router,
    settings_router,
    transfers_router,
)

router = APIRouter(prefix="/api")

router.include_router(health_router)
router.include_router(entries_router)
router.include_router(transfers_router)
router.include_router(preferences_router)
router.include_router(settings_router)
router.include_router(bank_router)
router.include_router(dashboard_router)
