from skipsave.api.routes.bank import router as bank_router
from skipsave.api.routes.dashboard import router as dashboard_router
from skipsave.api.routes.entries import router as entries_router
from skipsave.api.routes.health import router as health_router
from skipsave.api.routes.preferences import router as preferences_router
from skipsave.api.routes.settings import router as settings_router
from skipsave.api.routes.transfers import router as transfers_router

__all__ = [
    "bank_router",
    "dashboard_router",
    "entries_router",
    "health_router",
    "preferences_router",
    "settings_router",
    "transfers_router",
]
