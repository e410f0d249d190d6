from skipsave.api.router import router

__all__ = ["router"]
