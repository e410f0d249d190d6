from skipsave.services.database.models.entry.model import Entry

__all__ = ["Entry"]
