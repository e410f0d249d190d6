from skipsave.services.database.models.preference.model import Preference

__all__ = ["Preference"]
