from skipsave.services.database.models.transfer.model import Transfer, TransferMethod, TransferStatus

__all__ = ["Transfer", "TransferMethod", "TransferStatus"]
