from .transaction import transaction

__all__ = ("transaction",)
