"""Constants shared across outcomes."""

# Category tag of the primary entry in an ErrorDetail
ERROR_CATEGORY = "error"

# Stand-in for exceptions raised without a message
NO_MESSAGE = "[no message]"

__all__ = ("ERROR_CATEGORY", "NO_MESSAGE")
