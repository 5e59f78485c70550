from typing import Final

# Delivery names that may appear more than once in the active list
MULTI_ENTRY_NAMES: Final[frozenset[str]] = frozenset({"talabat mart"})

STATUS_AVAILABLE: Final[str] = "available"
STATUS_USED: Final[str] = "used"

COMPLETION_MESSAGE: Final[str] = "you did that"

# User-facing messages, shown verbatim by callers
ERR_NAME_REQUIRED: Final[str] = "Name is required"
ERR_AMOUNT_NOT_POSITIVE: Final[str] = "Amount must be greater than zero"
ERR_DELIVERY_DUPLICATE: Final[str] = "That name is already in the list."
ERR_DINE_IN_DUPLICATE: Final[str] = "That restaurant is already in the Dine-In list."
ERR_SAVED_NAME_EMPTY: Final[str] = "Name cannot be empty"
ERR_CHECKLIST_DUPLICATE: Final[str] = "That item is already in the list."
ERR_ITEM_NOT_FOUND: Final[str] = "Item not found"
