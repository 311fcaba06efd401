"""
Common Message Constants

User-facing notification texts, kept in one place so the engine, the API
and the tests agree on them.
"""

# Notification titles
TITLE_ADDED = "Added to cart"
TITLE_DUPLICATE = "Already in cart"
TITLE_ORDER_PLACED = "Order Placed!"
TITLE_ERROR = "Error"

# Cart messages
MSG_ITEM_ADDED = "{name} added to cart"
MSG_ITEM_DUPLICATE = "{name} is already in your cart"
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Checkout messages
MSG_ORDER_TOTAL = "Total amount: {total}"
ERROR_EMPTY_SELECTION = "Please select at least one product"

# Configuration errors
ERROR_UNKNOWN_CART_MODE = "Unknown cart mode: {mode!r} (expected 'empty' or 'prepopulated')"
ERROR_DUPLICATE_CATALOG_ID = "Duplicate catalog id: {id}"

# Cart invariants
ERROR_NEGATIVE_QUANTITY = "Quantity must not be negative (line {id}: {quantity})"
ERROR_INVALID_QUANTITY = "Quantity must be an integer (line {id}: {quantity!r})"
ERROR_DUPLICATE_LINE_ID = "Duplicate cart line id: {id}"
