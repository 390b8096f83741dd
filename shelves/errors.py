# shelves/errors.py


class ShelfError(Exception):
    """Base class for smart shelf errors"""


class InvalidShelfType(ShelfError, ValueError):
    """Raised when a caller asks for a shelf type that is not registered."""

    def __init__(self, shelf_type):
        self.shelf_type = shelf_type
        super().__init__(f"Invalid shelf type: {shelf_type!r}")


class StoreUnavailable(ShelfError):
    """Raised when a read against the record store fails.

    The original driver/ORM error is kept as ``__cause__``.
    """
