"""Error kinds raised by the entry store."""


class ValidationError(ValueError):
    """A rejected operation. ``message`` is shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = ['ValidationError']
