class CategorizerError(Exception):
    """Base class for errors raised by the categorization engine."""


class InvalidInputError(CategorizerError, ValueError):
    """Raised when there is nothing to categorize (empty or blank text)."""

    def __init__(self, message: str = "Nothing to categorize") -> None:
        super().__init__(message)
        self.message = message
