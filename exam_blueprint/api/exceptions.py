"""Custom exception classes for the API."""


class CategoriesNotFoundError(Exception):
    """Raised when the category store has no active categories."""

    def __init__(self) -> None:
        super().__init__("No active blueprint categories found")


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
