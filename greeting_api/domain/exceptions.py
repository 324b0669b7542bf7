"""Domain-level exceptions."""


class StorageError(Exception):
    """Raised when the greeting store cannot complete an operation."""

    def __init__(self, operation: str, message: str = "Storage unavailable"):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
