"""Exceptions raised by the note store and the text transformation layers."""


class NeuronpadError(Exception):
    """Base exception for NeuronPad errors."""


class StorageError(NeuronpadError):
    """Raised when the persistence layer fails."""


class StorageReadError(StorageError):
    """Raised when a persisted record cannot be read."""


class StorageWriteError(StorageError):
    """Raised when a persisted record cannot be written."""


class TransformError(NeuronpadError):
    """Base exception for summarize / grammar-fix failures."""


class EmptyInputError(TransformError):
    """Raised when there is no text to transform."""

    def __init__(self, message: str = "No text to transform") -> None:
        super().__init__(message)


class ServiceError(TransformError):
    """Raised when the text transformation service does not complete successfully."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UpstreamError(NeuronpadError):
    """Raised when the upstream generation API returns an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize upstream error.

        Args:
            message: Error message.
            status_code: HTTP status code if available.
        """
        super().__init__(message)
        self.status_code = status_code


class MissingCredentialError(NeuronpadError):
    """Raised when no upstream API key is configured."""
