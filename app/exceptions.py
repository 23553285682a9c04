class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class SourceError(AppError):
    """Raised by a news source for a bad status or an unreadable payload."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}", code="SOURCE_ERROR")
