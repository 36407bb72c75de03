class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class InvalidArgumentError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidStateError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
