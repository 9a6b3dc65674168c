from typing import Any, Dict, List


class ArgumentValidationError(Exception):
    """Raised when resolver arguments fail validation.

    ``extensions`` is picked up by graphql-core and rendered next to the
    message in the response's ``errors`` array.
    """

    def __init__(self, validation_errors: List[Dict[str, Any]]):
        super().__init__("Argument Validation Error")
        self.validation_errors = validation_errors
        self.extensions = {"validationErrors": validation_errors}


class AuthenticationError(Exception):
    def __init__(self, message: str = "User is not logged in"):
        super().__init__(message)


class NotFoundError(Exception):
    pass


class InvalidCredentialsError(Exception):
    def __init__(self, message: str = "Email or Password is invalid"):
        super().__init__(message)


class IncorrectPasswordError(Exception):
    def __init__(self, message: str = "Password is incorrect"):
        super().__init__(message)


class StorageError(Exception):
    """Carries the database driver's own message, e.g. a unique constraint violation."""
