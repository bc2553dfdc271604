# storefront/domain/errors.py


class StorefrontError(Exception):
    """Bazowy blad domeny, niesie kod HTTP dla warstwy api."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def error_code(self) -> str:
        return type(self).__name__


class ValidationError(StorefrontError):
    status_code = 400


class InvalidArgumentError(ValidationError):
    pass


class NotFoundError(StorefrontError):
    status_code = 404


class UpstreamError(StorefrontError):
    status_code = 500


class PersistenceError(StorefrontError):
    status_code = 500


class CartConflictError(StorefrontError):
    status_code = 409
