"""
Errors raised by the service layer.

Each error knows the HTTP status and envelope code it maps to, so the API
layer can render it without knowing which service raised it.
"""


class ServiceError(Exception):
    status_code: int = 400
    code: str = "bad_request"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = 404
    code = "not_found"


class AuthorizationError(ServiceError):
    status_code = 403
    code = "forbidden"


class ReferentialIntegrityError(ServiceError):
    status_code = 409
    code = "conflict"
