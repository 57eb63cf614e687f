# Local application imports
from app.services.exceptions import AuthorizationError, NotFoundError, ReferentialIntegrityError, ServiceError

__all__ = [
    "AuthorizationError",
    "NotFoundError",
    "ReferentialIntegrityError",
    "ServiceError",
]
