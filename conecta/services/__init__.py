from .errors import ServiceError, ValidationError, AuthorizationError, NotFoundError, ConflictError

__all__ = [
    'ServiceError', 'ValidationError', 'AuthorizationError', 'NotFoundError', 'ConflictError'
]
