class ServiceError(Exception):
    """Business rule violation, rendered by the app error handler"""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

class ValidationError(ServiceError):
    status_code = 400

class AuthorizationError(ServiceError):
    status_code = 403

class NotFoundError(ServiceError):
    status_code = 404

class ConflictError(ServiceError):
    status_code = 409
