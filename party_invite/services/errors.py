class ServiceError(Exception):
    """Base exception for service errors"""

    pass


class ValidationError(ServiceError):
    """Bad or missing caller input; the message is safe to show"""

    pass


class IntegrityViolationError(ServiceError):
    """Reference to a missing row, or a uniqueness conflict"""

    pass


class ConflictError(IntegrityViolationError):
    """Operation refused because other rows depend on the target"""

    pass


class NotFoundError(ServiceError):
    """Resource not found"""

    pass


class AuthenticationError(ServiceError):
    """Credentials rejected"""

    pass


class PersistenceError(ServiceError):
    """Store failure; the transaction was rolled back"""

    pass
