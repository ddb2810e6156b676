# party_invite/utils/router_helpers.py

from fastapi import HTTPException, status
from typing import Callable
from functools import wraps
import logging

from ..services.errors import (
    AuthenticationError,
    ConflictError,
    IntegrityViolationError,
    NotFoundError,
    PersistenceError,
    ServiceError,
    ValidationError,
)
from .constants import Messages

logger = logging.getLogger(__name__)


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        # Credentials -> 401 Unauthorized
        except AuthenticationError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(e),
                headers={"WWW-Authenticate": "Bearer"},
            )

        except NotFoundError as e:
            logger.warning(f"Resource not found: {str(e)}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        # Dependent rows -> 409 Conflict
        except ConflictError as e:
            logger.warning(f"Conflict: {str(e)}")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

        except IntegrityViolationError as e:
            logger.warning(f"Integrity violation: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ValidationError as e:
            logger.warning(f"Validation error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        # Store failures -> 500, message is already generic
        except PersistenceError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

        except ServiceError as e:
            logger.warning(f"Service error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        # Unexpected errors -> 500 Internal Server Error
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {str(e)}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=Messages.ERROR_SERVER,
            )

    return wrapper
