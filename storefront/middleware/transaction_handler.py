from sqlalchemy.orm import Session
from functools import wraps
import logging

logger = logging.getLogger(__name__)


def transactional(func):
    """
    Commit the service session when the wrapped method returns,
    roll back and re-raise when it fails.
    Usage: @transactional on methods of a class holding ``self.db``
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        db: Session = self.db
        try:
            result = func(self, *args, **kwargs)
            db.commit()
            logger.debug(f"Transaction committed in {func.__name__}")
            return result
        except Exception as e:
            db.rollback()
            logger.error(f"Transaction failed in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper
