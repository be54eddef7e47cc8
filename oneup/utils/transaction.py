"""Per-request transaction boundary for view functions."""

from __future__ import annotations

from functools import wraps
from typing import Callable

from ..extensions import db
from .logging_utils import get_logger

logger = get_logger("transaction")


def transactional(read_only: bool = False) -> Callable:
    """Wrap a view body in a single transaction.

    Read-write views commit on normal return. Read-only views never commit;
    anything they touched is rolled back. Any exception rolls back and is
    re-raised for the error handlers.
    """

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                result = fn(*args, **kwargs)
                if read_only:
                    db.session.rollback()
                else:
                    db.session.commit()
            except Exception:
                db.session.rollback()
                logger.debug(f"Rolled back transaction for {fn.__name__}")
                raise
            return result

        return wrapper

    return decorator
