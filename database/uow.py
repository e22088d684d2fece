import contextlib
import logging

from database.database import SessionLocal
from database.repositories import CareerProfileRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def profile_uow(app_id: str = "default-app-id", session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a CareerProfileRepository bound to a fresh Session. Commits on
    success, rolls back on exception, always closes.

    Usage:
        with profile_uow(app_id) as repo:
            repo.save_profile(user_id, name="Jane")
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        repo = CareerProfileRepository(session, app_id=app_id)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
