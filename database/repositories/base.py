from sqlalchemy.orm import Session


class BaseRepository:
    """Thin wrapper over a Session; the caller owns the session lifecycle."""

    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
