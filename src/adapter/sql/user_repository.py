"""SQLAlchemy implementation of UserRepository."""

from datetime import timezone
from logging import getLogger

from sqlalchemy import select
from sqlalchemy.orm import Session

from adapter.sql.models import UserRecord
from domain.model.user import User

logger = getLogger(__name__)


class SqlUserRepository:
    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, record: UserRecord) -> User:
        """Convert an ORM row to the User domain model."""
        created_at = record.created_at
        # SQLite drops tzinfo on the way back out
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return User(
            id=record.id,
            name=record.name,
            email=record.email,
            created_at=created_at,
        )

    def list_all(self) -> list[User]:
        """Return every stored user in insertion order."""
        stmt = select(UserRecord).order_by(UserRecord.created_at, UserRecord.id)
        return [self._to_domain(r) for r in self.session.scalars(stmt)]

    def create(self, name: str, email: str) -> None:
        """Insert a new user row.

        No duplicate check is done here: a unique-email violation is raised
        by the database as ``IntegrityError`` and left to the caller.
        """
        record = UserRecord(name=name, email=email)
        self.session.add(record)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("User created", extra={"userId": record.id})
