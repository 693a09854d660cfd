"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str) -> None:
        # Mirrors the unique constraint on users.email
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError('email', email)

        user_id = uuid.uuid4().hex
        self.store[user_id] = User(
            id=user_id,
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
        )

    # ── read operations ──────────────────────────────────────

    def list_all(self) -> list[User]:
        return list(self.store.values())
