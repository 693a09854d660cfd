from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def list_all(self) -> list[User]:
        """Return every stored user. No filtering or pagination."""
        ...

    def create(self, name: str, email: str) -> None:
        """Insert a new user. Constraint violations propagate to the caller."""
        ...
