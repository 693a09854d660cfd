from collections.abc import Iterator

from adapter.sql.connection import new_session
from adapter.sql.user_repository import SqlUserRepository
from port.user_repository import UserRepository


def get_user_repo() -> Iterator[UserRepository]:
    """Yield a repository bound to a per-request session."""
    with new_session() as session:
        yield SqlUserRepository(session)
