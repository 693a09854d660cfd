from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a stored user."""
    id: str
    name: str
    email: str
    created_at: datetime
