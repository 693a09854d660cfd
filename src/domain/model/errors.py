"""Domain-level exceptions.

Repositories raise these errors to express data rule violations.
Nothing maps them to HTTP responses, so they surface as server errors.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate {field}: {value}")
