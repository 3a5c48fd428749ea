"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
repository operations and authorization checks. Repositories translate
driver errors into them; the presentation layer maps them to HTTP problems.
"""


class ConstraintViolationError(Exception):
    """Raised when a write breaches a foreign key, uniqueness or NOT NULL rule.

    Typical causes are a GroupLevel naming a group that does not exist, a
    Permission pointing at an unknown user or level, or a duplicate key.
    The failed statement is rolled back, so nothing is persisted.
    """

    pass


class ConcurrencyConflictError(Exception):
    """Raised when a save carries a stale optimistic-concurrency version.

    Another writer updated (or removed) the row after the caller read it.
    No write was performed; the caller must re-read and retry.
    """

    def __init__(self, entity: str, key: object, expected_version: int):
        super().__init__(
            f"{entity} {key} was modified concurrently "
            f"(expected version {expected_version})"
        )
        self.entity = entity
        self.key = key
        self.expected_version = expected_version


class NotAuthenticatedError(Exception):
    """Raised when a protected operation is reached without a valid session."""

    pass


class InsufficientGrantError(Exception):
    """Raised when an authenticated user lacks the (group, level) grant required.

    The application layer should return an HTTP 403 without exposing which
    grants the user does hold.
    """

    def __init__(self, subject: int, group_name: str, level_name: str):
        super().__init__(f"Missing grant {group_name}/{level_name}")
        self.subject = subject
        self.group_name = group_name
        self.level_name = level_name
