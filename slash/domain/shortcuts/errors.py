"""
Domain-specific errors for the shortcuts bounded context.

Two families live here:

- ``ShortcutDomainError`` subclasses are raised by use cases and mapped
  to HTTP responses at the interface layer.
- ``StoreError`` subclasses are raised by store adapters so the use cases
  can tell a uniqueness conflict apart from an outage.

No framework imports allowed.
"""


class ShortcutDomainError(Exception):
    """Base error for all shortcut domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(ShortcutDomainError):
    """Raised when a request is malformed (e.g. a missing update mask)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid argument: {reason}")
        self.reason = reason


class ShortcutNotFoundError(ShortcutDomainError):
    """Raised when no shortcut matches the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Shortcut not found: {name}")
        self.name = name


class PermissionDeniedError(ShortcutDomainError):
    """Raised when the caller may not see or mutate a shortcut."""

    def __init__(self, caller_id: int, name: str) -> None:
        super().__init__(f"Permission denied for user {caller_id} on shortcut {name}")
        self.caller_id = caller_id
        self.name = name


class ShortcutAlreadyExistsError(ShortcutDomainError):
    """Raised when creating a shortcut whose name is taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Shortcut already exists: {name}")
        self.name = name


class InternalError(ShortcutDomainError):
    """Raised when a collaborator (store, serializer) fails."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Failed to {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class ActivityRecordingError(Exception):
    """Raised by the activity recorder, naming the step that failed."""

    def __init__(self, step: str, reason: str) -> None:
        super().__init__(f"Failed to {step}: {reason}")
        self.step = step
        self.reason = reason


class StoreError(Exception):
    """Base error for store adapter failures."""


class StoreConflictError(StoreError):
    """A uniqueness constraint was violated."""


class StoreNotFoundError(StoreError):
    """The targeted row does not exist."""


class StoreUnavailableError(StoreError):
    """The backing database could not be reached."""
