"""
Access rules for shortcuts.

Pure functions; the use cases decide which error to raise.
"""

from typing import Optional

from slash.domain.shortcuts.entities import Role, Shortcut, User, Visibility


def can_view(shortcut: Shortcut, caller_id: int) -> bool:
    """Return True if the caller may read the shortcut.

    Shared shortcuts are readable by everyone, private ones only by
    their creator.
    """
    if shortcut.visibility == Visibility.PRIVATE:
        return shortcut.creator_id == caller_id
    return True


def can_mutate(shortcut: Shortcut, caller_id: int, caller: Optional[User]) -> bool:
    """Return True if the caller may update or delete the shortcut.

    Args:
        shortcut: The target shortcut.
        caller_id: Authenticated caller identity.
        caller: The caller's user record, or None if the store has none.
    """
    if shortcut.creator_id == caller_id:
        return True
    return caller is not None and caller.role == Role.ADMIN
