"""Custom exceptions for loading navigation configuration.

The index builder and reducer never raise; these exceptions are only used at
the configuration boundary where a tree is read from disk or an action dict is
parsed strictly.

Exception Hierarchy:
    NavIndexError (base)
        ├── NavTreeError
        │   ├── NavTreeLoadError
        │   └── InvalidMenuNodeError
        ├── UnknownActionError
        └── InvalidActionPayloadError

Usage:
    from navindex.exceptions import NavTreeLoadError

    if not path.exists():
        raise NavTreeLoadError(path, "file does not exist")
"""

from __future__ import annotations

from pathlib import Path


class NavIndexError(Exception):
    """Base exception for all navigation index errors."""



class NavTreeError(NavIndexError):
    """Base exception for menu tree configuration errors."""



class NavTreeLoadError(NavTreeError):
    """Menu tree file could not be read or decoded."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load menu tree from {self.path}: {reason}")


class InvalidMenuNodeError(NavTreeError):
    """A node in the menu tree has an invalid shape."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Invalid menu node at {location}: {reason}")


class UnknownActionError(NavIndexError):
    """Action type is not one of the navigation index actions."""

    def __init__(self, action_type: object):
        self.action_type = action_type
        super().__init__(f"Unknown navigation index action: {action_type!r}")


class InvalidActionPayloadError(NavIndexError):
    """Action payload does not have the shape its action type requires."""

    def __init__(self, action_type: str, reason: str):
        self.action_type = action_type
        self.reason = reason
        super().__init__(f"Invalid payload for {action_type}: {reason}")
