"""Default menu tree definitions.

Used when no menu tree file is configured. Edit files in this directory to
adjust the default labels or structure.
"""

from __future__ import annotations

from navindex.model import MenuNode


def nav_entry(
    nav_id: str,
    text: str,
    *,
    url: str | None = None,
    icon: str | None = None,
    sub_title: str | None = None,
    children: list[MenuNode] | None = None,
) -> MenuNode:
    if url is None and not children:
        raise ValueError(f"Nav entry {nav_id!r} must define a url or children.")
    return MenuNode(
        id=nav_id,
        text=text,
        sub_title=sub_title,
        icon=icon,
        url=url,
        children=children,
    )


# Import all menu definitions after helper setup to avoid circular dependencies.
from .admin import CFG_NAV  # noqa: E402
from .main import DEFAULT_NAV_TREE  # noqa: E402


__all__ = [
    "nav_entry",
    "CFG_NAV",
    "DEFAULT_NAV_TREE",
]
