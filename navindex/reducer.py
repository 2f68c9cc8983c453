"""Pure updates of the navigation index.

The surrounding state container may hand out the index to readers that
expect it never to change, so every update builds new containers for the
entries it touches and shares all other entries by reference.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Dict, Optional

from navindex.events import BroadcastSubtitle, ReplaceSubtree
from navindex.logging import LoggerFactory
from navindex.model import MenuNode, NavIndex

log = LoggerFactory.for_reducer()


class SubtitleTarget(Enum):
    SELF = "self"
    PARENT = "parent"


SUBTITLE_TARGETS: Dict[str, SubtitleTarget] = {
    "cfg": SubtitleTarget.SELF,
    "datasources": SubtitleTarget.PARENT,
    "correlations": SubtitleTarget.PARENT,
    "users": SubtitleTarget.PARENT,
    "teams": SubtitleTarget.PARENT,
    "plugins": SubtitleTarget.PARENT,
    "org-settings": SubtitleTarget.PARENT,
    "apikeys": SubtitleTarget.PARENT,
}


def organization_sub_title(organization_name: str) -> str:
    return f"Organization: {organization_name}"


def _with_own_sub_title(
    item: Optional[MenuNode], nav_id: str, sub_title: str
) -> MenuNode:
    if item is None:
        return MenuNode(id=nav_id, sub_title=sub_title)
    return dataclasses.replace(item, sub_title=sub_title)


def get_item_with_new_sub_title(
    item: Optional[MenuNode], sub_title: str, nav_id: str = ""
) -> MenuNode:
    """Copy ``item`` with a copied parent carrying ``sub_title``.

    A missing item becomes a placeholder keyed ``nav_id``; a missing parent
    becomes a placeholder with empty text.
    """
    if item is None:
        item = MenuNode(id=nav_id)
    parent = item.parent_item
    if parent is None:
        new_parent = MenuNode(id="", text="", sub_title=sub_title)
    else:
        new_parent = dataclasses.replace(
            parent, text=parent.text or "", sub_title=sub_title
        )
    return dataclasses.replace(item, parent_item=new_parent)


def _replace_subtree(state: NavIndex, item: MenuNode) -> NavIndex:
    new_pages: NavIndex = {}
    for node in item.children or []:
        new_pages[node.id] = dataclasses.replace(node, parent_item=item)

    log.debug(f"Replacing {len(new_pages)} children of {item.id!r}")
    return {**state, **new_pages}


def _broadcast_sub_title(state: NavIndex, organization_name: str) -> NavIndex:
    sub_title = organization_sub_title(organization_name)
    updates: NavIndex = {}
    for nav_id, target in SUBTITLE_TARGETS.items():
        current = state.get(nav_id)
        if current is None:
            log.debug(f"Subtitle target {nav_id!r} missing, adding placeholder")
        if target is SubtitleTarget.SELF:
            updates[nav_id] = _with_own_sub_title(current, nav_id, sub_title)
        else:
            updates[nav_id] = get_item_with_new_sub_title(current, sub_title, nav_id)

    log.debug(f"Broadcast subtitle {sub_title!r}")
    return {**state, **updates}


def update_nav_index(state: Optional[NavIndex], event: object) -> NavIndex:
    """Return the index that results from applying ``event`` to ``state``.

    ``state`` is never modified. Unrecognized events return ``state`` itself;
    a ``None`` state starts from a new empty index.
    """
    if state is None:
        state = {}

    if isinstance(event, ReplaceSubtree):
        return _replace_subtree(state, event.item)
    if isinstance(event, BroadcastSubtitle):
        return _broadcast_sub_title(state, event.organization_name)

    return state


nav_index_reducer = update_nav_index
