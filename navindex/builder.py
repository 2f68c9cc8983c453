"""Flatten a menu tree into the navigation index."""

from __future__ import annotations

import copy
import dataclasses
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from navindex.logging import LoggerFactory
from navindex.model import MenuNode, NavIndex, NavModel

HOME_NAV_ID = "home"
NOT_FOUND_NAV_ID = "not-found"
ERROR_NAV_ID = "error"
WARNING_ICON = "exclamation-triangle"

log = LoggerFactory.for_builder()
trace_log = LoggerFactory.for_traversal()


def build_warning_nav(text: str, sub_title: Optional[str] = None) -> NavModel:
    node = MenuNode(id="", text=text, sub_title=sub_title, icon=WARNING_ICON)
    return NavModel(node=node, main=node)


def _warning_entry(nav_id: str, text: str, sub_title: str) -> MenuNode:
    return dataclasses.replace(build_warning_nav(text, sub_title).node, id=nav_id)


def _walk(
    nav_index: NavIndex,
    children: Iterable[MenuNode],
    parent_item: Optional[MenuNode],
) -> None:
    for node in children:
        node.parent_item = parent_item

        if node.id in nav_index:
            log.debug(f"Duplicate nav id {node.id!r}, keeping the later node")
        nav_index[node.id] = node
        trace_log.trace(
            f"Indexed {node.id!r} under {parent_item.id if parent_item else None!r}"
        )

        if node.children:
            _walk(nav_index, node.children, node)


def build_nav_index(
    root_nodes: Sequence[MenuNode],
    home_nav: Optional[MenuNode] = None,
) -> NavIndex:
    """Build the flat id -> node index for an already copied tree.

    Top-level nodes get ``home_nav`` as their parent. The ``not-found`` and
    ``error`` pages are always injected and win over clashing ids. The home
    entry loses its parent so upward lookups from it terminate.

    ``root_nodes`` is modified in place (``parent_item`` is set on every node);
    use :func:`build_initial_state` to work on a copy of shared configuration.
    """
    nav_index: NavIndex = {}
    _walk(nav_index, root_nodes, home_nav)

    nav_index[NOT_FOUND_NAV_ID] = _warning_entry(
        NOT_FOUND_NAV_ID, "Page not found", "404 Error"
    )
    nav_index[ERROR_NAV_ID] = _warning_entry(
        ERROR_NAV_ID, "Page error", "An unexpected error"
    )

    home = nav_index.get(HOME_NAV_ID)
    if home is not None:
        home.parent_item = None

    log.debug(f"Built navigation index with {len(nav_index)} entries")
    return nav_index


def _as_nodes(nav_tree: Sequence[Union[MenuNode, Dict[str, Any]]]) -> List[MenuNode]:
    # One deepcopy for the whole tree keeps nodes shared between entries shared.
    copied = copy.deepcopy(list(nav_tree))
    return [
        node if isinstance(node, MenuNode) else MenuNode.from_dict(node)
        for node in copied
    ]


def build_initial_state(
    nav_tree: Sequence[Union[MenuNode, Dict[str, Any]]],
) -> NavIndex:
    """Copy ``nav_tree`` and build the initial navigation index from it.

    Config dicts are converted with :meth:`MenuNode.from_dict`; the tree is
    deep-copied as a whole so the source tree never receives parent references.
    """
    root_nodes = _as_nodes(nav_tree)
    home_nav = next((node for node in root_nodes if node.id == HOME_NAV_ID), None)
    if home_nav is None:
        log.debug("No home node in menu tree, top-level nodes have no parent")
    return build_nav_index(root_nodes, home_nav)
