from __future__ import annotations

from typing import List, Optional

from navindex.builder import HOME_NAV_ID, NOT_FOUND_NAV_ID, build_warning_nav
from navindex.model import MenuNode, NavIndex, NavModel


def get_section_root(node: MenuNode) -> MenuNode:
    """Return the top-most ancestor of ``node`` below the home page."""
    seen = {id(node)}
    current = node
    while current.parent_item is not None and current.parent_item.id != HOME_NAV_ID:
        if id(current.parent_item) in seen:
            break
        current = current.parent_item
        seen.add(id(current))
    return current


def get_nav_model(
    nav_index: NavIndex,
    nav_id: str,
    fallback: Optional[NavModel] = None,
) -> NavModel:
    node = nav_index.get(nav_id)
    if node is not None:
        return NavModel(node=node, main=get_section_root(node))

    if fallback is not None:
        return fallback

    not_found = nav_index.get(NOT_FOUND_NAV_ID)
    if not_found is not None:
        return NavModel(node=not_found, main=not_found)
    return build_warning_nav("Page not found", "404 Error")


def breadcrumbs(node: MenuNode) -> List[MenuNode]:
    """Ancestor chain of ``node``, root first and ending with ``node``."""
    chain: List[MenuNode] = []
    seen = set()
    current: Optional[MenuNode] = node
    while current is not None and id(current) not in seen:
        chain.append(current)
        seen.add(id(current))
        current = current.parent_item
    chain.reverse()
    return chain
