"""Navigation menu data model.

``MenuNode`` mirrors the shape of a menu entry in the boot configuration
(camelCase keys on the wire, snake_case attributes here). ``parent_item`` is
filled in by the index builder and is never part of the configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MenuNode:
    id: str
    text: str = ""
    sub_title: Optional[str] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    children: Optional[List[MenuNode]] = None
    # Lookup-only back-reference; kept out of eq/repr so cycles never recurse.
    parent_item: Optional[MenuNode] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MenuNode:
        """Convert a boot-config dict to a MenuNode.

        Args:
            data: Node dict with keys id, text, subTitle, icon, url, children

        Returns:
            MenuNode with children converted recursively

        Raises:
            KeyError: If ``id`` is missing
        """
        children = data.get("children")
        return cls(
            id=data["id"],
            text=data.get("text") or "",
            sub_title=data.get("subTitle"),
            icon=data.get("icon"),
            url=data.get("url"),
            children=(
                [cls.from_dict(child) for child in children]
                if children is not None
                else None
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "text": self.text}
        if self.sub_title is not None:
            data["subTitle"] = self.sub_title
        if self.icon is not None:
            data["icon"] = self.icon
        if self.url is not None:
            data["url"] = self.url
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class NavModel:
    """A displayable page: the node itself plus the node heading its section."""

    node: MenuNode
    main: MenuNode


NavIndex = Dict[str, MenuNode]
