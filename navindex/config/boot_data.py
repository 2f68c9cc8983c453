"""Load the menu tree from a boot-data JSON file.

Accepted layouts::

    [{"id": "home", ...}, ...]
    {"navTree": [...]}
    {"bootData": {"navTree": [...]}}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from navindex.exceptions import InvalidMenuNodeError, NavTreeLoadError
from navindex.logging import LoggerFactory
from navindex.model import MenuNode

log = LoggerFactory.for_config()


def _extract_nav_tree(data: Any, path: Path) -> List[Any]:
    if isinstance(data, dict):
        if isinstance(data.get("bootData"), dict):
            data = data["bootData"]
        data = data.get("navTree")
    if not isinstance(data, list):
        raise NavTreeLoadError(path, "no navTree list found")
    return data


def validate_node(data: Any, location: str) -> None:
    if not isinstance(data, dict):
        raise InvalidMenuNodeError(location, "expected an object")
    node_id = data.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise InvalidMenuNodeError(location, "missing string id")
    children = data.get("children")
    if children is None:
        return
    if not isinstance(children, list):
        raise InvalidMenuNodeError(f"{location}/{node_id}", "children must be a list")
    for index, child in enumerate(children):
        validate_node(child, f"{location}/{node_id}[{index}]")


def parse_nav_tree(nodes: List[Any]) -> List[MenuNode]:
    """Validate raw node dicts and convert them to MenuNode values."""
    for index, node in enumerate(nodes):
        validate_node(node, f"navTree[{index}]")
    return [MenuNode.from_dict(node) for node in nodes]


def load_nav_tree(path: Path | str) -> List[MenuNode]:
    """Read and validate the menu tree stored at ``path``.

    Raises:
        NavTreeLoadError: If the file cannot be read or holds no tree
        InvalidMenuNodeError: If a node is malformed
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as error:
        raise NavTreeLoadError(path, str(error)) from error
    except json.JSONDecodeError as error:
        raise NavTreeLoadError(path, f"invalid JSON: {error.msg}") from error

    nodes = parse_nav_tree(_extract_nav_tree(data, path))
    log.info(f"Loaded {len(nodes)} top-level menu nodes from {path}")
    return nodes
