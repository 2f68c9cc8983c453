from loguru import logger

from navindex.builder import (
    ERROR_NAV_ID,
    HOME_NAV_ID,
    NOT_FOUND_NAV_ID,
    build_initial_state,
    build_nav_index,
    build_warning_nav,
)
from navindex.events import BroadcastSubtitle, ReplaceSubtree, event_from_action
from navindex.model import MenuNode, NavIndex, NavModel
from navindex.reducer import nav_index_reducer, update_nav_index
from navindex.store import NavIndexStore

__all__ = [
    "ERROR_NAV_ID",
    "HOME_NAV_ID",
    "NOT_FOUND_NAV_ID",
    "BroadcastSubtitle",
    "MenuNode",
    "NavIndex",
    "NavIndexStore",
    "NavModel",
    "ReplaceSubtree",
    "build_initial_state",
    "build_nav_index",
    "build_warning_nav",
    "event_from_action",
    "nav_index_reducer",
    "update_nav_index",
]

# Library logs stay silent until the application calls setup_logging().
logger.disable("navindex")
