"""Update events accepted by the navigation index reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from navindex.config.boot_data import validate_node
from navindex.exceptions import (
    InvalidActionPayloadError,
    InvalidMenuNodeError,
    UnknownActionError,
)
from navindex.logging import LoggerFactory
from navindex.model import MenuNode

UPDATE_NAV_INDEX = "navIndex/updateNavIndex"
# The configuration subtitle includes the organization name, so it is
# refreshed whenever the organization changes.
UPDATE_CONFIGURATION_SUBTITLE = "navIndex/updateConfigurationSubtitle"

log = LoggerFactory.for_reducer()


@dataclass(frozen=True)
class ReplaceSubtree:
    """Replace the indexed immediate children of ``item``."""

    item: MenuNode

    type = UPDATE_NAV_INDEX


@dataclass(frozen=True)
class BroadcastSubtitle:
    """Put the organization name in the administration subtitles."""

    organization_name: str

    type = UPDATE_CONFIGURATION_SUBTITLE


NavIndexEvent = Union[ReplaceSubtree, BroadcastSubtitle]


def _parse_payload(action_type: str, payload: Any) -> NavIndexEvent:
    if action_type == UPDATE_NAV_INDEX:
        if isinstance(payload, MenuNode):
            return ReplaceSubtree(item=payload)
        if isinstance(payload, dict):
            try:
                validate_node(payload, "payload")
            except InvalidMenuNodeError as error:
                raise InvalidActionPayloadError(action_type, error.reason) from error
            return ReplaceSubtree(item=MenuNode.from_dict(payload))
        raise InvalidActionPayloadError(action_type, "expected a menu node")

    if isinstance(payload, str) and payload:
        return BroadcastSubtitle(organization_name=payload)
    raise InvalidActionPayloadError(action_type, "expected an organization name")


def event_from_action(
    action: Dict[str, Any], *, strict: bool = False
) -> Optional[NavIndexEvent]:
    """Convert a ``{"type": ..., "payload": ...}`` action into an event.

    Unknown action types and malformed payloads return ``None`` unless
    ``strict`` is set, in which case :class:`UnknownActionError` or
    :class:`InvalidActionPayloadError` is raised.
    """
    action_type = action.get("type")

    if action_type not in (UPDATE_NAV_INDEX, UPDATE_CONFIGURATION_SUBTITLE):
        if strict:
            raise UnknownActionError(action_type)
        return None

    try:
        return _parse_payload(action_type, action.get("payload"))
    except InvalidActionPayloadError as error:
        if strict:
            raise
        log.debug(str(error))
        return None
