"""Tests for navindex.events module."""

import pytest

from navindex.events import (
    UPDATE_CONFIGURATION_SUBTITLE,
    UPDATE_NAV_INDEX,
    BroadcastSubtitle,
    ReplaceSubtree,
    event_from_action,
)
from navindex.exceptions import InvalidActionPayloadError, UnknownActionError
from navindex.reducer import update_nav_index
from navindex.model import MenuNode


class TestEventTypes:
    """Test the action type names carried by events."""

    def test_replace_subtree_type(self):
        assert ReplaceSubtree(MenuNode(id="cfg")).type == "navIndex/updateNavIndex"

    def test_broadcast_subtitle_type(self):
        assert BroadcastSubtitle("Acme").type == "navIndex/updateConfigurationSubtitle"

    def test_events_are_frozen(self):
        """Test that events cannot be changed after dispatch."""
        event = BroadcastSubtitle("Acme")
        with pytest.raises(AttributeError):
            event.organization_name = "Globex"


class TestEventFromAction:
    """Test event_from_action function."""

    def test_update_nav_index_with_dict_payload(self):
        """Test that a dict payload is converted to a MenuNode."""
        event = event_from_action(
            {
                "type": UPDATE_NAV_INDEX,
                "payload": {"id": "cfg", "text": "Administration", "children": [{"id": "users"}]},
            }
        )

        assert isinstance(event, ReplaceSubtree)
        assert event.item.id == "cfg"
        assert event.item.children[0].id == "users"

    def test_update_nav_index_with_node_payload(self):
        """Test that a MenuNode payload is used as is."""
        node = MenuNode(id="cfg")

        event = event_from_action({"type": UPDATE_NAV_INDEX, "payload": node})

        assert event.item is node

    def test_update_configuration_subtitle(self):
        event = event_from_action({"type": UPDATE_CONFIGURATION_SUBTITLE, "payload": "Acme"})

        assert event == BroadcastSubtitle(organization_name="Acme")

    def test_unknown_action(self):
        """Test that unknown actions are ignored."""
        assert event_from_action({"type": "other/action", "payload": 1}) is None

    def test_unknown_action_strict(self):
        """Test that strict parsing rejects unknown actions."""
        with pytest.raises(UnknownActionError, match="other/action"):
            event_from_action({"type": "other/action"}, strict=True)


class TestMalformedPayloads:
    """Test that malformed payloads never become events."""

    @pytest.mark.parametrize(
        "action",
        [
            {"type": UPDATE_NAV_INDEX},
            {"type": UPDATE_NAV_INDEX, "payload": None},
            {"type": UPDATE_NAV_INDEX, "payload": "cfg"},
            {"type": UPDATE_NAV_INDEX, "payload": {"text": "no id"}},
            {"type": UPDATE_NAV_INDEX, "payload": {"id": "cfg", "children": [{"text": "x"}]}},
        ],
    )
    def test_update_nav_index_ignored(self, action):
        """Test missing, null and invalid node payloads."""
        assert event_from_action(action) is None

    @pytest.mark.parametrize(
        "action",
        [
            {"type": UPDATE_CONFIGURATION_SUBTITLE},
            {"type": UPDATE_CONFIGURATION_SUBTITLE, "payload": None},
            {"type": UPDATE_CONFIGURATION_SUBTITLE, "payload": ""},
            {"type": UPDATE_CONFIGURATION_SUBTITLE, "payload": 42},
        ],
    )
    def test_update_configuration_subtitle_ignored(self, action):
        """Test missing, null and non-string organization names."""
        assert event_from_action(action) is None

    def test_missing_subtitle_payload_leaves_index_unchanged(self):
        """Test that no "Organization: None" subtitle reaches the index."""
        state = {"cfg": MenuNode(id="cfg", text="Administration")}

        event = event_from_action({"type": UPDATE_CONFIGURATION_SUBTITLE})

        assert update_nav_index(state, event) is state
        assert state["cfg"].sub_title is None

    def test_missing_node_payload_leaves_index_unchanged(self):
        state = {"cfg": MenuNode(id="cfg")}

        event = event_from_action({"type": UPDATE_NAV_INDEX, "payload": None})

        assert update_nav_index(state, event) is state

    def test_strict_missing_node_payload(self):
        with pytest.raises(InvalidActionPayloadError, match="expected a menu node") as exc_info:
            event_from_action({"type": UPDATE_NAV_INDEX}, strict=True)

        assert exc_info.value.action_type == UPDATE_NAV_INDEX

    def test_strict_invalid_node_payload(self):
        with pytest.raises(InvalidActionPayloadError, match="missing string id"):
            event_from_action({"type": UPDATE_NAV_INDEX, "payload": {"text": "x"}}, strict=True)

    def test_strict_missing_organization(self):
        with pytest.raises(InvalidActionPayloadError, match="expected an organization name"):
            event_from_action({"type": UPDATE_CONFIGURATION_SUBTITLE, "payload": None}, strict=True)
