"""Top-level menu definition."""

from __future__ import annotations

from . import nav_entry
from .admin import CFG_NAV


DEFAULT_NAV_TREE = [
    nav_entry("home", "Home", url="/", icon="home-alt"),
    nav_entry(
        "dashboards",
        "Dashboards",
        url="/dashboards",
        icon="apps",
        sub_title="Create and manage dashboards to visualize your data",
        children=[
            nav_entry("dashboards/browse", "Browse", url="/dashboards", icon="sitemap"),
            nav_entry("dashboards/playlists", "Playlists", url="/playlists", icon="presentation-play"),
            nav_entry("dashboards/snapshots", "Snapshots", url="/dashboard/snapshots", icon="camera"),
        ],
    ),
    nav_entry("explore", "Explore", url="/explore", icon="compass"),
    CFG_NAV,
]
