"""Administration section definitions."""

from __future__ import annotations

from . import nav_entry


CFG_NAV = nav_entry(
    "cfg",
    "Administration",
    url="/admin",
    icon="cog",
    sub_title="Organization: Main Org.",
    children=[
        nav_entry("datasources", "Data sources", url="/datasources", icon="database"),
        nav_entry("correlations", "Correlations", url="/datasources/correlations", icon="gf-glue"),
        nav_entry("users", "Users", url="/org/users", icon="user"),
        nav_entry("teams", "Teams", url="/org/teams", icon="users-alt"),
        nav_entry("plugins", "Plugins", url="/plugins", icon="plug"),
        nav_entry("org-settings", "Preferences", url="/org", icon="sliders-v-alt"),
        nav_entry("apikeys", "API keys", url="/org/apikeys", icon="key-skeleton-alt"),
    ],
)
