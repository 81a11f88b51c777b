"""
Static configuration for the firewall.

Every table lives in ``serp_firewall/filters``; ``FirewallConfig`` bundles
them so an engine instance can be built with its own tables. Configuration is
loaded once and not changed afterwards.

Example:
    >>> config = FirewallConfig(max_climb_depth=12)
    >>> engine = FilterEngine(document, config=config)
"""

from dataclasses import dataclass

from serp_firewall.filters.filter_attribute import *
from serp_firewall.filters.filter_id import *
from serp_firewall.filters.filter_tag import *

DEFAULT_MAX_CLIMB_DEPTH = 18

# sessionStorage-style key; values are "0" / "1"
SESSION_KEY = "gcf_enabled"

# Floating control look, kept from the original userscript
TOGGLE_STYLE = (
    "position: fixed; right: 14px; bottom: 14px; z-index: 999999; "
    "padding: 8px 10px; "
    "font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; "
    "font-size: 12px; font-weight: 700; background: #111; color: #fff; "
    "border: 1px solid #444; border-radius: 6px; cursor: pointer; opacity: 0.75"
)

# Host labels that make a link internal to the search site
INTERNAL_HOST_LABELS = {
    "google",
    "gstatic",
    "googleusercontent",
    "googleadservices",
    "doubleclick",
}


@dataclass
class FirewallConfig:
    """
    Configuration for one firewall instance.

    All options have defaults taken from the filter tables.
    """

    # Climbing
    max_climb_depth: int = DEFAULT_MAX_CLIMB_DEPTH
    boundary_attributes: tuple[str, ...] = BOUNDARY_ATTR

    # Zones
    results_root_ids: tuple[str, ...] = RESULTS_ROOT_ID
    results_root_tag: str = RESULTS_ROOT_TAG
    tail_zone_ids: tuple[str, ...] = TAIL_ZONE_ID
    observer_root_id: str = OBSERVER_ROOT_ID

    # Header matching
    header_tags: tuple[str, ...] = HEADER_TAG

    # Safety guard
    protected_ids: frozenset[str] = frozenset(PROTECTED_ID)
    never_hide_tags: frozenset[str] = frozenset(NEVER_HIDE_TAG)
    organic_list_id: str = ORGANIC_LIST_ID
    guard_structural: bool = True  # also guard blocks found by document order

    # Structural position rule
    promo_container_ids: frozenset[str] = frozenset(PROMO_CONTAINER_ID)
    promo_attributes: frozenset[str] = frozenset(PROMO_ATTR)
    internal_host_labels: frozenset[str] = frozenset(INTERNAL_HOST_LABELS)

    # What the engine writes
    marker_attribute: str = MARKER_ATTR
    marker_value: str = MARKER_VALUE
    style_id: str = STYLE_ID
    overlay_hide_ids: tuple[str, ...] = OVERLAY_HIDE_ID

    # Toggle
    toggle_id: str = TOGGLE_ID
    toggle_style: str = TOGGLE_STYLE
    session_key: str = SESSION_KEY

    def __post_init__(self):
        """Validate configuration."""
        if self.max_climb_depth < 1:
            raise ValueError(f"max_climb_depth must be >= 1, got {self.max_climb_depth}")
        if not self.marker_attribute or not self.marker_attribute.strip():
            raise ValueError("marker_attribute must be a non-empty attribute name")
        if not self.results_root_ids and not self.results_root_tag:
            raise ValueError("at least one results root id or tag is required")

    @property
    def marker_selector(self) -> str:
        '''CSS selector matching every marked node'''
        return f"[{self.marker_attribute}]"

    def overlay_selectors(self) -> list[str]:
        '''selectors hidden while the overlay is present'''
        return [self.marker_selector] + [f"#{i}" for i in self.overlay_hide_ids]

    def overlay_css(self) -> str:
        '''stylesheet text of the overlay resource'''
        lines = ["/* Internal hide marker */", f"{self.marker_selector} {{ display: none !important; }}"]
        if self.overlay_hide_ids:
            lines.append("/* Chrome, right rail, ads (layout-dependent; best-effort) */")
            lines.append(",\n".join(f"#{i}" for i in self.overlay_hide_ids) + " { display: none !important; }")
        return "\n" + "\n".join(lines) + "\n"
