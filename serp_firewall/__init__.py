"""
serp_firewall - reversible, subtractive cleanup of rendered search-result pages.

Hides promotional panels, interstitial modules and question blocks by header
phrase and by inspection order, never touching the organic results. Every
change is one marker attribute plus one stylesheet; turning the firewall off
removes both.

Example:
    >>> from serp_firewall import Document, Toggle
    >>> doc = Document.from_html(html, url="https://www.google.com/search?q=x")
    >>> toggle = Toggle(doc)
    >>> toggle.boot()
    >>> toggle.click()  # ON
"""

import logging

from serp_firewall.config import FirewallConfig
from serp_firewall.document import Document, MutationObserver, MutationRecord
from serp_firewall.engine import FilterEngine, MatchResult
from serp_firewall.guard import is_unsafe_to_hide
from serp_firewall.locator import climb, find_module_root
from serp_firewall.registry import MatchMode, Rule, RuleRegistry, find_headers, match_text
from serp_firewall.render import visible_text
from serp_firewall.structural import blocks_before_first_organic, first_organic_anchor, first_organic_block
from serp_firewall.toggle import SessionStore, Toggle, ToggleState
from serp_firewall.watcher import Watcher

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.2.3"

__all__ = [
    "Document",
    "FilterEngine",
    "FirewallConfig",
    "MatchMode",
    "MatchResult",
    "MutationObserver",
    "MutationRecord",
    "Rule",
    "RuleRegistry",
    "SessionStore",
    "Toggle",
    "ToggleState",
    "Watcher",
    "blocks_before_first_organic",
    "climb",
    "find_headers",
    "find_module_root",
    "first_organic_anchor",
    "first_organic_block",
    "is_unsafe_to_hide",
    "match_text",
    "visible_text",
]
