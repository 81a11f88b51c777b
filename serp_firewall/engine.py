from serp_firewall.structural import blocks_before_first_organic
from serp_firewall.registry import RuleRegistry, Rule, find_headers, RESULTS_ZONE
from serp_firewall.locator import find_module_root
from serp_firewall.guard import is_unsafe_to_hide
from serp_firewall.config import FirewallConfig
from serp_firewall.document import Document
from dataclasses import dataclass
from typing import Iterator
from lxml import etree as ET
import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MatchResult:
    header: ET._Element  # node whose text matched a phrase variant
    module: ET._Element  # enclosing module root that gets the marker
    category: str  # rule that produced the match


class FilterEngine:
    '''applies the phrase rules and the inspection-order rule to one document; owns its HiddenSet'''

    def __init__(self, document: Document, registry: RuleRegistry | None = None, config: FirewallConfig | None = None):
        self.document = document
        self.registry = registry or RuleRegistry.default()
        self.config = config or FirewallConfig()
        self._hidden: dict[int, ET._Element] = {}  # id(node) -> node; side-table of marked nodes
        self._owns_overlay = False  # True once this engine inserted the stylesheet

    @property
    def hidden(self) -> frozenset[ET._Element]: return frozenset(self._hidden.values())

    def is_hidden(self, node: ET._Element) -> bool: return id(node) in self._hidden

    # --- zones ---------------------------------------------------------------
    def results_root(self) -> ET._Element | None:
        '''first present of #search, #center_col, #main, then <main>'''
        for id_ in self.config.results_root_ids:
            if (el := self.document.by_id(id_)) is not None: return el
        if self.config.results_root_tag: return self.document.by_tag(self.config.results_root_tag)
        return None

    def zones(self) -> dict[str, ET._Element]:
        '''fixed order: results, then the tail zones; absent zones are left out'''
        out: dict[str, ET._Element] = {}
        if (results := self.results_root()) is not None: out[RESULTS_ZONE] = results
        for id_ in self.config.tail_zone_ids:
            if (el := self.document.by_id(id_)) is not None: out[id_] = el
        return out

    # --- phrase rules ---------------------------------------------------------
    def matches(self, zones: dict[str, ET._Element] | None = None) -> Iterator[MatchResult]:
        '''every (header, module) pair that survives the locator and the safety guard'''
        zones = self.zones() if zones is None else zones
        for rule in self.registry:
            yield from self._rule_matches(rule, zones)

    def _rule_matches(self, rule: Rule, zones: dict[str, ET._Element]) -> Iterator[MatchResult]:
        seen: set[int] = set()  # a zone may be reached under two names
        for name in rule.zones:
            zone = zones.get(name)
            if zone is None or id(zone) in seen: continue  # zone root absent
            seen.add(id(zone))
            boundary = zone if rule.bounded else None
            for header in find_headers(self.document, zone, rule, self.config.header_tags):
                module = find_module_root(header, boundary, self.config)
                if module is None: continue  # no boundary within depth
                if is_unsafe_to_hide(module, self.config): continue  # guard rejected
                yield MatchResult(header, module, rule.category)

    def apply(self) -> int:
        '''marks every safe module; idempotent. Returns the number of matches'''
        zones = self.zones()
        if not zones: return 0  # fail-open: nothing to search, nothing written
        self._ensure_overlay()
        count = 0
        for match in self.matches(zones):
            self._mark(match.module)
            count += 1
        logger.debug('phrase rules: %d match(es), %d node(s) hidden', count, len(self._hidden))
        return count

    # --- inspection-order rule -------------------------------------------------
    def apply_structural(self) -> int:
        '''marks every block preceding the first organic block of the results zone'''
        zone = self.results_root()
        blocks = blocks_before_first_organic(self.document, zone, self.config)
        if not blocks: return 0  # no organic anchor: no-op
        self._ensure_overlay()
        count = 0
        # same guard as the phrase rules; guard_structural=False marks by order alone
        for block in blocks:
            if self.config.guard_structural and is_unsafe_to_hide(block, self.config):
                logger.debug('structural rule: skipped protected block <%s id=%r>', block.tag, block.get('id'))
                continue
            self._mark(block)
            count += 1
        logger.debug('structural rule: %d block(s) before first organic result', count)
        return count

    def run(self) -> int:
        '''one full re-application step: phrase rules, then the inspection-order rule'''
        return self.apply() + self.apply_structural()

    # --- undo ----------------------------------------------------------------
    def clear(self) -> None:
        '''removes the overlay and the marker from exactly the HiddenSet'''
        if self._owns_overlay: self.document.remove_style(self.config.style_id)
        self._owns_overlay = False
        for node in self._hidden.values(): self.document.remove_marker(node, self.config.marker_attribute)
        self._hidden.clear()

    def _mark(self, node: ET._Element) -> None:
        '''records only markers this engine wrote; a marker put there by anyone else is left alone'''
        if self.document.set_marker(node, self.config.marker_attribute, self.config.marker_value) or id(node) in self._hidden:
            self._hidden[id(node)] = node

    def _ensure_overlay(self) -> None:
        if self.document.by_id(self.config.style_id) is not None: return  # present, ours or not
        self.document.insert_style(self.config.style_id, self.config.overlay_css())
        self._owns_overlay = True
