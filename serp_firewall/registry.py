from serp_firewall.filters.filter_header import *  # Header phrase tables
from serp_firewall.filters.filter_id import TAIL_ZONE_ID
from serp_firewall.filters.filter_tag import HEADER_TAG
from serp_firewall.document import Document
from dataclasses import dataclass
from typing import Iterable, Iterator
from lxml import etree as ET
from enum import Enum

RESULTS_ZONE = 'results'
TAIL_ZONES = TAIL_ZONE_ID  # zone names are the zone ids

class MatchMode(Enum):
    EXACT = 'exact'
    PREFIX = 'prefix'  # equality or startswith; tolerates trailing counts/links

@dataclass(frozen=True)
class Rule:
    category: str
    phrases: frozenset[str]
    match_mode: MatchMode = MatchMode.PREFIX
    zones: tuple[str, ...] = (RESULTS_ZONE,)  # zone names searched, in order
    bounded: bool = True  # climb stops at the zone root's direct child

    def __post_init__(self):
        if not self.phrases: raise ValueError(f'rule {self.category!r} has no phrase variants')


class RuleRegistry:
    '''immutable table: category -> rule, iterated in table order'''

    def __init__(self, rules: Iterable[Rule]):
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            if rule.category in self._rules: raise ValueError(f'duplicate category {rule.category!r}')
            self._rules[rule.category] = rule

    @classmethod
    def default(cls) -> 'RuleRegistry':
        '''results-zone categories first, then the tail categories'''
        rules = [Rule(c, frozenset(HEADERS[c])) for c in RESULTS_CATEGORIES]
        rules += [Rule(c, frozenset(HEADERS[c]), zones=(*TAIL_ZONES, RESULTS_ZONE), bounded=False) for c in TAIL_CATEGORIES]
        return cls(rules)

    def get(self, category: str) -> Rule: return self._rules[category]  # KeyError for unknown categories

    def categories(self) -> list[str]: return list(self._rules)

    def __iter__(self) -> Iterator[Rule]: return iter(self._rules.values())

    def __len__(self) -> int: return len(self._rules)

    def __contains__(self, category: str) -> bool: return category in self._rules


def match_text(text: str, rule: Rule) -> bool:
    '''case-sensitive, variant-exhaustive header match on already trimmed text'''
    if not text: return False
    for phrase in rule.phrases:
        if text == phrase: return True
        if rule.match_mode is MatchMode.PREFIX and text.startswith(phrase): return True
    return False

def find_headers(document: Document, zone: ET._Element, rule: Rule, tags: Iterable[str] = HEADER_TAG) -> list[ET._Element]:
    '''all text-bearing nodes inside zone whose trimmed text matches the rule'''
    if zone is None: return []
    out = []
    for el in document.descendants(zone, tags):
        t = document.text_of(el).strip()
        if not t: continue  # skip empty nodes
        if match_text(t, rule): out.append(el)
    return out
