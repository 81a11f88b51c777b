from serp_firewall.config import FirewallConfig
from typing import Any, Callable, TypeVar
from lxml import etree as ET

N = TypeVar('N')

def _lxml_parent(node: ET._Element) -> ET._Element | None: return node.getparent()

def climb(start: N | None, predicate: Callable[[N], bool], max_depth: int, boundary: Any = None,
          parent: Callable[[N], N | None] = _lxml_parent) -> N | None:
    '''bounded ancestor search over any tree: inspects start and its ancestors, max_depth nodes at most.
    A node whose parent is boundary wins over the predicate; None when depth or chain runs out.'''
    cur = start
    steps = 0
    while cur is not None and steps < max_depth:
        up = parent(cur)
        if boundary is not None and up is boundary: return cur  # direct child under the zone root
        if predicate(cur): return cur
        cur = up
        steps += 1
    return None  # fail-open: the header is left untouched

def find_module_root(header: ET._Element, boundary: ET._Element | None, config: FirewallConfig) -> ET._Element | None:
    '''climbs from a matched header to its enclosing structural module'''
    names = config.boundary_attributes
    return climb(header, lambda n: any(a in n.attrib for a in names), config.max_climb_depth, boundary)
