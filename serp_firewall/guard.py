from serp_firewall.config import FirewallConfig
from serp_firewall.document import get_tag
from lxml import etree as ET

def is_unsafe_to_hide(node: ET._Element | None, config: FirewallConfig) -> bool:
    '''True for any candidate that is, or contains, primary content'''
    if node is None or not (tag := get_tag(node)): return True  # not an element
    if tag in config.never_hide_tags: return True  # whole page
    id_val = (node.get('id') or '').strip().lower()
    if id_val in config.protected_ids: return True  # whole-results containers
    if id_val == config.organic_list_id: return True  # the organic list itself
    return _contains_id(node, config.organic_list_id)  # anything wrapping the organic list

def _contains_id(node: ET._Element, id_: str) -> bool:
    '''checks the subtree of node (node excluded) for an element with the id'''
    return bool(node.xpath('descendant::*[@id=$v][1]', v=id_))
