"""
Inspection-order rule.

Everything in the results zone that comes before the first organic block is
interstitial content. The first organic block is the direct child of the zone
root holding the first link to an external site, outside any promotional
container. Only document order is used; no sizes or geometry.
"""

from urllib.parse import urlparse

from lxml import etree as ET

from serp_firewall.config import FirewallConfig
from serp_firewall.document import Document
from serp_firewall.filters.filter_tag import LINK_TAG


def is_external(href: str | None, host: str, config: FirewallConfig) -> bool:
    """True for absolute http(s) links leaving the search site."""
    if not href:
        return False
    href = href.strip()
    if href.startswith("//"):
        href = "https:" + href  # protocol-relative
    parsed = urlparse(href)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False  # relative, fragment, javascript:, mailto:
    hostname = parsed.hostname.lower()
    if host and (hostname == host or hostname.endswith("." + host.removeprefix("www."))):
        return False
    return not any(label in config.internal_host_labels for label in hostname.split("."))


def _in_promo_container(document: Document, node: ET._Element, zone: ET._Element, config: FirewallConfig) -> bool:
    for anc in document.ancestors(node):
        if (anc.get("id") or "") in config.promo_container_ids:
            return True
        if document.has_any_attribute(anc, config.promo_attributes):
            return True
        if anc is zone:
            return False
    return False


def first_organic_anchor(document: Document, zone: ET._Element | None, config: FirewallConfig) -> ET._Element | None:
    """First external link in the zone, in document order, outside promotional containers."""
    if zone is None:
        return None
    for link in document.descendants(zone, (LINK_TAG,)):
        if not is_external(link.get("href"), document.host, config):
            continue
        if _in_promo_container(document, link, zone, config):
            continue
        return link
    return None


def first_organic_block(document: Document, zone: ET._Element | None, config: FirewallConfig) -> ET._Element | None:
    """The direct child of the zone root that contains the first organic anchor."""
    anchor = first_organic_anchor(document, zone, config)
    if anchor is None:
        return None
    block = anchor
    while block.getparent() is not zone:
        block = block.getparent()
    return block


def blocks_before_first_organic(document: Document, zone: ET._Element | None, config: FirewallConfig) -> list[ET._Element]:
    """
    Element siblings preceding the first organic block, in document order.

    Empty when the zone is absent or holds no organic anchor.
    """
    block = first_organic_block(document, zone, config)
    if block is None:
        return []
    return list(reversed(document.preceding_siblings(block)))
