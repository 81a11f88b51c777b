from serp_firewall.filters.filter_tag import INVISIBLE_TAG
from serp_firewall.config import FirewallConfig
from serp_firewall.document import Document
from bs4 import BeautifulSoup

def visible_text(document: Document, config: FirewallConfig | None = None) -> str:
    '''text a reader would see: markers and overlay rules only take effect while the overlay is present'''
    config = config or FirewallConfig()
    soup = BeautifulSoup(document.serialize(), "html.parser")
    overlay_on = soup.find(id=config.style_id) is not None
    for t in soup.find_all(list(INVISIBLE_TAG)): t.decompose()
    if overlay_on:
        for t in soup.select(', '.join(config.overlay_selectors())):
            if not t.decomposed: t.decompose()  # nested matches go with their ancestor
    return soup.get_text(' ', strip=True)
