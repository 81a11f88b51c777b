"""
Pytest configuration and fixtures for serp_firewall tests.

The fixture page mimics the layout of a rendered results page: chrome and ads
around a ``#search`` zone holding two promotional blocks, then the organic
list ``#rso`` with a question block and a video carousel mixed in, and a
related-searches block in the ``#botstuff`` tail zone.
"""

import pytest

from serp_firewall import Document, FilterEngine

SERP_URL = "https://www.google.com/search?q=python"

SERP_HTML = """<!DOCTYPE html>
<html lang="en">
<head><title>python - Google Search</title></head>
<body>
<div id="hdtb"><a href="/search?q=python&amp;tbm=isch">Images</a></div>
<div id="main">
<div id="center_col">
<div id="tads"><div data-text-ad="1"><a href="https://ads.example.net/landing">Sponsored: Learn Python fast</a></div></div>
<div id="search">
<div id="promo-a" jscontroller="pp1"><div role="heading"><span>Popular products</span></div><a href="https://www.google.com/shopping/product/1">Python plush toy</a></div>
<div id="promo-b"><h2>Things to know</h2><a href="/search?q=python+uses">Uses of Python</a></div>
<div id="rso">
<div class="g" id="r1" data-hveid="r1"><a href="https://www.python.org/"><h3>Welcome to Python.org</h3></a></div>
<div id="paa" jscontroller="paa1" data-hveid="r2"><div><span>People also ask</span></div><div>What is Python used for?</div></div>
<div id="vid" data-hveid="r3"><h3>Videos 3</h3><a href="https://www.youtube.com/watch?v=1">Python in 100 seconds</a></div>
<div class="g" id="r4" data-hveid="r4"><a href="https://en.wikipedia.org/wiki/Python_(programming_language)"><h3>Python (programming language)</h3></a></div>
</div>
</div>
<div id="botstuff"><div id="rs" data-hveid="r5"><h3>Related searches</h3><a href="/search?q=python+download">python download</a></div></div>
<div id="foot"><a href="/search?q=python&amp;start=10">Next</a></div>
</div>
<div id="rhs"><div>Knowledge panel</div></div>
</div>
</body>
</html>
"""

# Ids of everything the phrase rules and the inspection-order rule hide
HIDDEN_BY_RUN = {"promo-a", "promo-b", "paa", "vid", "rs"}


@pytest.fixture
def serp_doc() -> Document:
    """A freshly parsed fixture page."""
    return Document.from_html(SERP_HTML, url=SERP_URL)


@pytest.fixture
def engine(serp_doc) -> FilterEngine:
    """Engine with the default rules and configuration."""
    return FilterEngine(serp_doc)


def hidden_ids(engine: FilterEngine) -> set[str]:
    """Ids of the nodes currently in the engine's HiddenSet."""
    return {node.get("id") for node in engine.hidden}


def marked_ids(doc: Document, marker: str = "data-gcf-hidden") -> set[str]:
    """Ids of every node carrying the marker attribute in the tree."""
    return {el.get("id") for el in doc.root.iter() if isinstance(el.tag, str) and marker in el.attrib}
