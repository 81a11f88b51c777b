from dataclasses import dataclass
from urllib.parse import urlparse
from typing import Callable, Iterable, Iterator
from lxml import etree as ET
import copy
import html5lib

CHILD_LIST = 'childList'
ATTRIBUTES = 'attributes'
CHARACTER_DATA = 'characterData'

@dataclass(frozen=True)
class MutationRecord:
    type: str  # childList / attributes / characterData
    target: ET._Element  # node whose children, attribute or text changed
    added: tuple = ()  # nodes added (childList only)
    removed: tuple = ()  # nodes removed (childList only)
    attribute_name: str | None = None  # attributes only


class MutationObserver:
    '''subscribes a callback to the mutation records of one bounded root'''

    def __init__(self, callback: Callable[[list[MutationRecord], 'MutationObserver'], None]):
        self._callback = callback
        self._document: 'Document | None' = None
        self._root: ET._Element | None = None
        self._types: frozenset[str] = frozenset()
        self._subtree = False

    def observe(self, document: 'Document', root: ET._Element, child_list: bool = True, attributes: bool = False,
                character_data: bool = False, subtree: bool = True) -> None:
        self.disconnect()  # one subscription per observer
        types = {CHILD_LIST: child_list, ATTRIBUTES: attributes, CHARACTER_DATA: character_data}
        self._types = frozenset(t for t, on in types.items() if on)
        self._subtree = subtree
        self._root = root
        self._document = document
        document._observers.append(self)

    def disconnect(self) -> None:
        if self._document is not None and self in self._document._observers: self._document._observers.remove(self)
        self._document = None
        self._root = None

    @property
    def observing(self) -> bool: return self._document is not None

    def _accepts(self, record: MutationRecord) -> bool:
        '''filters by record type and by scope (root, plus its subtree when requested)'''
        if record.type not in self._types: return False
        if record.target is self._root: return True
        return self._subtree and self._document.contains(self._root, record.target)

    def _deliver(self, records: list[MutationRecord]) -> None: self._callback(records, self)


class Document:
    '''Adapter over the host's lxml tree: bounded read queries plus a few narrow writes'''

    def __init__(self, tree: ET._ElementTree, url: str | None = None):
        self.tree = tree
        self.url = url
        self._observers: list[MutationObserver] = []

    @classmethod
    def from_html(cls, html: str, url: str | None = None) -> 'Document':
        '''creates a correct working lxml tree'''
        return cls(html5lib.parse(html, treebuilder='lxml', namespaceHTMLElements=False), url)

    # --- reads -------------------------------------------------------------
    @property
    def root(self) -> ET._Element: return self.tree.getroot()

    @property
    def host(self) -> str:
        if not self.url: return ''
        return (urlparse(self.url).hostname or '').lower()

    @property
    def head(self) -> ET._Element | None: return self.root.find('head')

    @property
    def body(self) -> ET._Element | None: return self.root.find('body')

    def by_id(self, id_: str) -> ET._Element | None:
        '''first element carrying the id, like getElementById'''
        hits = self.root.xpath('descendant-or-self::*[@id=$v][1]', v=id_)
        return hits[0] if hits else None

    def by_tag(self, tag: str) -> ET._Element | None: return next(self.root.iter(tag), None)

    def descendants(self, root: ET._Element, tags: Iterable[str]) -> Iterator[ET._Element]:
        '''descendants of root (root excluded) with one of the tags, in document order'''
        return root.iterdescendants(*tags)

    def text_of(self, node: ET._Element) -> str: return ''.join(node.itertext())  # textContent, comments excluded

    def ancestors(self, node: ET._Element) -> Iterator[ET._Element]: return node.iterancestors()

    def preceding_siblings(self, node: ET._Element) -> list[ET._Element]:
        '''element siblings before node, nearest first'''
        return [s for s in node.itersiblings(preceding=True) if isinstance(s.tag, str)]

    def contains(self, ancestor: ET._Element, node: ET._Element) -> bool:
        '''True if node lies strictly inside ancestor'''
        return any(a is ancestor for a in node.iterancestors())

    def has_any_attribute(self, node: ET._Element, names: Iterable[str]) -> bool:
        return any(n in node.attrib for n in names)

    # --- narrow writes -----------------------------------------------------
    def set_marker(self, node: ET._Element, name: str, value: str = '1') -> bool:
        '''sets the marker attribute; False if it was already set'''
        if node.get(name) == value: return False
        node.set(name, value)
        self._emit(MutationRecord(ATTRIBUTES, node, attribute_name=name))
        return True

    def remove_marker(self, node: ET._Element, name: str) -> bool:
        if name not in node.attrib: return False
        del node.attrib[name]
        self._emit(MutationRecord(ATTRIBUTES, node, attribute_name=name))
        return True

    def insert_style(self, style_id: str, css: str) -> ET._Element:
        '''adds <style id=...> to <head> (else the document element) unless present'''
        style = self.by_id(style_id)
        if style is not None: return style
        style = ET.Element('style', id=style_id, type='text/css')
        style.text = css
        parent = self.head if self.head is not None else self.root
        self.append_child(parent, style)
        return style

    def remove_style(self, style_id: str) -> bool:
        style = self.by_id(style_id)
        if style is None or style.getparent() is None: return False
        self.remove_child(style.getparent(), style)
        return True

    def set_text(self, node: ET._Element, text: str) -> None:
        if node.text == text: return
        node.text = text
        self._emit(MutationRecord(CHARACTER_DATA, node))

    # --- host mutations (late-injected content) ------------------------------
    def append_child(self, parent: ET._Element, child: ET._Element) -> ET._Element:
        parent.append(child)
        self._emit(MutationRecord(CHILD_LIST, parent, added=(child,)))
        return child

    def insert_before(self, parent: ET._Element, child: ET._Element, ref: ET._Element | None) -> ET._Element:
        if ref is None: return self.append_child(parent, child)
        parent.insert(parent.index(ref), child)
        self._emit(MutationRecord(CHILD_LIST, parent, added=(child,)))
        return child

    def remove_child(self, parent: ET._Element, child: ET._Element) -> ET._Element:
        _detach(child)
        self._emit(MutationRecord(CHILD_LIST, parent, removed=(child,)))
        return child

    def inject_html(self, parent: ET._Element, fragment: str) -> list[ET._Element]:
        '''parses a body fragment and appends its elements to parent as one mutation'''
        body = html5lib.parse(fragment, treebuilder='lxml', namespaceHTMLElements=False).getroot().find('body')
        if body is None: return []
        if body.text: _append_text(parent, body.text)  # leading text of the fragment
        added = [el for el in body]
        for el in added: parent.append(el)
        if added: self._emit(MutationRecord(CHILD_LIST, parent, added=tuple(added)))
        return added

    def _emit(self, record: MutationRecord) -> None:
        for obs in list(self._observers):  # observers may disconnect while delivering
            if obs.observing and obs._accepts(record): obs._deliver([record])

    # --- output ------------------------------------------------------------
    def serialize(self, exclude_ids: Iterable[str] = ()) -> str:
        '''HTML of the whole tree, optionally without the elements carrying the given ids'''
        root = copy.deepcopy(self.root)
        for id_ in exclude_ids:
            for el in root.xpath('descendant::*[@id=$v]', v=id_): _detach(el)
        return ET.tostring(root, method='html', encoding='unicode')


def get_tag(node) -> str:
    '''returns the tag of the node in lowercase'''
    if node is not None and isinstance(node.tag, str): return node.tag.lower()
    else: return ''  # comment, PI or no node

def _append_text(parent: ET._Element, text: str) -> None:
    '''appends text after the last child of parent'''
    if len(parent): parent[-1].tail = (parent[-1].tail or '') + text
    else: parent.text = (parent.text or '') + text

def _detach(node: ET._Element) -> None:
    '''removes node but keeps its tail text in the tree'''
    parent = node.getparent()
    if parent is None: return
    if node.tail:
        prev = node.getprevious()
        if prev is not None: prev.tail = (prev.tail or '') + node.tail
        else: parent.text = (parent.text or '') + node.tail
    node.tail = None
    parent.remove(node)
