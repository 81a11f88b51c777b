from serp_firewall.document import MutationObserver, MutationRecord
from serp_firewall.config import FirewallConfig
from serp_firewall.engine import FilterEngine
from lxml import etree as ET
import logging, queue

logger = logging.getLogger(__name__)

class Watcher:
    '''re-applies the engine on every child-list notification under one bounded root.
    Notifications go onto a single-consumer channel; one drain loop empties it.'''

    def __init__(self, engine: FilterEngine, config: FirewallConfig | None = None):
        self.engine = engine
        self.config = config or engine.config
        self.runs = 0  # re-application count (diagnostic)
        self._channel: queue.SimpleQueue[list[MutationRecord]] = queue.SimpleQueue()
        self._observer: MutationObserver | None = None
        self._draining = False

    @property
    def active(self) -> bool: return self._observer is not None

    @property
    def pending(self) -> int: return self._channel.qsize()

    def root(self) -> ET._Element | None:
        '''#search when present, else <body>'''
        el = self.engine.document.by_id(self.config.observer_root_id)
        return el if el is not None else self.engine.document.body

    def start(self) -> bool:
        self.stop()  # never two observers at once
        root = self.root()
        if root is None: return False  # nothing to observe
        self._observer = MutationObserver(self._notify)
        self._observer.observe(self.engine.document, root, child_list=True, subtree=True)
        logger.debug('watching <%s id=%r>', root.tag, root.get('id'))
        return True

    def stop(self) -> None:
        if self._observer is None: return
        self._observer.disconnect()
        self._observer = None
        while not self._channel.empty(): self._channel.get_nowait()  # stale notifications die with the subscription

    def _notify(self, records: list[MutationRecord], observer: MutationObserver) -> None:
        if observer is not self._observer: return  # late delivery to a disconnected observer
        self._channel.put(records)
        if not self._draining: self.drain()

    def drain(self) -> int:
        '''one engine run per queued notification; returns the number of runs'''
        if self._draining: return 0  # single consumer
        self._draining = True
        done = 0
        try:
            while self.active and not self._channel.empty():
                self._channel.get_nowait()
                try: self.engine.run()
                except Exception: logger.exception('re-application failed; page left as is')  # fail-open
                done += 1
        finally: self._draining = False
        self.runs += done
        return done
