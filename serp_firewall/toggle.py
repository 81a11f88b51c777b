from serp_firewall.config import FirewallConfig
from serp_firewall.document import Document
from serp_firewall.engine import FilterEngine
from serp_firewall.watcher import Watcher
from collections.abc import MutableMapping
from typing import Iterator
from lxml import etree as ET
from enum import Enum
import logging

logger = logging.getLogger(__name__)

class ToggleState(Enum):
    OFF = '0'  # default, fail-open
    ON = '1'


class SessionStore(MutableMapping):
    '''key-value store living as long as the session object; nothing reaches disk'''

    def __init__(self, initial: dict[str, str] | None = None): self._data: dict[str, str] = dict(initial or {})
    def __getitem__(self, key: str) -> str: return self._data[key]
    def __setitem__(self, key: str, value: str) -> None: self._data[key] = str(value)
    def __delitem__(self, key: str) -> None: del self._data[key]
    def __iter__(self) -> Iterator[str]: return iter(self._data)
    def __len__(self) -> int: return len(self._data)


class Toggle:
    '''ON/OFF state machine driving the engine, the watcher and the session flag'''

    def __init__(self, document: Document, engine: FilterEngine | None = None, watcher: Watcher | None = None,
                 store: MutableMapping | None = None, config: FirewallConfig | None = None):
        self.document = document
        self.config = config or (engine.config if engine else FirewallConfig())
        self.engine = engine or FilterEngine(document, config=self.config)
        self.watcher = watcher or Watcher(self.engine, self.config)
        self.store = store if store is not None else SessionStore()
        self.state = ToggleState.ON if self.store.get(self.config.session_key) == ToggleState.ON.value else ToggleState.OFF

    @property
    def enabled(self) -> bool: return self.state is ToggleState.ON

    def boot(self) -> None:
        '''inserts the control, then restores the session state'''
        self._create_control()
        if self.enabled: self._start()
        else: self.engine.clear()  # fail-open

    def click(self) -> ToggleState:
        if self.enabled: self.turn_off()
        else: self.turn_on()
        return self.state

    def turn_on(self) -> None:
        self.state = ToggleState.ON
        self._persist()
        self._update_control()
        self._start()
        logger.debug('toggle ON: %d node(s) hidden', len(self.engine.hidden))

    def turn_off(self) -> None:
        self.state = ToggleState.OFF
        self._persist()
        self._update_control()
        self.watcher.stop()
        self.engine.clear()  # unconditional
        logger.debug('toggle OFF')

    def _start(self) -> None:
        try: self.engine.run()
        except Exception: logger.exception('initial apply failed; watcher started anyway')  # fail-open
        self.watcher.start()

    def _persist(self) -> None: self.store[self.config.session_key] = self.state.value

    # --- floating control ---------------------------------------------------
    def control(self) -> ET._Element | None: return self.document.by_id(self.config.toggle_id)

    def _label(self) -> str: return 'GCF: ON' if self.enabled else 'GCF: OFF'

    def _create_control(self) -> None:
        if self.control() is not None: return  # never inserted twice
        parent = self.document.body
        if parent is None: return
        btn = ET.Element('button', id=self.config.toggle_id, type='button', style=self.config.toggle_style)
        btn.text = self._label()
        self.document.append_child(parent, btn)

    def _update_control(self) -> None:
        btn = self.control()
        if btn is not None: self.document.set_text(btn, self._label())
