"""
Module loader and per-load cache.

A LoadSession owns everything one top-level load touches: the module table
supplied by the caller, the arena of resolved module records keyed by
canonical path, and the ordered list of placeholder rules hoisted at the end.
"""
import logging
from typing import Dict, Optional

from pydantic import BaseModel

from sheetcore.errors import CircularRequire, ModuleNotFound
from sheetcore.nodes import Stylesheet
from sheetcore.transformer import parse_stylesheet
from sheetcore.values import ExportValue
from sheetcore.walker import RuleWalker
from sheetcore.whitespace import normalize

logger = logging.getLogger(__name__)

DEFAULT_ENTRY = "index"


class ModuleRecord(BaseModel):
    """A loaded module and its symbol tables."""
    path: str
    source: str
    raw: str = ""
    stylesheet: Optional[Stylesheet] = None
    requires: Dict[str, str] = {}  # alias -> canonical path in the session cache
    exports: Dict[str, ExportValue] = {}
    locals: Dict[str, str] = {}


class LoadSession:
    """
    One resolution run over a module table.

    The table maps a specifier either to a zero-argument callable returning
    source text (optionally with a ``source`` attribute naming it) or to
    another specifier.
    """

    def __init__(self, modules):
        self.modules = modules
        self.cache = {}
        self.placeholders = []
        self._loading = []

    def load(self, path, position=None, parent=None):
        """Return the resolved record for ``path``, loading it on first use."""
        if path in self.cache:
            return self.cache[path]
        if path in self._loading:
            chain = self._loading[self._loading.index(path):] + [path]
            raise CircularRequire(chain, position)

        entry = self.modules.get(path)
        # try it as a vendored dependency of the requiring package
        if entry is None and parent:
            entry = self.modules.get(f"{parent}/deps/{path}")
        if entry is None:
            raise ModuleNotFound(path, position)

        if isinstance(entry, str):
            logger.debug("%s is an alias of %s", path, entry)
            return self.load(entry, position)

        source = getattr(entry, 'source', None) or path
        logger.debug("loading %s (source %s)", path, source)
        raw = entry()
        record = ModuleRecord(path=path, source=source, raw=raw)
        stylesheet = parse_stylesheet(normalize(raw), source)

        self._loading.append(path)
        try:
            rules = RuleWalker(self, record).walk(stylesheet.rules)
        finally:
            self._loading.pop()

        record.stylesheet = stylesheet.model_copy(update={'rules': rules})
        self.cache[path] = record
        return record

    def hoist_placeholders(self, stylesheet):
        """Prepend every collected placeholder rule to ``stylesheet``."""
        if not self.placeholders:
            return stylesheet
        logger.debug("hoisting %d placeholder rule(s)", len(self.placeholders))
        return stylesheet.model_copy(update={'rules': self.placeholders + stylesheet.rules})


def resolve_modules(modules, entry=DEFAULT_ENTRY):
    """
    Load ``entry`` from ``modules`` and return the merged Stylesheet.

    Raises:
        StyleModuleError: On the first unresolved module, alias, export or
            variable, or on a syntax error in any module
    """
    session = LoadSession(modules)
    record = session.load(entry)
    return session.hoist_placeholders(record.stylesheet)
