"""
Rule walker.

Classifies every rule of a module once and hands it to exactly one handler:
symbol-table builders (:require, :exports, :locals), the content splicer,
the placeholder collector, or the plain declaration path that substitutes
variables.
"""
import logging
from enum import Enum

from sheetcore.nodes import Comment, GroupRule, Keyframes, Rule
from sheetcore.paths import package_of, resolve_path
from sheetcore.values import (
    ExportReference,
    LiteralValue,
    LocalReference,
    PlaceholderReference,
    classify_value,
)
from sheetcore.variables import VariableResolver

logger = logging.getLogger(__name__)


class RuleKind(str, Enum):
    KEYFRAMES = "keyframes"
    GROUP = "group"
    REQUIRE = "require"
    CONTENT = "content"
    EXPORTS = "exports"
    LOCALS = "locals"
    PLACEHOLDER = "placeholder"
    PLAIN = "plain"


# Checked in order against the first selector of a rule
SELECTOR_KINDS = (
    (':require', RuleKind.REQUIRE),
    (':content', RuleKind.CONTENT),
    (':exports', RuleKind.EXPORTS),
    (':locals', RuleKind.LOCALS),
    ('%', RuleKind.PLACEHOLDER),
)


def classify(node):
    """Decide the kind of a top-level node."""
    if isinstance(node, Keyframes):
        return RuleKind.KEYFRAMES
    if isinstance(node, GroupRule):
        return RuleKind.GROUP
    if isinstance(node, Rule) and node.selectors:
        first = node.selectors[0]
        for prefix, kind in SELECTOR_KINDS:
            if first.startswith(prefix):
                return kind
    return RuleKind.PLAIN


def _declarations(rule):
    return [d for d in rule.declarations if not isinstance(d, Comment)]


class RuleWalker:
    """
    Rewrites the rules of one module.

    Tables are filled on the module record as blocks are met, so a name is
    only visible to the rules that follow its declaration.
    """

    def __init__(self, session, record):
        self.session = session
        self.record = record
        self.variables = VariableResolver(session, record)
        self._handlers = {
            RuleKind.KEYFRAMES: self.walk_keyframes,
            RuleKind.GROUP: self.walk_group,
            RuleKind.REQUIRE: self.bind_requires,
            RuleKind.CONTENT: self.splice_content,
            RuleKind.EXPORTS: self.build_exports,
            RuleKind.LOCALS: self.build_locals,
            RuleKind.PLACEHOLDER: self.define_placeholder,
            RuleKind.PLAIN: self.substitute_declarations,
        }

    def walk(self, rules):
        """Return the output rule list for ``rules``."""
        out = []
        for node in rules:
            self._handlers[classify(node)](node, out)
        return out

    def walk_group(self, node, out):
        out.append(node.model_copy(update={'rules': self.walk(node.rules)}))

    def walk_keyframes(self, node, out):
        frames = []
        for frame in node.keyframes:
            self.substitute_declarations(frame, frames)
        out.append(node.model_copy(update={'keyframes': frames}))

    def bind_requires(self, rule, out):
        package = package_of(self.record.path)
        for dec in _declarations(rule):
            specifier = dec.value.strip('"\'')
            target = resolve_path(self.record.path, specifier)
            module = self.session.load(target, dec.position, package)
            if dec.property in self.record.requires:
                logger.debug("%s: alias '%s' already bound, keeping first", self.record.path, dec.property)
                continue
            self.record.requires[dec.property] = module.path

    def build_exports(self, rule, out):
        for dec in _declarations(rule):
            value = classify_value(dec.value, self.record.source)
            if isinstance(value, LocalReference):
                value = LiteralValue(text=self.variables.resolve_local(value.name, dec.position, exporting=True))
            elif isinstance(value, ExportReference):
                value = self.variables.resolve_export(value, dec.position)
            self.record.exports[dec.property] = value

    def build_locals(self, rule, out):
        for dec in _declarations(rule):
            self.record.locals[dec.property] = self.variables.substitute(dec.value, dec.position)

    def splice_content(self, rule, out):
        for dec in _declarations(rule):
            alias = dec.value[1:] if dec.value.startswith('$') else dec.value
            module = self.variables.required(alias, dec.position)
            out.append(self._marker('begin', module))
            out.extend(module.stylesheet.rules)
            out.append(self._marker('end', module))

    def _marker(self, edge, module):
        return Comment(comment=f" {edge} content from {module.source} in {self.record.source} ")

    def define_placeholder(self, rule, out):
        selectors = [
            PlaceholderReference(module=self.record.source, name=s[1:]).render() if s.startswith('%') else s
            for s in rule.selectors
        ]
        self.session.placeholders.append(rule.model_copy(update={'selectors': selectors}))

    def substitute_declarations(self, node, out):
        """Plain path: substitute variables in every declaration value."""
        if not hasattr(node, 'declarations'):
            out.append(node)
            return
        declarations = [self._substitute(dec) for dec in node.declarations]
        out.append(node.model_copy(update={'declarations': declarations}))

    def _substitute(self, dec):
        if isinstance(dec, Comment):
            return dec
        if dec.value.startswith('%'):
            value = classify_value(dec.value, self.record.source).render()
        else:
            value = self.variables.substitute(dec.value, dec.position)
        return dec.model_copy(update={'value': value})
