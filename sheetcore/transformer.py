"""
Style-sheet Transformer - Converts Lark parse trees to pydantic nodes.

This module contains the StylesheetTransformer class and ``parse_stylesheet``,
the entry point used by the loader to turn normalized source text into a
``Stylesheet`` tagged with its source name.
"""
import re
from functools import lru_cache

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from sheetcore.errors import StyleSyntaxError
from sheetcore.grammar import stylesheet_grammar
from sheetcore.nodes import (
    AtBlock,
    AtStatement,
    Comment,
    Declaration,
    GroupRule,
    Keyframe,
    Keyframes,
    Position,
    Rule,
    Stylesheet,
)

VENDOR_PATTERN = re.compile(r'@(-[a-z]+-)?')


def split_selectors(text):
    """Split a selector list on top-level commas, ignoring commas in () and []."""
    selectors = []
    depth = 0
    current = []
    for char in text:
        if char in '([':
            depth += 1
        elif char in ')]':
            depth = max(depth - 1, 0)
        if char == ',' and depth == 0:
            selectors.append(''.join(current))
            current = []
            continue
        current.append(char)
    selectors.append(''.join(current))
    return [' '.join(s.split()) for s in selectors if s.strip()]


class StylesheetTransformer(Transformer):
    """
    Transforms a stylesheet parse tree into ``sheetcore.nodes`` models.

    Rules, declarations and at-rules get a Position built from the first
    token of the node and the source name given to the constructor.
    """

    def __init__(self, source):
        super().__init__()
        self.source = source

    def _position(self, token):
        return Position(source=self.source, line=token.line, column=token.column)

    def start(self, items):
        return Stylesheet(source=self.source, rules=list(items))

    def rule(self, args):
        selector, *declarations = args
        return Rule(
            selectors=split_selectors(selector),
            declarations=declarations,
            position=self._position(selector),
        )

    def declaration(self, args):
        prop, value = args
        return Declaration(property=str(prop), value=str(value).strip(), position=self._position(prop))

    def comment(self, args):
        token = args[0]
        return Comment(comment=str(token)[2:-2], position=self._position(token))

    decl_comment = comment

    def media(self, args):
        prelude, *rules = args
        return GroupRule(type="media", prelude=prelude.strip(), rules=rules, position=self._position(prelude))

    def supports(self, args):
        prelude, *rules = args
        return GroupRule(type="supports", prelude=prelude.strip(), rules=rules, position=self._position(prelude))

    def document(self, args):
        keyword, prelude, *rules = args
        return GroupRule(
            type="document",
            vendor=self._vendor(keyword),
            prelude=prelude.strip(),
            rules=rules,
            position=self._position(keyword),
        )

    def host(self, args):
        keyword, *rules = args
        return GroupRule(type="host", rules=rules, position=self._position(keyword))

    def keyframes(self, args):
        keyword, name, *frames = args
        return Keyframes(
            name=name.strip(),
            vendor=self._vendor(keyword),
            keyframes=frames,
            position=self._position(keyword),
        )

    def keyframe(self, args):
        selector, *declarations = args
        return Keyframe(
            values=split_selectors(selector),
            declarations=declarations,
            position=self._position(selector),
        )

    def font_face(self, args):
        keyword, *declarations = args
        return AtBlock(type="font-face", declarations=declarations, position=self._position(keyword))

    def page(self, args):
        keyword, *args = args
        prelude = ""
        if args and isinstance(args[0], Token) and args[0].type == "PRELUDE":
            prelude, *args = args
        return AtBlock(
            type="page",
            prelude=prelude.strip(),
            declarations=args,
            position=self._position(keyword),
        )

    def at_statement(self, args):
        keyword = args[0]
        prelude = args[1].strip() if len(args) > 1 else ""
        return AtStatement(keyword=keyword[1:], prelude=prelude, position=self._position(keyword))

    @staticmethod
    def _vendor(keyword):
        match = VENDOR_PATTERN.match(keyword)
        if match is None:
            return ""
        return match.group(1) or ""


@lru_cache(maxsize=None)
def get_parser():
    """Build the LALR parser once per process."""
    return Lark(stylesheet_grammar, parser='lalr')


def parse_stylesheet(text, source):
    """
    Parse block-syntax source text into a Stylesheet.

    Args:
        text: Normalized style-sheet source
        source: Name recorded on the stylesheet and on every position

    Raises:
        StyleSyntaxError: If the text does not match the grammar
    """
    try:
        tree = get_parser().parse(text)
    except UnexpectedInput as e:
        position = None
        if getattr(e, 'line', -1) > 0:
            position = Position(source=source, line=e.line, column=e.column)
        raise StyleSyntaxError("syntax error", position) from e
    return StylesheetTransformer(source).transform(tree)
