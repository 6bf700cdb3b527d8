"""
Unit tests for the style-sheet grammar.
"""
import pytest
from lark import Lark
from lark.exceptions import UnexpectedInput

from sheetcore.grammar import stylesheet_grammar


@pytest.fixture
def parser():
    """Create a parser instance for testing."""
    return Lark(stylesheet_grammar, parser='lalr')


def rule_names(tree):
    return [child.data for child in tree.children]


class TestRuleParsing:
    """Tests for style rules and declarations."""

    def test_simple_rule(self, parser):
        tree = parser.parse('.box { color: blue; }')
        assert rule_names(tree) == ['rule']

    def test_last_declaration_without_semicolon(self, parser):
        tree = parser.parse('.box { color: blue; margin: 0 auto }')
        declarations = tree.children[0].children[1:]
        assert [str(d.children[1]).strip() for d in declarations] == ['blue', '0 auto']

    def test_value_with_url_and_quotes(self, parser):
        tree = parser.parse('.a { background: url(data:image/png;base64,xx); content: "a;b"; }')
        values = [str(d.children[1]).strip() for d in tree.children[0].children[1:]]
        assert values == ['url(data:image/png;base64,xx)', '"a;b"']

    def test_module_blocks(self, parser):
        """:require, :exports and :locals parse as ordinary rules."""
        code = '''
        :require { dep: ./a; }
        :locals { x: $dep/color; }
        :exports { color: $x; button: %button; }
        '''
        tree = parser.parse(code)
        assert rule_names(tree) == ['rule', 'rule', 'rule']

    def test_placeholder_rule(self, parser):
        tree = parser.parse('%base { color: red; }')
        assert str(tree.children[0].children[0]).strip() == '%base'

    def test_comments(self, parser):
        tree = parser.parse('/* top */ .a { /* inner */ color: red; }')
        assert rule_names(tree) == ['comment', 'rule']
        assert tree.children[1].children[1].data == 'decl_comment'

    def test_comment_between_declarations(self, parser):
        tree = parser.parse('.a { color: red; /* between */ margin: 0; }')
        assert [c.data for c in tree.children[0].children[1:]] == ['declaration', 'decl_comment', 'declaration']

    def test_comment_in_page_and_keyframe(self, parser):
        tree = parser.parse('@page { /* a */ margin: 0; } @keyframes k { from { /* b */ opacity: 0; } }')
        assert rule_names(tree) == ['page', 'keyframes']

    def test_empty_source(self, parser):
        assert parser.parse('').children == []


class TestAtRuleParsing:
    """Tests for at-rules."""

    def test_media(self, parser):
        tree = parser.parse('@media screen and (max-width: 10px) { .a { color: red; } }')
        assert rule_names(tree) == ['media']

    def test_nested_groups(self, parser):
        tree = parser.parse('@supports (display: grid) { @media print { .a { b: c; } } }')
        assert tree.children[0].children[1].data == 'media'

    def test_vendor_document(self, parser):
        tree = parser.parse('@-moz-document url-prefix() { .a { b: c; } }')
        assert rule_names(tree) == ['document']

    def test_host(self, parser):
        assert rule_names(parser.parse('@host { .a { b: c; } }')) == ['host']

    def test_keyframes(self, parser):
        code = '''
        @-webkit-keyframes spin {
            from { opacity: 0; }
            50%, 100% { opacity: 1; }
        }
        '''
        tree = parser.parse(code)
        assert rule_names(tree) == ['keyframes']
        assert [f.data for f in tree.children[0].children[2:]] == ['keyframe', 'keyframe']

    def test_font_face_and_page(self, parser):
        tree = parser.parse('@font-face { font-family: x; } @page :first { margin: 0; } @page { margin: 1in; }')
        assert rule_names(tree) == ['font_face', 'page', 'page']

    def test_statements(self, parser):
        tree = parser.parse('@charset "utf-8"; @import url(a.css) screen;')
        assert rule_names(tree) == ['at_statement', 'at_statement']

    def test_custom_media_statement(self, parser):
        tree = parser.parse('@custom-media --small (max-width: 30em); .a { b: c; }')
        assert rule_names(tree) == ['at_statement', 'rule']


class TestSyntaxErrors:
    """Invalid sources are rejected."""

    def test_missing_colon(self, parser):
        with pytest.raises(UnexpectedInput):
            parser.parse('.a { color red; }')

    def test_unclosed_block(self, parser):
        with pytest.raises(UnexpectedInput):
            parser.parse('.a { color: red;')

    def test_nested_style_rule(self, parser):
        with pytest.raises(UnexpectedInput):
            parser.parse('.a { .b { color: red; } }')
