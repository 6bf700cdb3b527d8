"""
Unit tests for the style-sheet serializer.
"""
from sheetcore.nodes import Comment, Rule, Stylesheet
from sheetcore.printer import stringify
from sheetcore.transformer import parse_stylesheet


def roundtrip(source):
    return stringify(parse_stylesheet(source, 'a'))


class TestStringify:

    def test_rule(self):
        assert roundtrip('.a,.b{color:red;margin:0}') == '.a,\n.b {\n  color: red;\n  margin: 0;\n}'

    def test_rules_separated_by_blank_line(self):
        assert roundtrip('.a { b: c; } .d { e: f; }') == '.a {\n  b: c;\n}\n\n.d {\n  e: f;\n}'

    def test_empty_rule_dropped(self):
        assert roundtrip('.empty { } .a { b: c; }') == '.a {\n  b: c;\n}'

    def test_media_indentation(self):
        expected = '@media screen {\n  .a {\n    color: red;\n  }\n\n  .b {\n    color: blue;\n  }\n}'
        assert roundtrip('@media screen { .a { color: red; } .b { color: blue; } }') == expected

    def test_keyframes(self):
        expected = (
            '@-webkit-keyframes spin {\n'
            '  from {\n    opacity: 0;\n  }\n\n'
            '  50%, to {\n    opacity: 1;\n  }\n'
            '}'
        )
        assert roundtrip('@-webkit-keyframes spin { from { opacity: 0; } 50%, to { opacity: 1; } }') == expected

    def test_at_rules(self):
        source = '@charset "utf-8"; @page :first { margin: 0; } @host { .a { b: c; } }'
        expected = (
            '@charset "utf-8";\n\n'
            '@page :first {\n  margin: 0;\n}\n\n'
            '@host {\n  .a {\n    b: c;\n  }\n}'
        )
        assert roundtrip(source) == expected

    def test_document_vendor_prefix(self):
        assert roundtrip('@-moz-document url-prefix() { .a { b: c; } }').startswith('@-moz-document url-prefix() {')

    def test_comments(self):
        sheet = Stylesheet(source='x', rules=[
            Comment(comment=' marker '),
            Rule(selectors=['.a'], declarations=[Comment(comment='c')]),
        ])
        assert stringify(sheet) == '/* marker */\n\n.a {\n  /*c*/\n}'
