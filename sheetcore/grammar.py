"""
Style-sheet Grammar Definition.

This module contains the Lark grammar for the block-syntax style sheets the
resolver consumes. It is written for the LALR parser with the contextual
lexer: selectors, property names and values are only tried where the parser
expects them.
"""

stylesheet_grammar = r"""
    start: _item*

    _item: rule
         | _at_rule
         | comment
         | ";"

    // --- Style rules ---
    rule: SELECTOR "{" _declaration_item* "}"
    _declaration_item: declaration | decl_comment | ";"
    declaration: PROPERTY ":" VALUE

    comment: COMMENT
    // Separate rule so the state after a comment in a declaration block
    // only accepts declaration-block terminals
    decl_comment: COMMENT

    // --- At-rules ---
    _at_rule: media | supports | document | host | keyframes | font_face | page | at_statement

    // Conditional groups hold whole rules
    media: "@media" PRELUDE "{" _item* "}"
    supports: "@supports" PRELUDE "{" _item* "}"
    document: DOCUMENT_KEYWORD PRELUDE "{" _item* "}"
    host: HOST_KEYWORD "{" _item* "}"

    keyframes: KEYFRAMES_KEYWORD PRELUDE "{" (keyframe | comment)* "}"
    keyframe: SELECTOR "{" _declaration_item* "}"

    // Declaration-only at-rules
    font_face: FONT_FACE_KEYWORD "{" _declaration_item* "}"
    page: PAGE_KEYWORD PRELUDE? "{" _declaration_item* "}"

    at_statement: STATEMENT_KEYWORD PRELUDE? ";"

    // --- Terminals ---
    DOCUMENT_KEYWORD: /@(-[a-z]+-)?document\b/
    KEYFRAMES_KEYWORD: /@(-[a-z]+-)?keyframes\b/
    STATEMENT_KEYWORD: /@(import|charset|namespace|custom-media)\b/
    HOST_KEYWORD: "@host"
    FONT_FACE_KEYWORD: "@font-face"
    PAGE_KEYWORD: "@page"
    SELECTOR: /[^@\s{};\/][^{};]*/
    PROPERTY: /[*_]?[-\w]+/
    VALUE: /(?:"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|\([^)]*\)|[^;{}"'(])+/
    PRELUDE: /[^{};]+/
    COMMENT: /\/\*[\s\S]*?\*\//

    %import common.WS
    %ignore WS
"""
