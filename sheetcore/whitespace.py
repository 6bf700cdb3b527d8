"""
Indentation syntax support.

Sources written without braces are converted to block syntax before parsing:
a line followed by a more indented line opens a block, every other line is a
declaration (or a block-less at-rule) and gets a trailing ';'.
"""
import re

BLOCK_SOURCE = re.compile(r'\}$')


def normalize(raw):
    """Return block syntax for ``raw``, converting it only if it does not end with '}'."""
    trimmed = raw.strip()
    if not trimmed or BLOCK_SOURCE.search(trimmed):
        return raw
    return convert(raw)


def _significant_lines(raw):
    lines = iter(raw.expandtabs(2).splitlines())
    for line in lines:
        text = line.strip()
        if not text or text.startswith('//'):
            continue
        indent = len(line) - len(line.lstrip())
        if text.startswith('/*') and '*/' not in text:
            # Comment lines up to the closing '*/' are kept verbatim
            comment = [text]
            for rest in lines:
                comment.append(rest.rstrip())
                if '*/' in rest:
                    break
            yield indent, '\n'.join(comment)
            continue
        yield indent, text


def convert(raw):
    """Convert indentation syntax to block syntax."""
    lines = list(_significant_lines(raw))
    out = []
    stack = []

    def close_until(indent):
        while stack and indent <= stack[-1]:
            stack.pop()
            out.append('  ' * len(stack) + '}')

    for i, (indent, text) in enumerate(lines):
        close_until(indent)
        pad = '  ' * len(stack)
        next_indent = lines[i + 1][0] if i + 1 < len(lines) else -1
        if text.startswith('/*') and text.endswith('*/'):
            out.append(pad + text)
        elif next_indent > indent:
            out.append(f"{pad}{text} {{")
            stack.append(indent)
        else:
            out.append(f"{pad}{text.rstrip(';')};")
    close_until(0)
    return '\n'.join(out) + '\n'
