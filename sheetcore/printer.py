"""
Serializer for resolved style sheets.

Output uses two-space indentation, one declaration per line and a blank
line between top-level nodes. Rules left without declarations are dropped.
"""
from sheetcore.nodes import AtBlock, AtStatement, Comment, Declaration, GroupRule, Keyframes, Rule

INDENT = '  '


def _declarations(items, level):
    pad = INDENT * level
    lines = []
    for item in items:
        if isinstance(item, Comment):
            lines.append(f"{pad}/*{item.comment}*/")
        elif isinstance(item, Declaration):
            lines.append(f"{pad}{item.property}: {item.value};")
    return lines


def _block(header, body, level):
    pad = INDENT * level
    return f"{pad}{header} {{\n" + "\n".join(body) + f"\n{pad}}}"


def _nodes(nodes, level):
    return [text for text in (_node(node, level) for node in nodes) if text]


def _node(node, level):
    pad = INDENT * level
    if isinstance(node, Comment):
        return f"{pad}/*{node.comment}*/"
    if isinstance(node, Rule):
        if not node.declarations:
            return ""
        selectors = f",\n{pad}".join(node.selectors)
        return _block(selectors, _declarations(node.declarations, level + 1), level)
    if isinstance(node, GroupRule):
        header = f"@{node.vendor}{node.type}"
        if node.prelude:
            header += f" {node.prelude}"
        return _block(header, ["\n\n".join(_nodes(node.rules, level + 1))], level)
    if isinstance(node, Keyframes):
        frames = []
        for frame in node.keyframes:
            if isinstance(frame, Comment):
                frames.append(f"{INDENT * (level + 1)}/*{frame.comment}*/")
            else:
                frames.append(_block(", ".join(frame.values), _declarations(frame.declarations, level + 2), level + 1))
        return _block(f"@{node.vendor}keyframes {node.name}", ["\n\n".join(frames)], level)
    if isinstance(node, AtBlock):
        header = f"@{node.type}"
        if node.prelude:
            header += f" {node.prelude}"
        return _block(header, _declarations(node.declarations, level + 1), level)
    if isinstance(node, AtStatement):
        prelude = f" {node.prelude}" if node.prelude else ""
        return f"{pad}@{node.keyword}{prelude};"
    raise TypeError(f"cannot print node of type {type(node).__name__}")


def stringify(stylesheet):
    """Serialize a Stylesheet to text."""
    return "\n\n".join(_nodes(stylesheet.rules, 0))
