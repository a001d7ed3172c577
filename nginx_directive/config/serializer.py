"""
Serialization of directive trees.

Renders a tree back to configuration text (the inverse of the parser) and
exports it as plain dictionaries or JSON.

Output style:
    - one directive per line, children indented by a fixed number of spaces
    - opening brace on the section line, closing brace on its own line
    - comments after the terminator: ``listen 80; # public``
"""

import json
from typing import TYPE_CHECKING, Any

from ..const import DEFAULT_INDENT

if TYPE_CHECKING:
    from .directive import Directive


def _render_line(node: "Directive") -> str:
    """Build the line for a single directive, without indentation."""
    line = node.name or ""

    if node.has_value():
        line += f" {node.value}"

    if node.has_parent() and node.has_children():
        line += " {"
    elif node.name is not None:
        line += ";"

    if node.has_comment():
        line += f" # {node.comment}"
    elif node.name is None and node.comment is not None:
        # Bare "#" line
        line += " #"

    return line.strip(" ")


def _render(node: "Directive", unit: str, indentation: str) -> list[str]:
    lines = [indentation + _render_line(node)]

    section = node.has_parent() and node.has_children()
    inner = indentation + unit if node.has_parent() else indentation

    for child in node.children:
        lines.extend(_render(child, unit, inner))

    if section:
        lines.append(indentation + "}")

    return lines


def to_string(node: "Directive", indent: int = DEFAULT_INDENT) -> str:
    """
    Render a directive and its subtree as configuration text.

    The root of a tree never produces a section of its own: its children
    are written at the top level.

    Args:
        node: Directive to render
        indent: Number of spaces per nesting level

    Returns:
        Configuration text, one directive per line
    """
    if indent < 0:
        raise ValueError(f"Indent must be non-negative, got {indent}")

    text = "".join(f"{line}\n" for line in _render(node, " " * indent, ""))

    if node.is_root():
        text = text.lstrip()

    return text


def to_dict(node: "Directive") -> dict[str, Any]:
    """Export a directive and its subtree as nested dictionaries."""
    return {
        "name": node.name,
        "value": node.value,
        "comment": node.comment,
        "children": [to_dict(child) for child in node.children],
    }


def to_json(node: "Directive", **kwargs: Any) -> str:
    """Export a directive and its subtree as JSON."""
    return json.dumps(to_dict(node), **kwargs)


def from_dict(data: dict[str, Any]) -> "Directive":
    """
    Rebuild a directive tree from the output of to_dict().

    Names are taken as-is; missing keys default to None/no children.
    """
    from .directive import Directive

    return Directive(
        name=data.get("name"),
        value=data.get("value"),
        comment=data.get("comment"),
        children=[from_dict(child) for child in data.get("children", [])],
    )
