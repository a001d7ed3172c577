"""
Recursive queries over a directive subtree.
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..utils.naming import snake_case

if TYPE_CHECKING:
    from .directive import Directive


def matching(
    directives: Iterable["Directive"],
    name: str | None = None,
    value: str | None = None,
) -> list["Directive"]:
    """Filter directives by canonical name and exact value, keeping order."""
    if name is not None:
        name = snake_case(name)

    return [
        d for d in directives
        if (name is None or d.name == name) and (value is None or d.value == value)
    ]


def walk(node: "Directive") -> Iterator["Directive"]:
    """Yield every descendant of node, parents before their children."""
    for child in node.children:
        yield child
        yield from walk(child)


def search(
    node: "Directive",
    name: str | None = None,
    value: str | None = None,
) -> list["Directive"]:
    """
    Collect every directive in the subtree matching name/value.

    Direct children of node come first, followed by the matches found in
    each child's subtree, child by child in declaration order:

        server {
            location / { location /a {} }
            location /b {}
        }

    search(server, "location") -> ["/", "/b", "/a"]
    """
    found = matching(node.children, name, value)

    for child in node.children:
        found.extend(search(child, name, value))

    return found


def find(
    node: "Directive",
    name: str | None = None,
    value: str | None = None,
) -> "Directive | None":
    """Get the first result of search(), or None."""
    results = search(node, name, value)
    return results[0] if results else None
