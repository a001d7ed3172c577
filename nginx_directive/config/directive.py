"""
Configuration tree node.

Every statement, section and standalone comment of a parsed configuration
is a Directive. The parsed document itself is a nameless root Directive
whose children are the top-level entries.

    server {                      -> Directive(name="server", value=None)
        listen 80;                -> Directive(name="listen", value="80")
        location / { # static     -> Directive(name="location", value="/", comment="static")
            # cached for a day    -> Directive(name=None, value=None, comment="cached for a day")
            expires 1d;           -> Directive(name="expires", value="1d")
        }
    }
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from ..const import DEFAULT_INDENT
from ..utils.naming import snake_case
from . import query, serializer


class DirectiveError(Exception):
    """Base exception for directive tree errors."""

    pass


class UndefinedDirectiveError(DirectiveError, AttributeError):
    """Raised when a required child directive does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Undefined directive '{name}'")
        # AttributeError.__init__ resets .name
        self.name = name


class NoParentError(DirectiveError):
    """Raised when an operation needs the parent of a root directive."""

    pass


@dataclass(eq=False, repr=False)
class Directive:
    """
    A node of the configuration tree.

    Nodes compare by identity: two siblings may share name and value and
    still be different directives. Use ``to_dict()`` for structural
    comparison.

    Children can be reached as attributes, using either the canonical or
    the camel-case spelling:

        root.server.server_name.value   # same as root.must("server_name")
        root.server.serverName.value
    """

    name: str | None = None
    value: str | None = None
    comment: str | None = None
    children: list["Directive"] = field(default_factory=list)
    parent: "Directive | None" = field(default=None, init=False)

    def __post_init__(self) -> None:
        children, self.children = self.children, []
        self.extend(children)

    def __getattr__(self, name: str) -> "Directive":
        # Only called when regular attribute lookup fails
        if name.startswith("_") or "children" not in self.__dict__:
            raise AttributeError(name)
        return self.must(name)

    def __repr__(self) -> str:
        return f"Directive({self.name!r}, {self.value!r}, children={len(self.children)})"

    def __str__(self) -> str:
        if self.name is None and self.comment is not None:
            return f"# {self.comment}"
        if self.has_children():
            return self.to_string()
        return self.value or ""

    # Predicates

    def has_name(self) -> bool:
        return bool(self.name)

    def has_value(self) -> bool:
        return bool(self.value)

    def has_comment(self) -> bool:
        return bool(self.comment)

    def has_parent(self) -> bool:
        return self.parent is not None

    def is_root(self) -> bool:
        return self.parent is None

    def has(self, name: str) -> bool:
        """Check if a direct child with given name exists."""
        return self.get(name) is not None

    def has_children(
        self,
        name: str | None = None,
        value: str | None = None,
        recursive: bool = False,
    ) -> bool:
        """Check if any child matches the optional name/value filter."""
        return len(self.get_children(name, value, recursive)) > 0

    # Direct-child queries

    def get_children(
        self,
        name: str | None = None,
        value: str | None = None,
        recursive: bool = False,
    ) -> list["Directive"]:
        """
        Get children, optionally filtered by name and/or value.

        Args:
            name: Directive name (normalized before comparing)
            value: Exact value to match
            recursive: Search the whole subtree instead of direct children

        Returns:
            Matching directives in declaration order
        """
        if recursive:
            return query.search(self, name, value)
        return query.matching(self.children, name, value)

    def get(self, name: str, default: Any = None) -> Any:
        """Get first direct child with given name."""
        children = self.get_children(name)
        return children[0] if children else default

    def must(self, name: str) -> "Directive":
        """
        Get first direct child with given name.

        Raises:
            UndefinedDirectiveError: If no such child exists
        """
        directive = self.get(name)
        if directive is None:
            raise UndefinedDirectiveError(snake_case(name))
        return directive

    def siblings(self) -> list["Directive"]:
        """
        Get all directives sharing this directive's name and parent.

        The directive itself is included, in its parent's order. A root
        directive has no siblings and returns a list holding only itself.
        """
        if self.parent is None:
            return [self]
        return [d for d in self.parent.children if d.name == self.name]

    def root(self) -> "Directive":
        """Get the farthest ancestor."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    # Recursive queries

    def walk(self) -> Iterator["Directive"]:
        """Iterate over all descendants in document order."""
        return query.walk(self)

    def search(self, name: str | None = None, value: str | None = None) -> list["Directive"]:
        """Find every directive in the subtree with given name/value."""
        return query.search(self, name, value)

    def find(self, name: str | None = None, value: str | None = None) -> "Directive | None":
        """Find first directive in the subtree with given name/value."""
        return query.find(self, name, value)

    # Mutation

    def append(
        self,
        name: "Directive | str | None" = None,
        value: str | None = None,
        comment: str | None = None,
    ) -> "Directive":
        """
        Add a directive as the last child.

        Passing an existing Directive moves it here, removing it from its
        previous parent first. Otherwise a new directive is created from
        name/value/comment.

        Returns:
            The attached directive
        """
        return self.insert(len(self.children), name, value, comment)

    def prepend(
        self,
        name: "Directive | str | None" = None,
        value: str | None = None,
        comment: str | None = None,
    ) -> "Directive":
        """Add a directive as the first child (see ``append``)."""
        return self.insert(0, name, value, comment)

    def insert(
        self,
        index: int,
        name: "Directive | str | None" = None,
        value: str | None = None,
        comment: str | None = None,
    ) -> "Directive":
        """Add a directive before position ``index`` (see ``append``)."""
        if isinstance(name, Directive):
            directive = name
            if directive is self or directive in self._ancestors():
                raise ValueError("Cannot attach a directive to itself or its descendant")
            if directive.parent is not None:
                directive.parent.remove(directive)
        else:
            directive = Directive(
                name=snake_case(name) if name is not None else None,
                value=value,
                comment=comment,
            )

        directive.parent = self
        self.children.insert(index, directive)
        return directive

    def extend(self, directives: Iterable["Directive"]) -> None:
        """Append several directives in order."""
        # Moving a node mutates the list it came from
        for directive in list(directives):
            self.append(directive)

    def remove(self, directive: "Directive") -> bool:
        """
        Detach a direct child.

        Returns:
            True if the directive was a child and has been removed
        """
        for index, child in enumerate(self.children):
            if child is directive:
                del self.children[index]
                directive.parent = None
                return True
        return False

    def remove_named(self, name: str, value: str | None = None) -> int:
        """
        Detach every direct child with given name (and value).

        Returns:
            Number of removed directives
        """
        removed = self.get_children(name, value)
        for directive in removed:
            self.remove(directive)
        return len(removed)

    def detach(self) -> "Directive":
        """
        Remove this directive from its parent.

        Raises:
            NoParentError: If called on a root directive
        """
        if self.parent is None:
            raise NoParentError("Cannot detach a root directive")
        self.parent.remove(self)
        return self

    def _ancestors(self) -> Iterator["Directive"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    # Conversion

    @classmethod
    def from_string(cls, source: str) -> "Directive":
        """Parse configuration text into a new root directive."""
        from .parser import parse_config

        return parse_config(source)

    def load(self, source: str) -> "Directive":
        """
        Replace this directive's contents with parsed configuration text.

        Existing children are detached first.
        """
        parsed = self.from_string(source)

        for child in list(self.children):
            self.remove(child)

        self.name = parsed.name
        self.value = parsed.value
        self.comment = parsed.comment
        self.extend(parsed.children)
        return self

    def to_string(self, indent: int = DEFAULT_INDENT) -> str:
        """Render the subtree as configuration text."""
        return serializer.to_string(self, indent)

    def to_dict(self) -> dict[str, Any]:
        """Export the subtree as nested dictionaries."""
        return serializer.to_dict(self)

    def to_json(self, **kwargs: Any) -> str:
        """Export the subtree as JSON (kwargs go to json.dumps)."""
        return serializer.to_json(self, **kwargs)
