"""Type hints and description nodes found in DocBook function references."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Union

from lxml import etree


def _keyed_order(cls: type) -> type:
    """Give a class rich comparisons based on its ``_sort_key`` method."""

    def _compare(op: Callable[[Any, Any], bool]) -> Callable[[Any, Any], Any]:
        def method(self: Any, other: Any) -> Any:
            if not hasattr(other, "_sort_key"):
                return NotImplemented
            return op(self._sort_key(), other._sort_key())

        return method

    cls.__lt__ = _compare(lambda a, b: a < b)
    cls.__le__ = _compare(lambda a, b: a <= b)
    cls.__gt__ = _compare(lambda a, b: a > b)
    cls.__ge__ = _compare(lambda a, b: a >= b)
    return cls


@_keyed_order
@dataclass(frozen=True)
class RegularType:
    """A single named type such as ``int`` or ``array``."""

    name: str

    def __str__(self) -> str:
        return self.name

    def _sort_key(self) -> tuple:
        return (0, self.name)


@_keyed_order
@dataclass(frozen=True)
class UnionType:
    """A union of two type hints, printed as ``left|right``."""

    left: "TypeHint"
    right: "TypeHint"

    def __str__(self) -> str:
        return f"{self.left}|{self.right}"

    def _sort_key(self) -> tuple:
        return (1, self.left._sort_key(), self.right._sort_key())


TypeHint = Union[RegularType, UnionType]


def default_type_hint() -> RegularType:
    """The type assumed when none is given."""
    return RegularType("mixed")


def _child_elements(element: Any) -> Iterator[Any]:
    return (child for child in element if isinstance(child.tag, str))


def _text_content(node: Any) -> str:
    """Concatenated text of an element and its descendant elements."""
    if not isinstance(node.tag, str):
        return ""
    parts = [node.text or ""]
    for child in node:
        if isinstance(child.tag, str):
            parts.append(_text_content(child))
        parts.append(child.tail or "")
    return "".join(parts)


def type_hint_from_element(element: Any) -> TypeHint:
    """Build a type hint from a DocBook ``<type>`` element.

    An element without child elements is a regular type; otherwise its
    children are the members of a union.
    """
    children = list(_child_elements(element))
    if not children:
        return RegularType(_text_content(element))

    first, *rest = (type_hint_from_element(child) for child in children)
    if not rest:
        raise ValueError("a union type needs at least two members")

    union = UnionType(first, rest[0])
    for hint in rest[1:]:
        union = UnionType(union.left, UnionType(union.right, hint))
    return union


class DescriptionKind(enum.Enum):
    """The role a piece of description text plays."""

    TEXT = 0
    BOLD_TEXT = 1
    ITALIC_TEXT = 2
    SUBTITLE = 3
    FUNCTION = 4
    CONSTANT = 5
    PARAMETER = 6
    CLASSNAME = 7
    INTERFACE_NAME = 8
    LITERAL = 9
    FILENAME = 10
    TYPE = 11
    CODE = 12
    LINK = 13
    NOTE = 14
    INSET = 15
    HTML_TAG = 16
    INLINE_CODE = 17
    INLINE_PHP_CODE = 18
    METHOD_NAME = 19
    TABLE = 20
    XREF = 21
    WARNING = 22
    NONE = 23


@_keyed_order
@dataclass(frozen=True)
class DescriptionNode:
    """One fragment of a function description."""

    kind: DescriptionKind
    value: Union[str, TypeHint, None] = None

    def __str__(self) -> str:
        if self.kind is DescriptionKind.NONE:
            return "None"
        return str(self.value)

    def _sort_key(self) -> tuple:
        value = self.value
        if hasattr(value, "_sort_key"):
            key: Any = value._sort_key()
        else:
            key = "" if value is None else value
        return (self.kind.value, key)