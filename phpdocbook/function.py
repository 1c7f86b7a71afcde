"""Function definitions read from the reference documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .types import DescriptionNode, TypeHint, _keyed_order, default_type_hint


@_keyed_order
@dataclass(frozen=True)
class Parameter:
    """One parameter of a function signature."""

    name: str
    type: TypeHint = field(default_factory=default_type_hint)
    repeat: bool = False
    default_value: Optional[str] = None
    attributes: Tuple[str, ...] = ()

    def __str__(self) -> str:
        attributes = "".join(f"{attribute} " for attribute in self.attributes)
        repeat = "..." if self.repeat else ""
        default = f" = {self.default_value}" if self.default_value is not None else ""
        return f"{attributes}{self.type} {repeat}${self.name}{default}"

    def _sort_key(self) -> tuple:
        default = (0,) if self.default_value is None else (1, self.default_value)
        return (self.name, self.type._sort_key(), self.repeat, default, self.attributes)


@_keyed_order
@dataclass(frozen=True)
class FunctionDefinition:
    """A documented function with its signature and description."""

    name: str
    short_description: str = ""
    return_type: TypeHint = field(default_factory=default_type_hint)
    arguments: Tuple[Parameter, ...] = ()
    description: Tuple[DescriptionNode, ...] = ()

    def signature(self) -> str:
        """The function's signature in PHP notation."""
        arguments = ", ".join(str(argument) for argument in self.arguments)
        return f"{self.name}({arguments}): {self.return_type};"

    def __str__(self) -> str:
        return self.signature()

    def _sort_key(self) -> tuple:
        return (
            0,
            self.name,
            self.short_description,
            self.return_type._sort_key(),
            tuple(argument._sort_key() for argument in self.arguments),
            tuple(node._sort_key() for node in self.description),
        )


@_keyed_order
@dataclass(frozen=True)
class Alias:
    """A reference page that only points at another function."""

    text: str

    def __str__(self) -> str:
        return self.text

    def _sort_key(self) -> tuple:
        return (1, self.text)


Function = Union[FunctionDefinition, Alias]