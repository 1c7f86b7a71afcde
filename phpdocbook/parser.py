"""Reading function reference pages written in DocBook XML."""

from __future__ import annotations

import os
from typing import Any, Iterator, List, Optional, Union

from lxml import etree

from .function import Alias, Function, FunctionDefinition, Parameter
from .types import (
    DescriptionKind,
    DescriptionNode,
    TypeHint,
    _child_elements,
    _text_content,
    default_type_hint,
    type_hint_from_element,
)

DOCBOOK_NAMESPACE = "http://docbook.org/ns/docbook"
_NAMESPACES = {"d": DOCBOOK_NAMESPACE}

_TITLE = "//d:refentry/d:refnamediv/d:refname"
_PURPOSE = "//d:refentry/d:refnamediv/d:refpurpose"
_RETURN_TYPE = '//d:refentry/d:refsect1[@role="description"]/d:methodsynopsis/d:type'
_PARAMETERS = '/d:refentry/d:refsect1[@role="description"]/d:methodsynopsis/d:methodparam'
_PARA = '/d:refentry/d:refsect1[@role="description"]/d:para'
_SIMPARA = '/d:refentry/d:refsect1[@role="description"]/d:simpara'

_CONTENT_KINDS = {
    "function": DescriptionKind.FUNCTION,
    "constant": DescriptionKind.CONSTANT,
    "parameter": DescriptionKind.PARAMETER,
    "varname": DescriptionKind.PARAMETER,
    "classname": DescriptionKind.CLASSNAME,
    "interfacename": DescriptionKind.INTERFACE_NAME,
    "literal": DescriptionKind.LITERAL,
    "filename": DescriptionKind.FILENAME,
    "programlisting": DescriptionKind.CODE,
    "link": DescriptionKind.LINK,
    "methodname": DescriptionKind.METHOD_NAME,
    "table": DescriptionKind.TABLE,
    "command": DescriptionKind.BOLD_TEXT,
    "itemizedlist": DescriptionKind.TEXT,
    "simplelist": DescriptionKind.TEXT,
    "acronym": DescriptionKind.TEXT,
    "abbrev": DescriptionKind.TEXT,
    "style.oop": DescriptionKind.SUBTITLE,
    "style.procedural": DescriptionKind.SUBTITLE,
    "note": DescriptionKind.NOTE,
    "screen": DescriptionKind.INSET,
    "tag": DescriptionKind.HTML_TAG,
    "code": DescriptionKind.INLINE_PHP_CODE,
    "userinput": DescriptionKind.INLINE_PHP_CODE,
}

_FIXED_NODES = {
    "return.falseforfailure": DescriptionNode(DescriptionKind.TEXT, "false on failure"),
    "return.success": DescriptionNode(
        DescriptionKind.TEXT, "Returns true on success or false on failure"
    ),
    "php.ini": DescriptionNode(DescriptionKind.INLINE_CODE, "php.ini"),
    "warn.undocumented.func": DescriptionNode(
        DescriptionKind.WARNING,
        "This function is currently not documented; only its argument list is available.",
    ),
    "methodsynopsis": DescriptionNode(DescriptionKind.NONE),
}


class XmlError(Exception):
    """Raised when a reference page cannot be read."""


class ParseError(XmlError):
    """The content is not parseable XML."""


class MalformedXmlDefinition(XmlError):
    """A required part of the definition is missing or malformed."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"Could not find the xml representation of the {what}")


class UnhandledElementError(XmlError):
    """The page holds an element the reader does not know how to handle."""

    def __init__(self, element: str, message: str) -> None:
        self.element = element
        super().__init__(message)


def _load(content: Union[bytes, str, Any]) -> Any:
    if etree.iselement(content):
        return content.getroottree()
    if isinstance(content, str):
        content = content.encode("utf-8")
    parser = etree.XMLParser(recover=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(bytes(content), parser)
    except (etree.LxmlError, ValueError) as exc:
        raise ParseError(str(exc)) from exc
    if root is None:
        raise ParseError("the document is empty")
    return root.getroottree()


def _local_name(element: Any) -> str:
    return etree.QName(element).localname


def _joined_text(tree: Any, path: str) -> str:
    return "".join(_text_content(node) for node in tree.xpath(path, namespaces=_NAMESPACES))


def _type_hint(element: Any) -> TypeHint:
    try:
        return type_hint_from_element(element)
    except ValueError as exc:
        raise MalformedXmlDefinition("type") from exc


def _parameter(method: Any) -> Parameter:
    type_hint: Optional[TypeHint] = None
    name: Optional[str] = None
    default_value: Optional[str] = None
    attributes: List[str] = []

    for child in _child_elements(method):
        tag = _local_name(child)
        if tag == "type":
            type_hint = _type_hint(child)
        elif tag == "parameter":
            name = _text_content(child)
        elif tag == "initializer":
            default_value = _text_content(child)
        elif tag == "modifier" and child.get("role") == "attribute":
            attributes.append(_text_content(child))
        else:
            raise UnhandledElementError(tag, f"Unhandled case for <methodparam><{tag}>")

    if name is None:
        raise UnhandledElementError(
            "methodparam", f"Unhandled case where either {type_hint!r} or {name!r} is unset"
        )
    return Parameter(
        name=name,
        type=type_hint if type_hint is not None else default_type_hint(),
        repeat=method.get("rep") == "repeat",
        default_value=default_value,
        attributes=tuple(attributes),
    )


def _description_node(node: Any) -> DescriptionNode:
    is_entity = node.tag is etree.Entity
    name = node.name if is_entity else _local_name(node)
    content = "" if is_entity else _text_content(node)

    if name in _CONTENT_KINDS:
        return DescriptionNode(_CONTENT_KINDS[name], content)
    if name in _FIXED_NODES:
        return _FIXED_NODES[name]
    if name == "type":
        return DescriptionNode(DescriptionKind.TYPE, _type_hint(node))
    if name == "xref":
        return DescriptionNode(DescriptionKind.XREF, node.get("linkend") or "")
    if name == "emphasis":
        role = node.get("role")
        if role == "bold":
            return DescriptionNode(DescriptionKind.BOLD_TEXT, content)
        if role is None:
            return DescriptionNode(DescriptionKind.ITALIC_TEXT, content)
    if name == "quote":
        return DescriptionNode(DescriptionKind.ITALIC_TEXT, f'"{content}"')
    if name == "superscript":
        return DescriptionNode(DescriptionKind.ITALIC_TEXT, f"^{content}")
    if name == "subscript":
        return DescriptionNode(DescriptionKind.ITALIC_TEXT, f"⋁{content}")
    if is_entity:
        return DescriptionNode(DescriptionKind.NONE)
    raise UnhandledElementError(name, f"Unhandled text node {name}")


def _description(tree: Any) -> Iterator[DescriptionNode]:
    paragraphs = tree.xpath(_PARA, namespaces=_NAMESPACES) or tree.xpath(
        _SIMPARA, namespaces=_NAMESPACES
    )
    if not paragraphs:
        return
    paragraph = paragraphs[0]
    if paragraph.text:
        yield DescriptionNode(DescriptionKind.TEXT, paragraph.text)
    for child in paragraph:
        if child.tag is not etree.Comment and child.tag is not etree.PI:
            yield _description_node(child)
        if child.tail:
            yield DescriptionNode(DescriptionKind.TEXT, child.tail)


def parse_function(content: Union[bytes, str, Any]) -> Function:
    """Read a function reference page.

    ``content`` is the raw XML as bytes or text, or an already parsed element.
    A page without a return type in its synopsis is an alias and yields an
    :class:`Alias` holding its short description.
    """
    tree = _load(content)
    title = _joined_text(tree, _TITLE)
    short_description = _joined_text(tree, _PURPOSE)

    return_types = tree.xpath(_RETURN_TYPE, namespaces=_NAMESPACES)
    if not return_types:
        return Alias(short_description)
    return_type = _type_hint(return_types[0])

    arguments = tuple(
        _parameter(method) for method in tree.xpath(_PARAMETERS, namespaces=_NAMESPACES)
    )

    return FunctionDefinition(
        name=title,
        short_description=short_description,
        return_type=return_type,
        arguments=arguments,
        description=tuple(_description(tree)),
    )


def parse_function_file(path: Union[str, "os.PathLike[str]"]) -> Function:
    """Read and parse the reference page stored at ``path``."""
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError as exc:
        raise XmlError("Could not read the xml file") from exc
    return parse_function(content)