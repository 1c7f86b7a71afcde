import pytest
from lxml import etree

from phpdocbook.types import (
    DescriptionKind,
    DescriptionNode,
    RegularType,
    UnionType,
    default_type_hint,
    type_hint_from_element,
)


def _element(xml):
    return etree.fromstring(xml)


def test_plain_type_element_is_regular():
    hint = type_hint_from_element(_element("<type>int</type>"))
    assert hint == RegularType("int")
    assert str(hint) == "int"


def test_two_member_union():
    hint = type_hint_from_element(
        _element('<type class="union"><type>array</type><type>false</type></type>')
    )
    assert hint == UnionType(RegularType("array"), RegularType("false"))
    assert str(hint) == "array|false"


def test_three_member_union_nests_on_the_right():
    hint = type_hint_from_element(
        _element("<type><type>a</type><type>b</type><type>c</type></type>")
    )
    assert hint == UnionType(
        RegularType("a"), UnionType(RegularType("b"), RegularType("c"))
    )


def test_four_member_union_structure_and_display():
    hint = type_hint_from_element(
        _element("<type><type>a</type><type>b</type><type>c</type><type>d</type></type>")
    )
    assert hint == UnionType(
        RegularType("a"),
        UnionType(UnionType(RegularType("b"), RegularType("c")), RegularType("d")),
    )
    assert str(hint).split("|") == ["a", "b", "c", "d"]


def test_namespaced_elements_are_read():
    hint = type_hint_from_element(
        _element(
            '<type xmlns="http://docbook.org/ns/docbook">'
            "<type>string</type><type>null</type></type>"
        )
    )
    assert hint == UnionType(RegularType("string"), RegularType("null"))


def test_single_member_union_is_rejected():
    with pytest.raises(ValueError):
        type_hint_from_element(_element("<type><type>int</type></type>"))


def test_default_type_is_mixed():
    assert default_type_hint() == RegularType("mixed")


def test_regular_sorts_before_union():
    union = UnionType(RegularType("a"), RegularType("b"))
    regular = RegularType("z")
    assert regular < union
    assert sorted([union, regular]) == [regular, union]


def test_description_node_display_uses_value():
    assert str(DescriptionNode(DescriptionKind.CONSTANT, "E_ALL")) == "E_ALL"
    hint = UnionType(RegularType("int"), RegularType("null"))
    assert str(DescriptionNode(DescriptionKind.TYPE, hint)) == str(hint)


def test_none_description_node_displays_variant_name():
    assert str(DescriptionNode(DescriptionKind.NONE)) == "None"


def test_description_nodes_order_by_kind_then_value():
    text_b = DescriptionNode(DescriptionKind.TEXT, "b")
    text_a = DescriptionNode(DescriptionKind.TEXT, "a")
    warning = DescriptionNode(DescriptionKind.WARNING, "a")
    none = DescriptionNode(DescriptionKind.NONE)
    assert sorted([none, warning, text_b, text_a]) == [text_a, text_b, warning, none]


def test_description_nodes_are_hashable_and_equal_by_value():
    first = DescriptionNode(DescriptionKind.TYPE, RegularType("int"))
    second = DescriptionNode(DescriptionKind.TYPE, RegularType("int"))
    assert first == second
    assert len({first, second}) == 1