import pytest

from phpdocbook.entities import replace_entities, replace_entities_in_files


def test_unknown_entity_becomes_constant():
    assert replace_entities("&foo;") == "<constant>foo</constant>"


@pytest.mark.parametrize("text", ["&amp;", "&quot;", "&gt;", "&lt;", "a &amp; b &lt; c"])
def test_basic_entities_are_kept(text):
    assert replace_entities(text) == text


def test_prefix_of_basic_entity_is_still_replaced():
    assert replace_entities("&ampfoo;") == replace_entities("&foo;").replace("foo", "ampfoo")


def test_only_lowercase_names_match():
    for text in ("&Foo;", "&foo.bar;", "&foo1;", "& foo;"):
        assert replace_entities(text) == text


def test_surrounding_text_is_preserved():
    result = replace_entities("see &null; and &amp; here")
    assert result.startswith("see ")
    assert result.endswith(" and &amp; here")
    assert "&null;" not in result


def test_replacement_is_idempotent():
    once = replace_entities("x &true; y &false;")
    assert replace_entities(once) == once


def test_files_are_rewritten_in_place(tmp_path):
    first = tmp_path / "a.xml"
    second = tmp_path / "b.xml"
    first.write_text("<para>&null;</para>\r\n", encoding="utf-8", newline="")
    second.write_text("<para>&amp;</para>", encoding="utf-8")
    replace_entities_in_files([first, second])
    assert first.read_bytes() == replace_entities("<para>&null;</para>\r\n").encode("utf-8")
    assert second.read_text(encoding="utf-8") == "<para>&amp;</para>"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        replace_entities_in_files([tmp_path / "missing.xml"])