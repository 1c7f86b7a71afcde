import pytest

from phpdocbook.fuzzy import fuzzy_indices


def test_empty_pattern_matches_anything():
    assert fuzzy_indices("array_map", "") == (0, [])


def test_non_subsequence_does_not_match():
    assert fuzzy_indices("strlen", "xyz") is None
    assert fuzzy_indices("ab", "abc") is None


def test_contiguous_match_positions():
    choice = "array_map"
    _, indices = fuzzy_indices(choice, "map")
    assert indices == [choice.index("m"), choice.index("m") + 1, choice.index("m") + 2]


def test_scattered_match_positions():
    choice = "array_map"
    _, indices = fuzzy_indices(choice, "am")
    assert indices == [0, choice.index("m")]


@pytest.mark.parametrize("choice, pattern", [("array_map", "arm"), ("str_replace", "srp"), ("ArrayObject", "ao")])
def test_indices_spell_the_pattern(choice, pattern):
    _, indices = fuzzy_indices(choice, pattern)
    assert indices == sorted(set(indices))
    assert "".join(choice[i] for i in indices).lower() == pattern.lower()


def test_lower_case_pattern_ignores_case():
    result = fuzzy_indices("ArrayObject", "arrayobject")
    assert result is not None
    assert len(result[1]) == len("ArrayObject")


def test_upper_case_pattern_is_case_sensitive():
    assert fuzzy_indices("array_map", "Map") is None
    assert fuzzy_indices("array_Map", "Map") is not None


def test_contiguous_match_scores_higher_than_scattered():
    contiguous, _ = fuzzy_indices("array_map", "map")
    scattered, _ = fuzzy_indices("mxxaxxp", "map")
    assert contiguous > scattered


def test_word_start_scores_higher_than_middle():
    at_start, _ = fuzzy_indices("map_values", "map")
    in_middle, _ = fuzzy_indices("xxmapvalues", "map")
    assert at_start > in_middle