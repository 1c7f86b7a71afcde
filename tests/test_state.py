from phpdocbook.function import Alias, FunctionDefinition
from phpdocbook.state import SharedState


def test_update_snapshot_sorts_and_removes_duplicates():
    first = FunctionDefinition("array_map")
    second = FunctionDefinition("strlen")
    state = SharedState()
    assert state.update_snapshot([second, first, first]) is True
    assert state.parsed_files_snapshot == (first, second)


def test_update_snapshot_keeps_snapshot_when_count_is_unchanged():
    state = SharedState()
    state.update_snapshot([FunctionDefinition("a"), FunctionDefinition("b")])
    before = state.parsed_files_snapshot
    assert state.update_snapshot([FunctionDefinition("x"), FunctionDefinition("y")]) is False
    assert state.parsed_files_snapshot == before


def test_update_snapshot_picks_up_new_functions():
    state = SharedState(total_files_to_parse=3)
    functions = [FunctionDefinition("b")]
    state.update_snapshot(functions)
    functions.append(FunctionDefinition("a"))
    assert state.update_snapshot(functions) is True
    assert [f.name for f in state.parsed_files_snapshot] == ["a", "b"]


def test_definitions_leave_out_aliases():
    definition = FunctionDefinition("count")
    state = SharedState()
    state.update_snapshot([Alias("alias of count"), definition])
    assert list(state.definitions()) == [definition]
    assert len(state.parsed_files_snapshot) == 2


def test_empty_state_has_no_definitions():
    state = SharedState()
    assert list(state.definitions()) == []
    assert state.update_snapshot([]) is False