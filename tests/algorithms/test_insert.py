from ddengine.algorithms.insert import add_state
from ddengine.model.state import State


def test_add_state_inserts_new_state(binary_diagram):
    dd = binary_diagram()
    assert add_state(0, State(x1=0), dd)
    assert dd.layers[0].states == (State(x1=0),)


def test_add_state_skips_redundancy_for_present_state(binary_diagram):
    calls = []

    def keep(index, state, layer_states):
        calls.append((index, state, tuple(layer_states)))
        return True

    dd = binary_diagram(redundancy=keep)
    assert add_state(1, State(v=1), dd)
    assert not add_state(1, State(v=1), dd)
    assert calls == [(1, State(v=1), ())]


def test_add_state_respects_redundancy(binary_diagram):
    def keep_even(index, state, layer_states):
        return state["v"] % 2 == 0

    dd = binary_diagram(redundancy=keep_even)
    assert not add_state(0, State(v=1), dd)
    assert add_state(0, State(v=2), dd)
    assert dd.layers[0].states == (State(v=2),)


def test_redundancy_sees_current_layer_contents(binary_diagram):
    seen = []

    def dominated(index, state, layer_states):
        seen.append(len(layer_states))
        return all(other["v"] < state["v"] for other in layer_states)

    dd = binary_diagram(redundancy=dominated)
    for v in (1, 3, 2, 4):
        add_state(0, State(v=v), dd)
    assert [s["v"] for s in dd.layers[0]] == [1, 3, 4]
    assert seen == [0, 1, 2, 2]
