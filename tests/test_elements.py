import copy
import pickle

import pytest

from fsmkit.automata import State, Symbol, Transition


def test_symbol_equality():
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != Symbol("b")
    assert hash(Symbol("a")) == hash(Symbol("a"))
    assert Symbol("a").value == "a"
    assert len({Symbol("a"), Symbol("a"), Symbol("b")}) == 2


def test_state_equality():
    one = State("state")
    assert one == State("state")
    assert one != State("state two")
    assert one.name == "state"
    assert len({one, State("state")}) == 1


def test_state_is_not_symbol():
    assert State("a") != Symbol("a")
    assert len({State("a"), Symbol("a")}) == 2


def test_ordering():
    assert sorted([State("c"), State("a"), State("b")]) == [
        State("a"),
        State("b"),
        State("c"),
    ]
    assert Symbol("a") < Symbol("b")


def test_immutable():
    state = State("s")
    with pytest.raises(AttributeError):
        state.name = "t"
    with pytest.raises(AttributeError):
        state._name = "t"

    symbol = Symbol("a")
    with pytest.raises(AttributeError):
        symbol.value = "b"

    trans = Transition(symbol, state)
    with pytest.raises(AttributeError):
        trans.content = State("t")


def test_transition_key():
    key = Transition(Symbol("a"), State("s"))
    assert key == Transition(Symbol("a"), State("s"))
    assert key != Transition(Symbol("b"), State("s"))
    assert key != Transition(Symbol("a"), State("t"))

    table = {key: State("t")}
    assert table[Transition(Symbol("a"), State("s"))] == State("t")

    symbol, state = key
    assert symbol == Symbol("a")
    assert state == State("s")


def test_transition_freezes_sets():
    frontier = {State("s"), State("t")}
    step = Transition(Symbol("a"), frontier)
    assert isinstance(step.content, frozenset)

    # Changing the original set does not change the pair
    frontier.add(State("u"))
    assert step.content == frozenset({State("s"), State("t")})
    assert step == Transition(Symbol("a"), frozenset({State("t"), State("s")}))
    assert hash(step) == hash(Transition(Symbol("a"), {State("t"), State("s")}))


def test_repr():
    assert repr(State("s")) == "State('s')"
    assert repr(Symbol("a")) == "Symbol('a')"
    assert str(State("s")) == "s"
    assert repr(Transition(Symbol("a"), State("s"))) == "Transition(Symbol('a'), State('s'))"


def test_copy_and_pickle():
    state = State("s")
    symbol = Symbol("a")
    key = Transition(symbol, state)
    step = Transition(symbol, {state, State("t")})

    for value in (state, symbol, key, step):
        assert copy.copy(value) == value
        assert copy.deepcopy(value) == value
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert hash(restored) == hash(value)
        assert type(restored) is type(value)

    assert isinstance(pickle.loads(pickle.dumps(step)).content, frozenset)
    with pytest.raises(AttributeError):
        copy.copy(state).name = "t"


def test_copy_automata(reference_nfa, div3_dfa):
    clone = copy.deepcopy(reference_nfa)
    assert clone == reference_nfa
    assert clone.accept("aabb")
    assert not clone.accept("abbbb")

    restored = pickle.loads(pickle.dumps(reference_nfa))
    assert restored == reference_nfa
    assert restored.accept("aabb")

    assert pickle.loads(pickle.dumps(div3_dfa)) == div3_dfa
    assert copy.deepcopy(div3_dfa).accept("11")
