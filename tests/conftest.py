
import pytest
from loguru import logger

from fsmkit.automata import (
    DeterministicFiniteAutomaton,
    FiniteStateMachine,
    NonDeterministicFiniteAutomaton,
    State,
    Symbol,
    Transition,
)


def make_reference_nfa():
    # s --a--> {s, t, u, v}, t --b--> s, u --b--> t, v --b--> u
    a, b = Symbol("a"), Symbol("b")
    s, t, u, v = State("s"), State("t"), State("u"), State("v")
    delta = {
        Transition(a, s): {s, t, u, v},
        Transition(b, t): {s},
        Transition(b, u): {t},
        Transition(b, v): {u},
    }
    fsm = FiniteStateMachine({s, t, u, v}, {a, b}, {s})
    return NonDeterministicFiniteAutomaton({s}, delta, fsm)


def make_div3_dfa():
    # Accepts binary numbers divisible by three
    zero, one = Symbol("0"), Symbol("1")
    q0, q1, q2 = State("q0"), State("q1"), State("q2")
    delta = {
        Transition(zero, q0): q0,
        Transition(one, q0): q1,
        Transition(zero, q1): q2,
        Transition(one, q1): q0,
        Transition(zero, q2): q1,
        Transition(one, q2): q2,
    }
    fsm = FiniteStateMachine({q0, q1, q2}, {zero, one}, {q0})
    return DeterministicFiniteAutomaton(q0, delta, fsm)


@pytest.fixture
def reference_nfa():
    return make_reference_nfa()


@pytest.fixture
def div3_dfa():
    return make_div3_dfa()


@pytest.fixture
def log_records():
    records = []
    logger.enable("fsmkit")
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)
    logger.disable("fsmkit")
