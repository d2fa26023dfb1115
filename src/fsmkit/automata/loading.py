# Copyright 2026 The fsmkit Authors. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE FSMKIT AUTHORS ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL THE FSMKIT AUTHORS OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of the fsmkit authors.

"""
Builds automata from JSON definitions.

The expected documents look like this (key order does not matter)::

    {"start": "s", "states": ["s", "t"], "alphabet": ["a"], "ends": ["t"],
     "delta": [{"state": "s", "symbol": "a", "image": "t"}]}

    {"starts": ["s"], "states": ["s", "t"], "alphabet": ["a"], "ends": ["t"],
     "delta": [{"state": "s", "symbol": "a", "images": ["s", "t"]}]}

The automaton classes never check their own consistency, so this module is
where malformed definitions are rejected. Structural problems (wrong types,
missing keys) always raise :class:`AutomatonFormatError`. States and symbols
that are used but not declared are merged into the declared sets, unless
``strict=True`` is passed, in which case they are errors too.
"""

import json

from loguru import logger

from fsmkit.automata.elements import State, Symbol, Transition
from fsmkit.automata.fsa import (
    DeterministicFiniteAutomaton,
    FiniteStateMachine,
    NonDeterministicFiniteAutomaton,
)

# Exceptions


class AutomatonFormatError(ValueError):
    """
    Raised when an automaton definition is malformed.

    Attributes:
        message (str): Explanation of what is wrong with the definition.
    """

    def __init__(self, message):
        self.message = message
        super().__init__(message)


# Field readers


def _field(doc, key, kind, where):
    if key not in doc:
        raise AutomatonFormatError(f"{where} is missing required key {key!r}")
    value = doc[key]
    if not isinstance(value, kind):
        raise AutomatonFormatError(
            f"{where}[{key!r}] must be a {_kindname(kind)}, not {type(value).__name__}"
        )
    return value


def _kindname(kind):
    return {str: "string", list: "list", dict: "object"}.get(kind, kind.__name__)


def _names(doc, key, where):
    values = _field(doc, key, list, where)
    for i, value in enumerate(values):
        if not isinstance(value, str):
            raise AutomatonFormatError(
                f"{where}[{key!r}][{i}] must be a string, not {type(value).__name__}"
            )
    return values


def _rows(doc):
    rows = _field(doc, "delta", list, "definition")
    for i, row in enumerate(rows):
        where = f"delta[{i}]"
        if not isinstance(row, dict):
            raise AutomatonFormatError(f"{where} must be an object")
        yield where, row


def _check_document(doc):
    if not isinstance(doc, dict):
        raise AutomatonFormatError(
            f"Automaton definition must be an object, not {type(doc).__name__}"
        )


def _describe(items):
    return ", ".join(repr(str(item)) for item in sorted(items))


def _machine(doc, referenced, used, strict):
    # Builds the FiniteStateMachine, reconciling the declared states and
    # alphabet with what the rest of the document refers to
    states = {State(name) for name in _names(doc, "states", "definition")}
    alphabet = {Symbol(value) for value in _names(doc, "alphabet", "definition")}
    ends = {State(name) for name in _names(doc, "ends", "definition")}

    missing_states = (referenced | ends) - states
    missing_symbols = used - alphabet
    if strict:
        if missing_states:
            raise AutomatonFormatError(
                f"Undeclared states: {_describe(missing_states)}"
            )
        if missing_symbols:
            raise AutomatonFormatError(
                f"Undeclared symbols: {_describe(missing_symbols)}"
            )
    else:
        if missing_states:
            logger.warning("Adding undeclared states {}", _describe(missing_states))
            states |= missing_states
        if missing_symbols:
            logger.warning("Adding undeclared symbols {}", _describe(missing_symbols))
            alphabet |= missing_symbols

    for symbol in alphabet:
        if len(symbol.value) != 1:
            # Words are read one character at a time
            logger.warning(
                "Symbol {!r} is not a single character and can never be read",
                symbol.value,
            )

    return FiniteStateMachine(states, alphabet, ends)


# Loaders


def load_fsm(doc, strict=False):
    """
    Builds a :class:`FiniteStateMachine` from the ``states``, ``alphabet`` and
    ``ends`` keys of a definition.

    Args:
        doc (dict): The parsed definition.
        strict (bool): If True, accepting states missing from ``states`` raise
            an error instead of being added.

    Raises:
        AutomatonFormatError: If the definition is malformed.
    """
    _check_document(doc)
    return _machine(doc, set(), set(), strict)


def load_dfa(doc, strict=False):
    """
    Builds a :class:`DeterministicFiniteAutomaton` from a parsed definition.

    Each ``delta`` row has ``state``, ``symbol`` and ``image`` strings. Two rows
    giving different images for the same state and symbol are an error.

    Args:
        doc (dict): The parsed definition.
        strict (bool): If True, undeclared states and symbols are errors.

    Returns:
        DeterministicFiniteAutomaton: The automaton.

    Raises:
        AutomatonFormatError: If the definition is malformed.
    """
    _check_document(doc)
    start = State(_field(doc, "start", str, "definition"))

    delta = {}
    referenced = {start}
    used = set()
    for where, row in _rows(doc):
        symbol = Symbol(_field(row, "symbol", str, where))
        state = State(_field(row, "state", str, where))
        image = State(_field(row, "image", str, where))

        key = Transition(symbol, state)
        if key in delta and delta[key] != image:
            raise AutomatonFormatError(
                f"{where}: state {state.name!r} already has a transition on "
                f"{symbol.value!r} to {delta[key].name!r}"
            )
        delta[key] = image
        referenced.update((state, image))
        used.add(symbol)

    fsm = _machine(doc, referenced, used, strict)
    dfa = DeterministicFiniteAutomaton(start, delta, fsm)
    logger.debug("Loaded {!r} with {} transitions", dfa, len(delta))
    return dfa


def load_nfa(doc, strict=False):
    """
    Builds a :class:`NonDeterministicFiniteAutomaton` from a parsed
    definition.

    Each ``delta`` row has ``state`` and ``symbol`` strings and a list of
    ``images``. Rows repeating the same state and symbol are merged.

    Args:
        doc (dict): The parsed definition.
        strict (bool): If True, undeclared states and symbols are errors.

    Returns:
        NonDeterministicFiniteAutomaton: The automaton.

    Raises:
        AutomatonFormatError: If the definition is malformed.

    Example:
        >>> nfa = load_nfa({
        ...     "starts": ["s"], "states": ["s"], "alphabet": ["a"], "ends": ["s"],
        ...     "delta": [{"state": "s", "symbol": "a", "images": ["s"]}],
        ... })
        >>> nfa.accept("aaa")
        True
    """
    _check_document(doc)
    starts = {State(name) for name in _names(doc, "starts", "definition")}

    delta = {}
    referenced = set(starts)
    used = set()
    for where, row in _rows(doc):
        symbol = Symbol(_field(row, "symbol", str, where))
        state = State(_field(row, "state", str, where))
        images = {State(name) for name in _names(row, "images", where)}

        delta.setdefault(Transition(symbol, state), set()).update(images)
        referenced.add(state)
        referenced.update(images)
        used.add(symbol)

    fsm = _machine(doc, referenced, used, strict)
    nfa = NonDeterministicFiniteAutomaton(starts, delta, fsm)
    logger.debug("Loaded {!r} with {} transitions", nfa, len(delta))
    return nfa


def _parse(text):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise AutomatonFormatError(f"Invalid JSON: {e}") from e


def loads_dfa(text, strict=False):
    """Builds a DFA from a JSON string. See :func:`load_dfa`."""
    return load_dfa(_parse(text), strict=strict)


def loads_nfa(text, strict=False):
    """Builds an NFA from a JSON string. See :func:`load_nfa`."""
    return load_nfa(_parse(text), strict=strict)


def load_dfa_file(path, strict=False):
    """Builds a DFA from a UTF-8 JSON file. See :func:`load_dfa`."""
    with open(path, encoding="utf-8") as f:
        text = f.read()
    logger.debug("Read DFA definition from {}", path)
    return loads_dfa(text, strict=strict)


def load_nfa_file(path, strict=False):
    """Builds an NFA from a UTF-8 JSON file. See :func:`load_nfa`."""
    with open(path, encoding="utf-8") as f:
        text = f.read()
    logger.debug("Read NFA definition from {}", path)
    return loads_nfa(text, strict=strict)
