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

import sys
from types import MappingProxyType

from cached_property import cached_property, threaded_cached_property
from loguru import logger

from fsmkit.automata.elements import Symbol, Transition


class FiniteStateMachine:
    """
    The structure shared by deterministic and non-deterministic automata: the
    set of states, the alphabet, and the set of accepting ("end") states.

    The sets are stored as given. Nothing checks that ``ends`` is a subset of
    ``states`` or that transitions only use declared symbols; whoever builds
    the machine (see :mod:`fsmkit.automata.loading`) is responsible for that.

    Args:
        states (iterable of State): Every state of the automaton.
        alphabet (iterable of Symbol): Every symbol of the automaton.
        ends (iterable of State): The accepting states.

    Example:
        >>> fsm = FiniteStateMachine({State("s"), State("t")}, {Symbol("a")}, {State("t")})
        >>> len(fsm)
        2
    """

    def __init__(self, states, alphabet, ends):
        self._states = frozenset(states)
        self._alphabet = frozenset(alphabet)
        self._ends = frozenset(ends)

    @property
    def states(self):
        return self._states

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def ends(self):
        return self._ends

    def __len__(self):
        return len(self._states)

    def __eq__(self, other):
        if not isinstance(other, FiniteStateMachine):
            return NotImplemented
        return (
            self._states == other._states
            and self._alphabet == other._alphabet
            and self._ends == other._ends
        )

    def __repr__(self):
        return "<%s %d states, %d symbols, %d ends>" % (
            type(self).__name__,
            len(self._states),
            len(self._alphabet),
            len(self._ends),
        )


class DeterministicFiniteAutomaton:
    """
    A deterministic finite automaton: one start state and a transition table
    mapping each ``Transition(symbol, state)`` to at most one successor state.

    The table may be partial. Reading a symbol that has no entry for the
    current state leaves the automaton stuck, and the word is rejected.

    Args:
        start (State): The start state.
        delta (dict): Maps ``Transition(Symbol, State)`` keys to a ``State``.
        fsm (FiniteStateMachine): The states, alphabet and accepting states.
    """

    def __init__(self, start, delta, fsm):
        self._start = start
        self._delta = dict(delta)
        self._fsm = fsm

    @property
    def start(self):
        return self._start

    @property
    def delta(self):
        """A read-only view of the transition table."""
        return MappingProxyType(self._delta)

    @property
    def fsm(self):
        return self._fsm

    @property
    def states(self):
        return self._fsm.states

    @property
    def alphabet(self):
        return self._fsm.alphabet

    @property
    def ends(self):
        return self._fsm.ends

    def __len__(self):
        return len(self._fsm)

    def __eq__(self, other):
        if not isinstance(other, DeterministicFiniteAutomaton):
            return NotImplemented
        return (
            self._start == other._start
            and self._delta == other._delta
            and self._fsm == other._fsm
        )

    def __repr__(self):
        return f"<{type(self).__name__} start={self._start!r} {self._fsm!r}>"

    @cached_property
    def outlabels(self):
        """Maps each state to the sorted list of symbols it has a move on."""
        labels = {}
        for key in self._delta:
            labels.setdefault(key.content, []).append(key.symbol)
        for ls in labels.values():
            ls.sort()
        return labels

    def is_final(self, state):
        return state in self._fsm.ends

    def apply_delta(self, transition):
        """
        Returns the successor of ``transition.content`` on
        ``transition.symbol``, or None if the table has no such entry.
        """
        return self._delta.get(transition)

    def accept(self, word):
        """
        Returns True if the automaton accepts ``word``.

        The word is read one character at a time from the start state. If a
        character has no transition from the current state the walk stops and
        the word is rejected. Otherwise the word is accepted if the walk ends
        in an accepting state.

        Args:
            word (str): The word to check.

        Returns:
            bool: True if the word is accepted, False otherwise.
        """
        state = self._start
        for char in word:
            nextstate = self.apply_delta(Transition(Symbol(char), state))
            if nextstate is None:
                logger.debug(
                    "DFA stuck in {!r} on {!r}, rejecting {!r}", state, char, word
                )
                return False
            logger.trace("{!r} -{}-> {!r}", state, char, nextstate)
            state = nextstate

        accepted = self.is_final(state)
        logger.debug("DFA {} {!r}", "accepted" if accepted else "rejected", word)
        return accepted

    def triples(self):
        """
        Yields a ``(state, symbol, image)`` tuple for every entry of the
        transition table, ordered by state then symbol.
        """
        for src in sorted(self.outlabels):
            for symbol in self.outlabels[src]:
                yield src, symbol, self._delta[Transition(symbol, src)]

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the DFA to the given stream.

        The start state is marked with ``@`` and transitions into an accepting
        state end with ``||``.
        """
        for src in sorted(self._fsm.states | {self._start}):
            beg = "@" if src == self._start else " "
            print(beg, src, file=stream)
            for symbol in self.outlabels.get(src, ()):
                dest = self._delta[Transition(symbol, src)]
                end = "||" if self.is_final(dest) else ""
                print("  ", symbol, "->", dest, end, file=stream)


class NonDeterministicFiniteAutomaton:
    """
    A non-deterministic finite automaton: a set of start states and a
    transition relation mapping each ``Transition(symbol, state)`` to a set of
    successor states.

    Words are checked by subset simulation. The automaton tracks the set of
    states it could be in (the "frontier") and replaces it, for every
    character, with the union of the successors of its members. Nothing is
    determinized ahead of time.

    Instances are never modified after construction, so :meth:`accept` may be
    called from several threads at once.

    Args:
        starts (iterable of State): The start states. May be empty.
        delta (dict): Maps ``Transition(Symbol, State)`` keys to sets of
            ``State``.
        fsm (FiniteStateMachine): The states, alphabet and accepting states.

    Example:
        >>> s, t = State("s"), State("t")
        >>> a = Symbol("a")
        >>> nfa = NonDeterministicFiniteAutomaton(
        ...     {s}, {Transition(a, s): {s, t}}, FiniteStateMachine({s, t}, {a}, {t})
        ... )
        >>> nfa.accept("aa")
        True
        >>> nfa.accept("")
        False
    """

    def __init__(self, starts, delta, fsm):
        self._starts = frozenset(starts)
        self._delta = {key: frozenset(images) for key, images in delta.items()}
        self._fsm = fsm

    @property
    def starts(self):
        return self._starts

    @property
    def delta(self):
        """A read-only view of the transition relation."""
        return MappingProxyType(self._delta)

    @property
    def fsm(self):
        return self._fsm

    @property
    def states(self):
        return self._fsm.states

    @property
    def alphabet(self):
        return self._fsm.alphabet

    @property
    def ends(self):
        return self._fsm.ends

    def __len__(self):
        return len(self._fsm)

    def __eq__(self, other):
        if not isinstance(other, NonDeterministicFiniteAutomaton):
            return NotImplemented
        return (
            self._starts == other._starts
            and self._delta == other._delta
            and self._fsm == other._fsm
        )

    def __repr__(self):
        return f"<{type(self).__name__} starts={sorted(self._starts)!r} {self._fsm!r}>"

    @threaded_cached_property
    def outlabels(self):
        """Maps each state to the sorted list of symbols it has a move on."""
        labels = {}
        for key in self._delta:
            labels.setdefault(key.content, []).append(key.symbol)
        for ls in labels.values():
            ls.sort()
        return labels

    def is_final(self, states):
        """
        Returns True if any of the given states is an accepting state.

        Args:
            states (set): The states to check.
        """
        return not self._fsm.ends.isdisjoint(states)

    def get_labels(self, states):
        """
        Returns the set of symbols on which at least one of the given states
        has a move.
        """
        outlabels = self.outlabels
        labels = set()
        for state in states:
            labels.update(outlabels.get(state, ()))
        return labels

    def apply_delta(self, transition):
        """
        Returns the successors of a single state on a single symbol.

        Args:
            transition (Transition): A ``(symbol, state)`` pair.

        Returns:
            frozenset: The successor states, or None if the relation has no
            entry for the pair.
        """
        return self._delta.get(transition)

    def apply_deltas(self, transition):
        """
        Performs one step of the subset simulation.

        Args:
            transition (Transition): A ``(symbol, states)`` pair whose content
                is the current frontier.

        Returns:
            frozenset: The union of the successors of every frontier state on
            the symbol, or None if that union is empty.
        """
        symbol = transition.symbol
        images = set()
        for state in transition.content:
            current = self.apply_delta(Transition(symbol, state))
            if current:
                images.update(current)

        if not images:
            return None
        return frozenset(images)

    def run(self, word, frontier=None):
        """
        Reads ``word`` and returns the frontier the automaton ends up in.

        Args:
            word (str): The characters to read, left to right.
            frontier (set, optional): The states to start from. Defaults to
                the start states. Passing the frontier returned for a prefix
                continues that walk.

        Returns:
            frozenset: The reachable states after the whole word, or None if
            some character left the automaton with no move.
        """
        frontier = self._starts if frontier is None else frozenset(frontier)
        for char in word:
            images = self.apply_deltas(Transition(Symbol(char), frontier))
            if images is None:
                logger.opt(lazy=True).debug(
                    "NFA has no move on {} from {}",
                    lambda: repr(char),
                    lambda: sorted(frontier),
                )
                return None
            logger.opt(lazy=True).trace(
                "{} -{}-> {}",
                lambda: sorted(frontier),
                lambda: char,
                lambda: sorted(images),
            )
            frontier = images
        return frontier

    def accept(self, word):
        """
        Returns True if the automaton accepts ``word``.

        The word is accepted if, after reading every character, at least one
        of the reachable states is an accepting state. The walk stops early as
        soon as no state has a move, including on characters that are not in
        the alphabet. The empty word is accepted if a start state is
        accepting.

        Args:
            word (str): The word to check.

        Returns:
            bool: True if the word is accepted, False otherwise.
        """
        frontier = self.run(word)
        accepted = frontier is not None and self.is_final(frontier)
        logger.debug("NFA {} {!r}", "accepted" if accepted else "rejected", word)
        return accepted

    def triples(self):
        """
        Yields a ``(state, symbol, image)`` tuple for every pair in the
        transition relation, ordered by state, symbol, then image.
        """
        for src in sorted(self.outlabels):
            for symbol in self.outlabels[src]:
                for dest in sorted(self._delta[Transition(symbol, src)]):
                    yield src, symbol, dest

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the NFA to the given stream.

        Start states are marked with ``@`` and transitions that can reach an
        accepting state end with ``||``.
        """
        for src in sorted(self._fsm.states | self._starts):
            beg = "@" if src in self._starts else " "
            print(beg, src, file=stream)
            for symbol in self.outlabels.get(src, ()):
                dests = self._delta[Transition(symbol, src)]
                end = "||" if self.is_final(dests) else ""
                names = " ".join(str(dest) for dest in sorted(dests))
                print("  ", symbol, "->", names, end, file=stream)


DFA = DeterministicFiniteAutomaton
NFA = NonDeterministicFiniteAutomaton
