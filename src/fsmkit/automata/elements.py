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
Value types shared by every automaton: alphabet symbols, states, and the
``(symbol, state)`` pairs used to key transition tables.

All three types are immutable and compare and hash by value, so they can be
stored in sets and used as dictionary keys.
"""


class _Value:
    """Base class for the immutable value types in this module."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} objects are immutable")


class Symbol(_Value):
    """
    An element of an automaton's alphabet.

    A symbol wraps a string. It is usually a single character, since
    acceptance consumes a word one character at a time, but any string value is
    allowed.

    Example:
        >>> Symbol("a") == Symbol("a")
        True
        >>> Symbol("a")
        Symbol('a')
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        object.__setattr__(self, "_value", str(value))

    @property
    def value(self):
        """The wrapped string."""
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash((Symbol, self._value))

    def __reduce__(self):
        return (type(self), (self._value,))

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class State(_Value):
    """
    A state of an automaton, identified by its name.

    Two states with the same name are the same state.
    """

    __slots__ = ("_name",)

    def __init__(self, name):
        object.__setattr__(self, "_name", str(name))

    @property
    def name(self):
        return self._name

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._name < other._name

    def __hash__(self):
        return hash((State, self._name))

    def __reduce__(self):
        return (type(self), (self._name,))

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"


class Transition(_Value):
    """
    A ``(symbol, content)`` pair.

    ``content`` is either a single :class:`State`, in which case the pair is a
    key into a transition table, or a set of states (the current frontier of a
    non-deterministic walk). A set is stored as a frozenset so the pair stays
    hashable.

    Args:
        symbol (Symbol): The symbol being read.
        content (State or set): The state, or states, reading it.

    Example:
        >>> key = Transition(Symbol("a"), State("s"))
        >>> key == Transition(Symbol("a"), State("s"))
        True
        >>> step = Transition(Symbol("a"), {State("s"), State("t")})
        >>> sorted(step.content)
        [State('s'), State('t')]
    """

    __slots__ = ("_symbol", "_content")

    def __init__(self, symbol, content):
        if isinstance(content, (set, frozenset)):
            content = frozenset(content)
        object.__setattr__(self, "_symbol", symbol)
        object.__setattr__(self, "_content", content)

    @property
    def symbol(self):
        return self._symbol

    @property
    def content(self):
        return self._content

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return self._symbol == other._symbol and self._content == other._content

    def __hash__(self):
        return hash((self._symbol, self._content))

    def __reduce__(self):
        return (type(self), (self._symbol, self._content))

    def __iter__(self):
        # Allows ``symbol, state = transition``
        yield self._symbol
        yield self._content

    def __repr__(self):
        return f"{type(self).__name__}({self._symbol!r}, {self._content!r})"
