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

from loguru import logger

from fsmkit.automata.elements import State, Symbol, Transition
from fsmkit.automata.fsa import (
    DFA,
    NFA,
    DeterministicFiniteAutomaton,
    FiniteStateMachine,
    NonDeterministicFiniteAutomaton,
)
from fsmkit.automata.loading import (
    AutomatonFormatError,
    load_dfa,
    load_dfa_file,
    load_fsm,
    load_nfa,
    load_nfa_file,
    loads_dfa,
    loads_nfa,
)

__all__ = [
    "AutomatonFormatError",
    "DFA",
    "DeterministicFiniteAutomaton",
    "FiniteStateMachine",
    "NFA",
    "NonDeterministicFiniteAutomaton",
    "State",
    "Symbol",
    "Transition",
    "load_dfa",
    "load_dfa_file",
    "load_fsm",
    "load_nfa",
    "load_nfa_file",
    "loads_dfa",
    "loads_nfa",
]

# Library code logs through loguru; applications opt in with
# logger.enable("fsmkit")
logger.disable("fsmkit")
