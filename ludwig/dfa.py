"""Build the deterministic automaton that drives the pattern recogniser.

The nondeterministic automaton is given as a sequence of :class:`NFAState`
indexed by state number.  Index 0 is the null state.  :func:`convert`
runs the subset construction and returns a :class:`DFATable`.  It then
marks the states the recogniser needs: final states, pattern starts, and
the ends of the left and middle contexts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from .constants import (
    MAX_DFA_STATE_RANGE,
    MAX_SET_RANGE,
    MSG_PAT_PATTERN_TOO_COMPLEX,
    PATTERN_DFA_FAIL,
    PATTERN_DFA_KILL,
    PATTERN_DFA_START,
    PATTERN_NULL,
)

_MAX_STACK_SIZE = 50


class PatternError(Exception):
    """Raised when a pattern cannot be turned into an automaton."""


@dataclass
class NFAState:
    """One state of the nondeterministic automaton.

    An epsilon state moves without input to ``first_out`` and/or
    ``second_out`` (``PATTERN_NULL`` for none).  Any other state accepts
    the characters in ``accept_set`` and moves to ``next_state``.
    """

    epsilon_out: bool = False
    first_out: int = PATTERN_NULL
    second_out: int = PATTERN_NULL
    accept_set: frozenset[int] = frozenset()
    next_state: int = PATTERN_NULL
    indefinite: bool = False
    fail: bool = False


@dataclass(eq=False)
class Transition:
    """A move to ``next_state`` on any character in ``accept_set``."""

    accept_set: set[int]
    next_state: int
    start_flag: bool = False


@dataclass(eq=False)
class DFAState:
    """A deterministic state and the NFA states it stands for."""

    equiv_set: frozenset[int] = frozenset()
    transitions: list[Transition] = field(default_factory=list)
    marked: bool = False
    pattern_start: bool = False
    left_transition: bool = False
    right_transition: bool = False
    left_context_check: bool = False
    final_accept: bool = False


@dataclass
class DFATable:
    """The deterministic automaton built for one pattern."""

    definition: Any = None
    states: list[DFAState] = field(default_factory=list)
    start: int = PATTERN_DFA_START
    end: int = 0

    @property
    def states_used(self) -> int:
        """Index of the last state in use."""
        return max(len(self.states) - 1, 0)

    def reset(self, definition: Any) -> None:
        """Discard all states and attach a new pattern definition."""
        self.states.clear()
        self.end = 0
        self.definition = definition


@dataclass(eq=False)
class _Partition:
    accept_set: set[int]
    states: list[int]


def epsilon_closure(nfa_table: Sequence[NFAState],
                    states: Iterable[int]) -> frozenset[int]:
    """The NFA states reachable from ``states`` by epsilon moves alone.

    If a failing state is reached the search stops and the result also
    holds ``PATTERN_DFA_FAIL``.
    """
    closure: set[int] = set()
    stack: list[int] = []

    def push(state: int) -> None:
        if len(stack) >= _MAX_STACK_SIZE:
            raise PatternError(MSG_PAT_PATTERN_TOO_COMPLEX)
        stack.append(state)
        closure.add(state)

    for state in states:
        push(state)

    fail_equivalent = False
    while stack and not fail_equivalent:
        nfa_state = nfa_table[stack.pop()]
        if nfa_state.fail:
            fail_equivalent = True
        if nfa_state.epsilon_out:
            for out in (nfa_state.first_out, nfa_state.second_out):
                if out != PATTERN_NULL and out not in closure:
                    push(out)

    if fail_equivalent:
        closure.add(PATTERN_DFA_FAIL)
    return frozenset(closure)


def _refine(parts: list[_Partition]) -> None:
    """Split overlapping accept sets so that no two partitions share a character."""
    if len(parts) < 2:
        return

    def after(part: _Partition) -> _Partition | None:
        position = parts.index(part) + 1
        return parts[position] if position < len(parts) else None

    current: _Partition | None = parts[0]
    follower: _Partition | None = parts[1]
    while current is not None:
        if follower is current:
            follower = after(follower)
        aux = follower
        while aux is not None:
            if current.accept_set == aux.accept_set:
                current.states = current.states + aux.states
                following = after(aux)
                parts.remove(aux)
                if follower is aux:
                    follower = following
                aux = following
                continue
            common = current.accept_set & aux.accept_set
            if common:
                if common == current.accept_set:
                    current.states = aux.states[::-1] + current.states
                    aux.accept_set -= common
                elif common == aux.accept_set:
                    aux.states = current.states[::-1] + aux.states
                    current.accept_set -= common
                else:
                    parts.insert(
                        parts.index(follower),
                        _Partition(common, aux.states[::-1] + current.states[::-1]),
                    )
                    current.accept_set -= common
                    aux.accept_set -= common
            aux = after(aux)
        current = after(current)


def convert(nfa_table: Sequence[NFAState], nfa_start: int, nfa_end: int,
            middle_context_start: int, right_context_start: int) -> DFATable:
    """Turn the NFA into a DFA table ready to drive the recogniser.

    Raises :class:`PatternError` if the automaton grows too large.
    """
    states: list[DFAState] = [
        DFAState(equiv_set=frozenset({PATTERN_DFA_FAIL}), marked=True),
        DFAState(),
    ]

    def new_state(equiv: frozenset[int]) -> int:
        if len(states) - 1 >= MAX_DFA_STATE_RANGE:
            raise PatternError(MSG_PAT_PATTERN_TOO_COMPLEX)
        states.append(DFAState(equiv_set=equiv))
        return len(states) - 1

    def find_or_add(equiv: frozenset[int]) -> int:
        for position, state in enumerate(states):
            if state.equiv_set == equiv:
                return position
        return new_state(equiv)

    dfa_start = new_state(epsilon_closure(nfa_table, [nfa_start]))

    current = dfa_start
    while current < len(states):
        state = states[current]
        state.marked = True
        kill_set = set(range(MAX_SET_RANGE + 1))
        partitions: list[_Partition] = []
        for nfa_index in sorted(state.equiv_set, reverse=True):
            nfa_state = nfa_table[nfa_index]
            if not nfa_state.epsilon_out:
                partitions.insert(
                    0, _Partition(set(nfa_state.accept_set), [nfa_state.next_state])
                )
                kill_set -= nfa_state.accept_set
        _refine(partitions)

        transitions = [Transition(kill_set, PATTERN_DFA_KILL)]
        for part in partitions:
            target = find_or_add(epsilon_closure(nfa_table, part.states))
            transitions.insert(0, Transition(part.accept_set, target))
        state.transitions = transitions
        current += 1

    for state in states:
        if nfa_end in state.equiv_set:
            state.final_accept = True

    start_state = states[PATTERN_DFA_START]
    position = 0
    while position < len(start_state.transitions):
        incoming = start_state.transitions[position]
        position += 1
        following = incoming.next_state
        if following in (PATTERN_DFA_KILL, PATTERN_DFA_FAIL) or states[following].final_accept:
            continue
        target = states[following]
        target.pattern_start = True
        for k, transition in enumerate(target.transitions):
            if transition.next_state != PATTERN_DFA_KILL:
                continue
            common = incoming.accept_set & transition.accept_set
            if common:
                transition.accept_set -= common
                del target.transitions[k + 1:]
                target.transitions.append(Transition(common, following, start_flag=True))
            break

    middle_closure = epsilon_closure(nfa_table, [middle_context_start])
    mask_limit = max(middle_closure)
    for state in states[PATTERN_DFA_START:]:
        if (middle_context_start in state.equiv_set
                and all(e <= mask_limit for e in state.equiv_set)):
            state.left_transition = True

    middle_set = {
        s for s in middle_closure if middle_context_start <= s <= right_context_start
    }
    for index in range(PATTERN_DFA_START, len(states)):
        if not states[index].left_transition:
            continue
        for transition in states[index].transitions:
            following = transition.next_state
            if following <= index:
                continue
            target = states[following]
            if any(t.next_state == following for t in target.transitions):
                target.left_context_check = True
                for nfa_index in range(middle_context_start, right_context_start + 1):
                    if (nfa_table[nfa_index].indefinite
                            and nfa_index in middle_set
                            and nfa_index in target.equiv_set):
                        target.left_context_check = False

    right_closure = epsilon_closure(nfa_table, [right_context_start])
    mask_limit = max(mask_limit, max(right_closure))
    for state in states:
        if (right_context_start in state.equiv_set
                and all(e <= mask_limit for e in state.equiv_set)):
            state.right_transition = True

    return DFATable(states=states, start=dfa_start, end=len(states) - 1)