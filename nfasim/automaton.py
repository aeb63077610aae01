from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Set, FrozenSet, Hashable, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

State = Hashable
Label = str


class TransitionGraph:
  """
  The labeled state-transition graph of a NFA without epsilon transitions.

  States can be any hashable value (usually ints, not necessarily dense or non-negative).
  The graph only grows: there is no way to remove states or transitions.
  Every state that was added explicitly or that is the source or destination of some transition has an entry in
  `state_transition_table`, so lookups never need to distinguish unknown states from states without transitions.
  """

  def __init__(self):
    self.state_transition_table: Dict[State, Dict[Label, Set[State]]] = {}
    self._start_states: Set[State] = set()
    self._accept_states: Set[State] = set()

  def add_state(self, state: State, is_start: bool = False, is_accept: bool = False):
    """
    Flags of a state that was added before are unioned, never cleared.
    """
    self.state_transition_table.setdefault(state, {})
    if is_start:
      self._start_states.add(state)
    if is_accept:
      self._accept_states.add(state)

  def add_transition(self, source: State, label: Label, dest: State):
    self.state_transition_table.setdefault(source, {}).setdefault(label, set()).add(dest)
    self.state_transition_table.setdefault(dest, {})

  @property
  def states(self) -> FrozenSet[State]:
    return frozenset(self.state_transition_table.keys())

  @property
  def start_states(self) -> FrozenSet[State]:
    return frozenset(self._start_states)

  @property
  def accept_states(self) -> FrozenSet[State]:
    return frozenset(self._accept_states)

  def is_accept_state(self, state: State) -> bool:
    return state in self._accept_states

  def get_next_states(self, state: State, label: Label) -> FrozenSet[State]:
    """
    :returns: all destinations of `state` under `label`, empty if `state` is unknown.
    """
    return frozenset(self.state_transition_table.get(state, {}).get(label, ()))

  def get_labels(self, state: State) -> Set[Label]:
    """
    :returns: all labels with at least one outgoing transition from `state`
    """
    return {label for label, dests in self.state_transition_table.get(state, {}).items() if len(dests) >= 1}

  def transitions(self) -> Iterator[Tuple[State, Label, State]]:
    for source, label_table in self.state_transition_table.items():
      for label, dests in label_table.items():
        for dest in dests:
          yield source, label, dest

  def __contains__(self, state: State) -> bool:
    return state in self.state_transition_table

  def __len__(self) -> int:
    return len(self.state_transition_table)

  def __repr__(self):
    return 'TransitionGraph(states=%r, start_states=%r, accept_states=%r)' % (
      len(self), set(self._start_states), set(self._accept_states))


class Frontier:
  """
  The set of currently active states of one run over a `TransitionGraph`.
  Immutable: every step produces a new frontier, so many runs can share one graph.
  """

  __slots__ = ('_states',)

  def __init__(self, states: Iterable[State] = ()):
    self._states: FrozenSet[State] = frozenset(states)

  @property
  def states(self) -> FrozenSet[State]:
    return self._states

  def __iter__(self) -> Iterator[State]:
    return iter(self.states)

  def __len__(self) -> int:
    return len(self.states)

  def __contains__(self, state: State) -> bool:
    return state in self.states

  def __eq__(self, other):
    if isinstance(other, Frontier):
      return self.states == other.states
    return NotImplemented

  def __hash__(self):
    return hash(self.states)

  def __repr__(self):
    return 'Frontier(%r)' % set(self.states)


EMPTY_FRONTIER = Frontier()


def make_initial_frontier(graph: TransitionGraph) -> Frontier:
  return Frontier(graph.start_states)


def apply_symbol(graph: TransitionGraph, frontier: Frontier, symbol: Label) -> Frontier:
  """
  One synchronous step of all active states. Only transitions labeled exactly `symbol` are followed.
  """
  return Frontier({s for state in frontier for s in graph.get_next_states(state, symbol)})


def frontier_accepts(graph: TransitionGraph, frontier: Frontier) -> bool:
  return any(graph.is_accept_state(state) for state in frontier)


def frontier_has_transitions(graph: TransitionGraph, frontier: Frontier, symbol: Label) -> bool:
  return any(len(graph.get_next_states(state, symbol)) >= 1 for state in frontier)


class Automaton(ABC):
  """
  Interface of an automaton that is built incrementally and then executed one symbol at a time.
  """

  @abstractmethod
  def add_state(self, state: State, is_start: bool, is_accept: bool):
    raise NotImplementedError()

  @abstractmethod
  def add_transition(self, source: State, label: Label, dest: State):
    raise NotImplementedError()

  @abstractmethod
  def reset(self):
    raise NotImplementedError()

  @abstractmethod
  def apply(self, symbol: Label):
    raise NotImplementedError()

  @abstractmethod
  def accepts(self) -> bool:
    raise NotImplementedError()

  @abstractmethod
  def has_transitions(self, symbol: Label) -> bool:
    raise NotImplementedError()


class NonDeterministicAutomaton(Automaton):
  """
  A NFA (without epsilon-transitions) together with the frontier of its current run.

  The frontier is empty until `reset` is called.
  Epsilon moves have to be encoded as ordinary labeled transitions by the caller.
  """

  def __init__(self, graph: Optional[TransitionGraph] = None):
    """
    :param graph: graph to execute. Passing the same graph to several automatons shares it between them,
      so it should not be extended anymore then.
    """
    self._graph = graph if graph is not None else TransitionGraph()
    self._frontier = EMPTY_FRONTIER

  @property
  def graph(self) -> TransitionGraph:
    return self._graph

  @property
  def frontier(self) -> FrozenSet[State]:
    return self._frontier.states

  def add_state(self, state: State, is_start: bool = False, is_accept: bool = False):
    self._graph.add_state(state, is_start=is_start, is_accept=is_accept)

  def add_transition(self, source: State, label: Label, dest: State):
    self._graph.add_transition(source, label, dest)

  def reset(self):
    self._frontier = make_initial_frontier(self._graph)
    logger.debug('reset to %r', self._frontier)

  def apply(self, symbol: Label):
    self._frontier = apply_symbol(self._graph, self._frontier, symbol)
    logger.debug('applied %r, now at %r', symbol, self._frontier)

  def accepts(self) -> bool:
    return frontier_accepts(self._graph, self._frontier)

  def has_transitions(self, symbol: Label) -> bool:
    return frontier_has_transitions(self._graph, self._frontier, symbol)

  def accepts_word(self, word: Iterable[Label]) -> bool:
    """
    Runs the automaton from its start states over all of `word`.
    The frontier stays where the word ended.
    """
    self.reset()
    for char in word:
      self.apply(char)
    return self.accepts()
