"""
Read-only inspection of transition graphs.
"""
from typing import Set

import networkx as nx

from nfasim.automaton import TransitionGraph, State


def make_networkx_graph(graph: TransitionGraph) -> nx.MultiDiGraph:
  """
  One node per state (with `is_start` and `is_accept` attributes), one edge per transition keyed by its label.
  """
  nx_graph = nx.MultiDiGraph()
  start_states, accept_states = graph.start_states, graph.accept_states
  for state in graph.states:
    nx_graph.add_node(state, is_start=state in start_states, is_accept=state in accept_states)
  for source, label, dest in graph.transitions():
    nx_graph.add_edge(source, dest, key=label, label=label)
  return nx_graph


def get_reachable_states(graph: TransitionGraph) -> Set[State]:
  """
  :returns: all states that can be part of some frontier
  """
  nx_graph = make_networkx_graph(graph)
  reachable: Set[State] = set()
  for state in graph.start_states:
    if state in reachable:
      continue
    reachable.add(state)
    reachable.update(nx.descendants(nx_graph, state))
  return reachable


def get_productive_states(graph: TransitionGraph) -> Set[State]:
  """
  :returns: all states from which some accept state can be reached (including accept states themselves)
  """
  nx_graph = make_networkx_graph(graph)
  productive: Set[State] = set()
  for state in graph.accept_states:
    if state in productive:
      continue
    productive.add(state)
    productive.update(nx.ancestors(nx_graph, state))
  return productive
