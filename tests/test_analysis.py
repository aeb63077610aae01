import _setup_test_env  # noqa
import sys
import unittest

import better_exchook
import networkx as nx

from nfasim.analysis import make_networkx_graph, get_reachable_states, get_productive_states
from nfasim.automaton import TransitionGraph


def _make_graph():
  """
  0 -a-> {1, 2}, 1 -b-> 3, 2 -b-> 3, accepting 3, plus a disconnected accepting 100 and a dead end 4.
  """
  graph = TransitionGraph()
  graph.add_state(0, is_start=True, is_accept=False)
  graph.add_state(3, is_start=False, is_accept=True)
  graph.add_state(100, is_start=False, is_accept=True)
  graph.add_transition(0, 'a', 1)
  graph.add_transition(0, 'a', 2)
  graph.add_transition(1, 'b', 3)
  graph.add_transition(2, 'b', 3)
  graph.add_transition(2, 'c', 4)
  return graph


def test_make_networkx_graph():
  nx_graph = make_networkx_graph(_make_graph())
  assert isinstance(nx_graph, nx.MultiDiGraph)
  assert set(nx_graph.nodes) == {0, 1, 2, 3, 4, 100}
  assert nx_graph.nodes[0] == {'is_start': True, 'is_accept': False}
  assert nx_graph.nodes[100] == {'is_start': False, 'is_accept': True}
  assert nx_graph.number_of_edges() == 5
  assert nx_graph.has_edge(2, 4, key='c')
  assert nx_graph.edges[0, 1, 'a']['label'] == 'a'


def test_make_networkx_graph_parallel_labels():
  graph = TransitionGraph()
  graph.add_transition(0, 'a', 1)
  graph.add_transition(0, 'b', 1)
  graph.add_transition(0, 'a', 1)
  nx_graph = make_networkx_graph(graph)
  assert nx_graph.number_of_edges(0, 1) == 2


def test_get_reachable_states():
  graph = _make_graph()
  assert get_reachable_states(graph) == {0, 1, 2, 3, 4}
  assert get_reachable_states(TransitionGraph()) == set()


def test_get_productive_states():
  graph = _make_graph()
  assert get_productive_states(graph) == {0, 1, 2, 3, 100}


if __name__ == "__main__":
  try:
    better_exchook.install()
    if len(sys.argv) <= 1:
      for k, v in sorted(globals().items()):
        if k.startswith("test_"):
          print("-" * 40)
          print("Executing: %s" % k)
          try:
            v()
          except unittest.SkipTest as exc:
            print("SkipTest:", exc)
          print("-" * 40)
      print("Finished all tests.")
    else:
      assert len(sys.argv) >= 2
      for arg in sys.argv[1:]:
        print("Executing: %s" % arg)
        if arg in globals():
          globals()[arg]()  # assume function and execute
        else:
          eval(arg)  # assume Python code and execute
  finally:
    pass
