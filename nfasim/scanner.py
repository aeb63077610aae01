from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple

from nfasim.automaton import NonDeterministicAutomaton, Label
from nfasim.errors import ScanError

logger = logging.getLogger(__name__)

"""
Name of tokens that later stages should drop (e.g. whitespace, comments).
"""
IGNORED_TOKEN = None


class Scanner:
  """
  Splits a word into tokens, each recognized by one NFA, using the first longest match.

  The automatons are driven through their execution interface only: they are reset at every token start
  and stepped char by char, so they must not be used by anyone else while scanning.
  """

  def __init__(self, token_names: List[Optional[str]], automatons: List[NonDeterministicAutomaton]):
    """
    :param token_names: list of token names, sorted by priority.
      Tokens with name `IGNORED_TOKEN` are reported as well, but can be dropped later.
    :param automatons: corresponding automatons. Accepting the empty word has no effect.
    """
    assert len(token_names) == len(automatons)
    self.token_names = token_names
    self.automatons = automatons

  @classmethod
  def from_dict(cls, token_names_to_automaton: Dict[str, NonDeterministicAutomaton],
                ignore_token_automatons: List[NonDeterministicAutomaton]) -> Scanner:
    """
    :param token_names_to_automaton: pairs token name -> automaton. highest priority first
    :param ignore_token_automatons: automatons for tokens to ignore, will have lower priority than other tokens
    """
    assert IGNORED_TOKEN not in token_names_to_automaton
    token_names = list(token_names_to_automaton.keys()) + [IGNORED_TOKEN] * len(ignore_token_automatons)
    automatons = list(token_names_to_automaton.values()) + ignore_token_automatons
    return Scanner(token_names=token_names, automatons=automatons)

  def _get_next_possible_chars(self, alive: List[int]) -> Set[Label]:
    """
    :param alive: indices of automatons that are still running
    :returns: all chars that any of these automatons can consume from its current frontier
    """
    return {
      char for i in alive for state in self.automatons[i].frontier
      for char in self.automatons[i].graph.get_labels(state)}

  def _scan_prefix(self, word: str, pos: int) -> Tuple[Optional[Tuple[Optional[str], int]], int, List[int]]:
    """
    Runs all automatons from `pos` until none can consume the next char or the word ends.

    :returns: longest match (as in `match_prefix`), the position where scanning stopped,
      and the indices of the automatons that were still running there.
    """
    assert 0 <= pos <= len(word)
    for automaton in self.automatons:
      automaton.reset()
    alive = list(range(len(self.automatons)))
    match: Optional[Tuple[Optional[str], int]] = None
    end_pos = pos
    while end_pos < len(word):
      char = word[end_pos]
      next_alive = [i for i in alive if self.automatons[i].has_transitions(char)]
      if len(next_alive) == 0:
        break
      alive = next_alive
      for i in alive:
        self.automatons[i].apply(char)
      end_pos += 1
      accepting = [i for i in alive if self.automatons[i].accepts()]
      if len(accepting) >= 1:
        match = self.token_names[accepting[0]], end_pos
    return match, end_pos, alive

  def match_prefix(self, word: str, pos: int) -> Optional[Tuple[Optional[str], int]]:
    """
    Find the longest non-empty prefix of `word[pos:]` accepted by some automaton.
    If several automatons accept it, the first one wins.

    :returns: token name and end position (exclusive), or None if nothing matches.
    """
    match, _, _ = self._scan_prefix(word, pos)
    return match

  def tokenize(self, word: str) -> Tuple[Tuple[Optional[str], ...], Tuple[int, ...]]:
    """
    Find first longest matching analysis.
    :returns: token analysis + decomposition (i.e. positions where tokens start).
    :raises: ScanError
    """
    analysis: List[Optional[str]] = []
    decomposition: List[int] = []
    pos = 0
    while pos < len(word):
      match, stop_pos, alive = self._scan_prefix(word, pos)
      if match is None:
        expected = ', '.join('%r' % c for c in sorted(self._get_next_possible_chars(alive)))
        if stop_pos == pos:
          raise ScanError(word, pos, 'Unrecognized char %r, expected one of: %s' % (word[pos], expected))
        if stop_pos == len(word):
          raise ScanError(word, stop_pos, 'Missing more characters to complete token %r, expected one of: %s' % (
            word[pos:stop_pos], expected))
        raise ScanError(word, stop_pos, 'Unrecognized pattern to continue token %r, expected one of: %s' % (
          word[pos:stop_pos], expected))
      token_name, end_pos = match
      logger.debug('token %r at %i:%i', token_name, pos, end_pos)
      analysis.append(token_name)
      decomposition.append(pos)
      pos = end_pos
    return tuple(analysis), tuple(decomposition)
