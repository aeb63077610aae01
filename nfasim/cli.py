"""
Command line interface: build a NFA from arguments and run it on words.
"""
import argparse
import logging
from typing import List, Optional, Sequence, Tuple

import better_exchook

from nfasim.automaton import NonDeterministicAutomaton


def parse_transition(arg: str) -> Tuple[int, str, int]:
  """
  Parses `SOURCE:LABEL:DEST`. Splits at the first and last colon, so the label may be a colon itself.
  """
  if arg.count(':') < 2:
    raise argparse.ArgumentTypeError('transition %r must look like SOURCE:LABEL:DEST' % arg)
  source, rest = arg.split(':', 1)
  label, dest = rest.rsplit(':', 1)
  if len(label) != 1:
    raise argparse.ArgumentTypeError('transition %r must be labeled by a single char, got %r' % (arg, label))
  try:
    return int(source), label, int(dest)
  except ValueError:
    raise argparse.ArgumentTypeError('transition %r must connect integer states' % arg) from None


def make_automaton(start_states: Sequence[int], accept_states: Sequence[int],
                   transitions: Sequence[Tuple[int, str, int]]) -> NonDeterministicAutomaton:
  automaton = NonDeterministicAutomaton()
  for state in start_states:
    automaton.add_state(state, is_start=True, is_accept=False)
  for state in accept_states:
    automaton.add_state(state, is_start=False, is_accept=True)
  for source, label, dest in transitions:
    automaton.add_transition(source, label, dest)
  return automaton


def make_arg_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(description='Run a nondeterministic finite automaton on words.')
  parser.add_argument('words', nargs='+', metavar='WORD', help='Words to run the automaton on')
  parser.add_argument('--start', action='append', type=int, default=[], metavar='STATE', help='Start state')
  parser.add_argument('--accept', action='append', type=int, default=[], metavar='STATE', help='Accept state')
  parser.add_argument(
    '--transition', action='append', type=parse_transition, default=[], metavar='SOURCE:LABEL:DEST',
    help='Transition from SOURCE to DEST consuming LABEL')
  parser.add_argument('--verbose', action='store_true', help='Print the frontier after every step')
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main entry point.
  :returns: 0 iff all words are accepted
  """
  better_exchook.install()
  args = make_arg_parser().parse_args(argv)
  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.WARNING, format='%(name)s: %(message)s')

  automaton = make_automaton(args.start, args.accept, args.transition)
  all_accepted = True
  for word in args.words:
    accepted = automaton.accepts_word(word)
    all_accepted = all_accepted and accepted
    print('%s: %s' % (word, 'accept' if accepted else 'reject'))
  return 0 if all_accepted else 1
