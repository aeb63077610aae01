from typing import Dict, Optional, Tuple


class NfaError(Exception):
  def __init__(self, message: str):
    super(NfaError, self).__init__(message)


def get_line_col_from_pos(word: str, pos: int, num_before_context_lines: int = 1,
                          num_after_context_lines: int = 1) -> Tuple[int, int, Dict[int, str]]:
  """
  :returns: line + column, both starting counting at 1, as well as dict with context lines
  """
  assert 0 <= pos <= len(word)
  if len(word) == 0:
    return 0, 1, {0: ''}
  raw_lines = word.splitlines(keepends=True)
  # line breaks can be longer than one char (e.g. \r\n), only strip them for display
  word_lines = [raw_line.splitlines()[0] for raw_line in raw_lines]
  assert len(word_lines) > 0

  def context(first_line_idx: int, last_line_idx: int) -> Dict[int, str]:
    first_line_idx, last_line_idx = max(0, first_line_idx), min(len(word_lines) - 1, last_line_idx)
    return {line_idx + 1: word_lines[line_idx] for line_idx in range(first_line_idx, last_line_idx + 1)}

  line_begin = 0
  for line_idx, (raw_line, line) in enumerate(zip(raw_lines, word_lines)):
    if pos < line_begin + len(raw_line) or line_idx == len(raw_lines) - 1:
      # positions within the line break map to the column right behind the line
      col = min(pos - line_begin, len(line)) + 1
      return line_idx + 1, col, context(line_idx - num_before_context_lines, line_idx + num_after_context_lines)
    line_begin += len(raw_line)
  assert False, 'unreachable'


def make_error_message(word: str, from_pos: int, error_name: str, message: str, to_pos: Optional[int] = None) -> str:
  line_num_pad_size = 3
  line, from_col, context_lines = get_line_col_from_pos(
    word, from_pos, num_before_context_lines=3, num_after_context_lines=3)
  assert line in context_lines
  if to_pos is not None:
    assert from_pos <= to_pos
    to_line, to_col, _ = get_line_col_from_pos(word, to_pos, num_before_context_lines=0, num_after_context_lines=0)
    if line != to_line:  # only the first line is marked
      to_col = len(context_lines[line]) + 1
  else:
    to_col = from_col + 1
  rendered_lines = []
  for context_line_num, context_line in context_lines.items():
    rendered_lines.append(('%0' + str(line_num_pad_size) + 'i: %s') % (context_line_num, context_line))
    if context_line_num == line:
      rendered_lines.append(' ' * (from_col - 1 + line_num_pad_size + 2) + '^' * max(1, to_col - from_col))
  return '%s on line %s:%s\n\n%s\n\n%s' % (error_name, line, from_col, '\n'.join(rendered_lines), message)


class ScanError(NfaError):
  """
  When no token automaton matches a non-empty prefix of the remaining word.
  """

  def __init__(self, word: str, pos: int, message: str):
    self.word = word
    self.pos = pos
    super().__init__(make_error_message(word, pos, error_name='Scan error', message=message))
