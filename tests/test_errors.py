import _setup_test_env  # noqa
import sys
import unittest

import better_exchook

from nfasim.errors import get_line_col_from_pos, make_error_message, NfaError, ScanError


def test_get_line_col_from_pos():
  word = 'first\nsecond\nthird'
  assert get_line_col_from_pos(word, 0) == (1, 1, {1: 'first', 2: 'second'})
  assert get_line_col_from_pos(word, 5) == (1, 6, {1: 'first', 2: 'second'})
  assert get_line_col_from_pos(word, 6) == (2, 1, {1: 'first', 2: 'second', 3: 'third'})
  assert get_line_col_from_pos(word, len(word), num_before_context_lines=0) == (3, 6, {3: 'third'})
  assert get_line_col_from_pos('ab\n', 3) == (1, 3, {1: 'ab'})
  assert get_line_col_from_pos('', 0) == (0, 1, {0: ''})


def test_make_error_message():
  message = make_error_message('one\ntwo', 5, error_name='Some error', message='details', to_pos=7)
  assert message == 'Some error on line 2:2\n\n001: one\n002: two\n      ^^\n\ndetails'


def test_ScanError():
  error = ScanError('x?', 1, 'bad char')
  assert isinstance(error, NfaError)
  assert error.word == 'x?'
  assert error.pos == 1
  assert str(error) == 'Scan error on line 1:2\n\n001: x?\n      ^\n\nbad char'


def test_get_line_col_from_pos_crlf():
  word = 'a\r\nb?'
  assert get_line_col_from_pos(word, 4) == (2, 2, {1: 'a', 2: 'b?'})
  assert get_line_col_from_pos(word, 3) == (2, 1, {1: 'a', 2: 'b?'})
  assert get_line_col_from_pos(word, 2) == (1, 2, {1: 'a', 2: 'b?'})
  assert get_line_col_from_pos('a\r\n', 3) == (1, 2, {1: 'a'})


def test_ScanError_crlf():
  error = ScanError('a\r\nb?', 4, 'bad char')
  assert str(error) == 'Scan error on line 2:2\n\n001: a\n002: b?\n      ^\n\nbad char'


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
