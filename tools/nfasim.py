#!/usr/bin/env python3

"""
Main entry point: run a NFA given on the command line on some words.
"""
import sys

import _setup_nfasim_env  # noqa
from nfasim.cli import main


if __name__ == '__main__':
  sys.exit(main())
