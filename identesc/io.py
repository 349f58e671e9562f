# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Output helpers for the command line tool: results go to stdout, diagnostics to stderr.'

from sys import stderr
from typing import Any


def outL(*items:Any, sep='', flush=False) -> None:
  'Print one result line.'
  print(*items, sep=sep, flush=flush)


def errSL(*items:Any, flush=False) -> None:
  'Print a space-separated diagnostic line, as emitted by `-dbg`.'
  print(*items, file=stderr, flush=flush)
