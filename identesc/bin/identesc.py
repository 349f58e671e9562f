# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Convert paths and strings to legal identifiers, and back.'

from argparse import Namespace
from os import environ
from typing import Sequence

from ..argparse import CommandParser
from ..escape import escape_char, InvalidEscape, unescape, unescape_all
from ..ident import IdentRules, java_identifier, rules_for_target, target_rules
from ..io import errSL, outL
from ..package import java_package, path_for_package


def main(args:Sequence[str]|None=None) -> None:
  parser = CommandParser(prog='identesc', description='Convert paths and strings to legal identifiers, and back.')
  parser.add_argument('-target', default=environ.get('IDENTESC_TARGET', 'java'),
    help=f'Target language rules: {", ".join(target_rules)}. Defaults to $IDENTESC_TARGET, or "java".')
  parser.add_argument('-dbg', action='store_true', help='Print intermediate values to stderr.')

  parser.add_command(main_escape, help='Print the escape sequences for every character of each argument.') \
    .add_argument('strings', nargs='+')
  parser.add_command(main_unescape, help='Decode each argument, which must be exactly one escape sequence.') \
    .add_argument('sequences', nargs='+')
  parser.add_command(main_unescape_all, help='Decode all escape sequences in each argument.') \
    .add_argument('strings', nargs='+')
  parser.add_command(main_ident, help='Print the legal identifier for each argument.') \
    .add_argument('names', nargs='+')
  parser.add_command(main_package, help='Print the dotted package name for each path.') \
    .add_argument('paths', nargs='+')
  parser.add_command(main_path, help='Print the path from which each dotted name was generated.') \
    .add_argument('names', nargs='+')
  parser.add_command(main_reserved, help='Print which reserved word tables contain each argument.') \
    .add_argument('words', nargs='+')

  parser.parse_and_run_command(args)


def main_escape(ns:Namespace) -> None:
  for s in ns.strings:
    outL(''.join(escape_char(c) for c in s))


def main_unescape(ns:Namespace) -> None:
  for seq in ns.sequences:
    try: outL(unescape(seq))
    except InvalidEscape as e: exit(f'identesc error: {e}')


def main_unescape_all(ns:Namespace) -> None:
  for s in ns.strings:
    outL(unescape_all(s))


def main_ident(ns:Namespace) -> None:
  rules = _rules(ns)
  for name in ns.names:
    outL(java_identifier(name, rules))


def main_package(ns:Namespace) -> None:
  rules = _rules(ns)
  on_segment = _print_segment if ns.dbg else None
  for path in ns.paths:
    outL(java_package(path, rules, on_segment=on_segment))


def _print_segment(segment:str, ident:str) -> None: errSL(f'  {segment!r} -> {ident!r}')


def main_path(ns:Namespace) -> None:
  for name in ns.names:
    outL(path_for_package(name))


def main_reserved(ns:Namespace) -> None:
  reserved = _rules(ns).reserved
  for word in ns.words:
    tables = [label for label, words in [
      ('keyword', reserved.keywords), ('literal', reserved.literals), ('special', reserved.special_identifiers)]
      if word in words]
    outL(f'{word}: {",".join(tables) or "-"}')


def _rules(ns:Namespace) -> IdentRules:
  try: rules = rules_for_target(ns.target)
  except KeyError as e: exit(f'identesc error: {e.args[0]}')
  if ns.dbg: errSL('target:', rules.name)
  return rules


if __name__ == '__main__': main()
