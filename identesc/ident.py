# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Convert arbitrary strings into legal identifiers.
Illegal characters are replaced by their escape sequences (see `identesc.escape`),
and identifiers that collide with reserved words have their first character escaped.
'''

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable
from unicodedata import category

from .escape import escape_char
from .reserved import java_reserved_words, py_reserved_words, ReservedWords


@dataclass(frozen=True)
class IdentRules:
  '''
  The identifier rules of a target language.
  `is_start` and `is_part` test single characters for legality at the first and subsequent positions respectively.
  '''
  name: str
  is_start: Callable[[str], bool]
  is_part: Callable[[str], bool]
  reserved: ReservedWords


_java_start_categories = frozenset({'Lu', 'Ll', 'Lt', 'Lm', 'Lo', 'Nl', 'Sc', 'Pc'})

_java_part_categories = _java_start_categories | {'Nd', 'Mc', 'Mn', 'Cf'}


def is_java_ident_start(char:str) -> bool:
  '''
  Equivalent to Java's `Character.isJavaIdentifierStart(char)`.
  Java judges 16-bit code units, so characters outside the BMP (whose surrogate halves are illegal) are rejected.
  '''
  return ord(char) < 0x10000 and category(char) in _java_start_categories


def is_java_ident_part(char:str) -> bool:
  'Equivalent to Java\'s `Character.isJavaIdentifierPart(char)`, including the "identifier ignorable" controls.'
  code = ord(char)
  if code >= 0x10000: return False
  if code <= 0x08 or 0x0e <= code <= 0x1b or 0x7f <= code <= 0x9f: return True
  return category(char) in _java_part_categories


def is_py_ident_start(char:str) -> bool: return char.isidentifier()

def is_py_ident_part(char:str) -> bool: return ('a' + char).isidentifier()


java_rules = IdentRules(name='java', is_start=is_java_ident_start, is_part=is_java_ident_part,
  reserved=java_reserved_words)

py_rules = IdentRules(name='py', is_start=is_py_ident_start, is_part=is_py_ident_part, reserved=py_reserved_words)

target_rules = MappingProxyType({r.name: r for r in (java_rules, py_rules)})


def rules_for_target(name:str) -> IdentRules:
  'Look up the rules for the target language `name`; raises KeyError for unknown targets.'
  try: return target_rules[name]
  except KeyError as e: raise KeyError(f'unknown target: {name!r}; available: {", ".join(target_rules)}') from e


def java_identifier(identifier:str, rules:IdentRules=java_rules) -> str:
  '''
  Convert `identifier` to a legal identifier.
  Illegal characters are escaped; if the result is a reserved word, only its first character is escaped.
  The empty string is returned unchanged.
  '''
  is_start = rules.is_start
  is_part = rules.is_part
  chars = [c if (is_part(c) if i else is_start(c)) else escape_char(c) for i, c in enumerate(identifier)]
  ident = ''.join(chars)
  if rules.reserved.is_reserved(ident):
    return escape_char(ident[0]) + ident[1:]
  return ident


sanitize = java_identifier


def is_legal_identifier(identifier:str, rules:IdentRules=java_rules) -> bool:
  'Test whether `identifier` can be used verbatim as an identifier under `rules`.'
  if not identifier or not rules.is_start(identifier[0]): return False
  if not all(rules.is_part(c) for c in identifier[1:]): return False
  return not rules.reserved.is_reserved(identifier)
