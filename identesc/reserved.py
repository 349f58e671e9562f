# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Reserved words that cannot be used verbatim as generated identifiers.
All tables are frozen at import time.
'''

import keyword
from typing import NamedTuple


# Java keywords, per JLS §3.9. '_' has been reserved since Java 9.
java_keywords = frozenset({
  '_',
  'abstract',
  'assert',
  'boolean',
  'break',
  'byte',
  'case',
  'catch',
  'char',
  'class',
  'const',
  'continue',
  'default',
  'do',
  'double',
  'else',
  'enum',
  'extends',
  'final',
  'finally',
  'float',
  'for',
  'goto',
  'if',
  'implements',
  'import',
  'instanceof',
  'int',
  'interface',
  'long',
  'native',
  'new',
  'package',
  'private',
  'protected',
  'public',
  'return',
  'short',
  'static',
  'strictfp',
  'super',
  'switch',
  'synchronized',
  'this',
  'throw',
  'throws',
  'transient',
  'try',
  'void',
  'volatile',
  'while',
})

java_literals = frozenset({'true', 'false', 'null'})

# Restricted identifiers: legal names in most positions, but not as type names.
java_special_identifiers = frozenset({'var'})


py_literals = frozenset({'True', 'False', 'None'})

py_keywords = frozenset(keyword.kwlist) - py_literals

py_special_identifiers = frozenset(keyword.softkwlist)


class ReservedWords(NamedTuple):
  keywords: frozenset[str]
  literals: frozenset[str]
  special_identifiers: frozenset[str]

  def is_reserved(self, word:str) -> bool:
    return word in self.keywords or word in self.literals or word in self.special_identifiers


java_reserved_words = ReservedWords(java_keywords, java_literals, java_special_identifiers)

py_reserved_words = ReservedWords(py_keywords, py_literals, py_special_identifiers)


def is_java_keyword(word:str) -> bool:
  'Test whether `word` is a Java keyword.'
  return word in java_keywords


def is_java_literal(word:str) -> bool:
  'Test whether `word` is one of the Java literals `true`, `false` or `null`.'
  return word in java_literals


def is_special_identifier(word:str) -> bool:
  'Test whether `word` is a Java restricted identifier such as `var`.'
  return word in java_special_identifiers
