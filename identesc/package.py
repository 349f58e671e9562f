# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Conversion between resource paths and dotted package / fully-qualified class names.
'''

import re
from typing import Callable

from .escape import unescape_all
from .ident import IdentRules, java_identifier, java_rules


_path_sep_re = re.compile(r'[/\\]')


def path_segments(path:str) -> list[str]:
  'Split `path` on both `/` and `\\`, omitting empty segments.'
  return [s for s in _path_sep_re.split(path) if s]


def java_package(path:str, rules:IdentRules=java_rules, on_segment:Callable[[str,str],None]|None=None) -> str:
  '''
  Convert `path` to a package or fully-qualified class name, depending on the path's value.
  Each segment is converted with `java_identifier` and the results are joined with '.'.
  Leading, trailing and repeated separators produce no components; an empty path produces ''.
  If provided, `on_segment` is called with each segment and its identifier.
  '''
  idents = []
  for segment in path_segments(path):
    ident = java_identifier(segment, rules)
    if on_segment: on_segment(segment, ident)
    idents.append(ident)
  return '.'.join(idents)


path_to_dotted_name = java_package


def path_for_package(name:str) -> str:
  '''
  Recover the absolute path from which a dotted `name` was generated.
  Escaped dots are not separators, so each component is unescaped after splitting.
  '''
  return ''.join('/' + unescape_all(c) for c in name.split('.') if c)
