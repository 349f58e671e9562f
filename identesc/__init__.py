# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
identesc derives legal, reversible identifiers and dotted package names from arbitrary strings and resource paths.
'''

from .escape import escape_char, escape_pattern, InvalidEscape, unescape, unescape_all
from .ident import (IdentRules, is_java_ident_part, is_java_ident_start, is_legal_identifier, is_py_ident_part,
  is_py_ident_start, java_identifier, java_rules, py_rules, rules_for_target, sanitize, target_rules)
from .package import java_package, path_for_package, path_segments, path_to_dotted_name
from .reserved import (is_java_keyword, is_java_literal, is_special_identifier, java_keywords, java_literals,
  java_reserved_words, java_special_identifiers, py_keywords, py_literals, py_reserved_words, py_special_identifiers,
  ReservedWords)
