# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from identesc.reserved import (is_java_keyword, is_java_literal, is_special_identifier, java_keywords, java_literals,
  java_reserved_words, java_special_identifiers, py_reserved_words)
from utest import utest, utest_val


utest_val(51, len(java_keywords))
utest_val(frozenset({'true', 'false', 'null'}), java_literals)
utest_val(frozenset({'var'}), java_special_identifiers)

utest(True, is_java_keyword, 'switch')
utest(True, is_java_keyword, 'goto')
utest(True, is_java_keyword, '_')
utest(False, is_java_keyword, 'Switch') # Case sensitive.
utest(False, is_java_keyword, 'true')
utest(False, is_java_keyword, 'var')
utest(False, is_java_keyword, '')

utest(True, is_java_literal, 'true')
utest(True, is_java_literal, 'null')
utest(False, is_java_literal, 'TRUE')
utest(False, is_java_literal, 'class')

utest(True, is_special_identifier, 'var')
utest(False, is_special_identifier, 'val')

utest(True, java_reserved_words.is_reserved, 'class')
utest(True, java_reserved_words.is_reserved, 'false')
utest(True, java_reserved_words.is_reserved, 'var')
utest(False, java_reserved_words.is_reserved, 'script')

utest(True, py_reserved_words.is_reserved, 'def')
utest(True, py_reserved_words.is_reserved, 'None')
utest(True, py_reserved_words.is_reserved, 'match')
utest(False, py_reserved_words.is_reserved, 'switch')
utest_val(False, 'None' in py_reserved_words.keywords, 'literals are not listed as keywords')
