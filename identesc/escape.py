# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Reversible escaping of single characters into identifier-safe sequences.

An escape sequence has the exact form `__xxxx__`, where `xxxx` is the lowercase, zero-padded hexadecimal value
of a 16-bit code unit. Every character of an escape sequence is legal in the identifiers of C-like languages,
so escaped text can be embedded anywhere in a generated identifier.

Note that the encoding is not injective over arbitrary input:
text that already contains an escape-shaped substring (e.g. a literal '__0041__') is indistinguishable
from a genuine escape, and `unescape_all` decodes it.
'''

import re


class InvalidEscape(ValueError):
  'Raised when a string is not exactly one well-formed escape sequence.'


escape_pattern = re.compile(r'__[0-9a-f]{4}__')

# An escaped surrogate pair must be tried before the single sequence alternative.
_unescape_re = re.compile(r'__(d[89ab][0-9a-f]{2})____(d[c-f][0-9a-f]{2})__|__([0-9a-f]{4})__')


def escape_char(char:str) -> str:
  '''
  Escape `char` into a sequence matching `__[0-9a-f]{4}__`.
  The character is not checked for legality; any character is escaped.
  A character outside the Basic Multilingual Plane does not fit in one sequence,
  so it is escaped as the two sequences of its UTF-16 surrogate pair.
  '''
  if len(char) != 1: raise ValueError(f'escape_char expects a single character; received: {char!r}')
  code = ord(char)
  if code < 0x10000: return f'__{code:04x}__'
  code -= 0x10000
  return f'__{0xd800 + (code >> 10):04x}____{0xdc00 + (code & 0x3ff):04x}__'


def unescape(escape_seq:str) -> str:
  '''
  Return the character encoded by `escape_seq`.
  The entire string must match `__[0-9a-f]{4}__`; otherwise raise InvalidEscape.
  '''
  if not escape_pattern.fullmatch(escape_seq):
    raise InvalidEscape(f'string {escape_seq!r} does not match pattern {escape_pattern.pattern}')
  return chr(int(escape_seq[2:6], 16))


def unescape_all(text:str) -> str:
  '''
  Replace every escape sequence in `text` with the character it encodes.
  Matches are found left to right without overlap, and decoded text is never rescanned.
  Escape-like text that does not match the pattern exactly is left as is.
  A pair of adjacent sequences encoding a high and low surrogate is decoded as the single character they encode;
  surrogates already present in `text` are left alone.
  '''
  return _unescape_re.sub(_unescape_match, text)


def _unescape_match(m:re.Match) -> str:
  high, low, single = m.groups()
  if single: return chr(int(single, 16))
  return chr(0x10000 + ((int(high, 16) - 0xd800) << 10) + (int(low, 16) - 0xdc00))
