# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from identesc.escape import escape_char, escape_pattern, InvalidEscape, unescape, unescape_all
from utest import utest, utest_exc, utest_val


def invalid(s:str) -> InvalidEscape:
  return InvalidEscape(f'string {s!r} does not match pattern {escape_pattern.pattern}')


# escape_char.
utest('__002e__', escape_char, '.')
utest('__0020__', escape_char, ' ')
utest('__0000__', escape_char, '\0')
utest('__0041__', escape_char, 'A')
utest('__00e9__', escape_char, 'é')
utest('__ffff__', escape_char, '\uffff')
utest('__d83d____de00__', escape_char, '\U0001f600') # Astral characters escape as a surrogate pair.

utest_exc(ValueError("escape_char expects a single character; received: 'ab'"), escape_char, 'ab')
utest_exc(ValueError("escape_char expects a single character; received: ''"), escape_char, '')


# unescape.
utest('.', unescape, '__002e__')
utest('.', unescape, escape_char('.'))
utest('\ud83d', unescape, '__d83d__')

for code in range(0x10000):
  c = chr(code)
  utest(c, unescape, escape_char(c))

for s in [
  '',
  '__002e__x', # Trailing text.
  'x__002e__', # Leading text.
  '__002e__\n',
  '__02e__', # Too few digits.
  '__0002e__', # Too many digits.
  '__002E__', # Uppercase hex.
  '__002g__',
  '_002e__',
  '__002e_',
  '__002e____002e__', # Two sequences.
]:
  utest_exc(invalid(s), unescape, s)


# unescape_all.
utest('apps.projects.switch.script.html', unescape_all, 'apps.projects.__0073__witch.script__002e__html')
utest('apps.projects.switch.script.html', unescape_all, 'apps.projects.switch.script.html')
utest('', unescape_all, '')
utest('ab', unescape_all, '__0061____0062__')
utest('a_A', unescape_all, 'a___0041__')
utest('__002E__ __02e__ __002e_', unescape_all, '__002E__ __02e__ __002e_') # Malformed sequences pass through.

# Decoded text is not rescanned: the decoded '_' does not join the following text into a new sequence.
utest('__0041__', unescape_all, '__005f___0041__')

# Escaped surrogate pairs are recombined; lone surrogates are kept.
utest('\U0001f600', unescape_all, '__d83d____de00__')
utest('x\U0001f600y', unescape_all, 'x' + escape_char('\U0001f600') + 'y')
utest('\ud83d.', unescape_all, '__d83d__.')
utest('\ud83d\ud83d\ude00', unescape_all, '__d83d____d83d____de00__')

# Surrogates not decoded from sequences are never combined; text without sequences is unchanged.
utest('\ud83d\ude00', unescape_all, '\ud83d\ude00')
utest('\ud83d\ude00', unescape_all, '\ud83d__de00__')
utest('\ud83d\ude00', unescape_all, '__d83d__\ude00')

# Escape-shaped input is indistinguishable from a genuine escape.
utest_val('A', unescape_all('__0041__'), 'literal escape text is decoded')
