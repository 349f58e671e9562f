# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='identesc',
  version='0.0.1',
  license='CC0',
  description='identesc converts paths and arbitrary strings into legal, reversible identifiers.',

  python_requires='>=3.10',
  packages=['identesc', 'identesc.bin'],
  entry_points={'console_scripts': [
    'identesc=identesc.bin.identesc:main',
  ]},
  install_requires=[],
  extras_require={
    'test': ['utest'],
  },
  keywords=[
    'escape',
    'identifier',
    'java',
    'mangle',
  ],
  classifiers=[
    'Environment :: Console',
    'Intended Audience :: Developers',
    'License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication',
    'Programming Language :: Python :: 3 :: Only',
  ],
)
