# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import _SubParsersAction, ArgumentParser, Namespace
from functools import cached_property
from typing import Callable, Sequence


class CommandParser(ArgumentParser):
  '''
  An ArgumentParser configured with subcommand parsers.
  Each command is added with `add_command()`, which binds the command's main function to the parsed namespace.
  Options shared by all commands are added to the top level parser and must precede the command name.
  '''

  @cached_property
  def _commands_subparsers(self) -> _SubParsersAction:
    commands = self.add_subparsers(required=True, dest='command', help='Available commands.')
    self.epilog = "For help with a specific command, pass '-h' to that command."
    return commands


  def add_command(self, main_fn:Callable[[Namespace],None], name:str|None=None, **kwargs) -> ArgumentParser:
    '''
    Add a command to the parser.
    By default, `name` is derived from `main_fn` by removing any 'main_' prefix and replacing underscores with hyphens.
    '''
    if not name:
      name = main_fn.__name__.removeprefix('main_').replace('_', '-')
    command = self._commands_subparsers.add_parser(name, **kwargs)
    command.set_defaults(main_fn=main_fn)
    return command


  def parse_and_run_command(self, args:Sequence[str]|None=None) -> Namespace:
    'Parse arguments and run the selected command.'
    ns = self.parse_args(args)
    ns.main_fn(ns)
    return ns
