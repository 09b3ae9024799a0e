# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Positions of commands in operation scripts."""

class Location:
  """Command line of a script: file, line number and the command itself."""

  def __init__(self, script, lineno, text=''):
    self.script = script
    self.lineno = lineno
    self.text = text.strip()

  def quote(self):
    """Offending command for diagnostics, empty if unknown."""
    return f"  | {self.text}" if self.text else ''

  def __str__(self):
    return f'{self.script}:{self.lineno}'
