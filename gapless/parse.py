# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This module provides APIs for parsing operation scripts, e.g.
#   add 2020-01-01 2020-06-30
#   edit 1 2020-02-01 cur
#   delete 0   # comment
#   check 2020-05-01 2021-01-01
#   show

import re
import logging

from gapless.common.error import error, error_if
from gapless.common.location import Location
from gapless.common import day as D
from gapless.common.interval import Period

logger = logging.getLogger(__name__)

class CommandType:
  ADD    = 'add'
  EDIT   = 'edit'
  DELETE = 'delete'
  CHECK  = 'check'
  SHOW   = 'show'

# Number of arguments expected by each command
_arity = {
  CommandType.ADD: 2,
  CommandType.EDIT: 3,
  CommandType.DELETE: 1,
  CommandType.CHECK: 2,
  CommandType.SHOW: 0,
}

class Command:
  """Represents parsed script command."""

  def __init__(self, type, loc, index=None, period=None):
    self.type = type
    self.loc = loc
    self.index = index
    self.period = period

  def __repr__(self):
    args = [str(x) for x in (self.index, self.period) if x is not None]
    return f"{self.loc}: {self.type} {' '.join(args)}".rstrip()

def read_day(s, loc):
  """Parse day e.g. "2020-01-10", "inception" or "cur"."""
  k = s.lower()
  if k == 'inception':
    return D.INCEPTION
  if k == 'cur':
    return D.CUR
  try:
    d = D.from_date(D.parse(s))
  except ValueError:
    error(loc, f"failed to parse day: {s}")
  error_if(not D.on_axis(d), loc, f"day {d} precedes inception {D.INCEPTION}")
  return d

def read_index(s, loc):
  error_if(re.fullmatch(r'[0-9]+', s) is None, loc, f"failed to parse index: {s}")
  return int(s)

def read_period(l, r, loc):
  l = read_day(l, loc)
  r = read_day(r, loc)
  error_if(D.lt(r, l), loc, f"period ends before it starts: {l} - {r}")
  return Period(l, r)

class Parser:
  """Parser for operation scripts."""

  def __init__(self):
    self.filename = self.lines = None

  def reset(self, filename, f):
    self.filename = filename
    self.lines = f

  def parse_line(self, line, loc):
    # Strip comments and whites
    line = re.sub(r'#.*$', '', line).strip()
    if not line:
      return None

    words = line.split()
    type = words[0].lower()
    args = words[1:]
    error_if(type not in _arity, loc, f"unknown command '{words[0]}'")
    error_if(len(args) != _arity[type], loc,
             f"'{type}' expects {_arity[type]} argument(s), got {len(args)}")

    if type in (CommandType.ADD, CommandType.CHECK):
      return Command(type, loc, period=read_period(*args, loc))
    if type == CommandType.EDIT:
      return Command(type, loc,
                     index=read_index(args[0], loc),
                     period=read_period(args[1], args[2], loc))
    if type == CommandType.DELETE:
      return Command(type, loc, index=read_index(args[0], loc))
    return Command(type, loc)

  def parse(self):
    cmds = []
    for lineno, line in enumerate(self.lines, 1):
      cmd = self.parse_line(line, Location(self.filename, lineno, line))
      if cmd is not None:
        logger.debug(f"parse: {cmd}")
        cmds.append(cmd)
    return cmds
