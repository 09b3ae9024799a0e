# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Diagnostics for gapless scripts.

Problems in a script either abort the run (error) or skip
a single command (warn). Skipped commands are counted so that
the driver can fail at the end in strict mode."""

import sys
from typing import NoReturn

from gapless.common.location import Location

class Diagnostics:
  prog = 'gapless'
  print_stack = False
  skipped = 0

def _emit(severity, where, msg):
  if where is None:
    sys.stderr.write(f"{Diagnostics.prog}: {severity}: {msg}\n")
    return
  sys.stderr.write(f"{Diagnostics.prog}: {severity}: {where}: {msg}\n")
  if where.quote():
    sys.stderr.write(where.quote() + '\n')

def _split(args):
  # Messages may be prefixed by script location
  if isinstance(args[0], Location):
    return args
  return (None,) + args

def error(*args) -> NoReturn:
  """Reports fatal problem and terminates."""
  where, msg = _split(args)
  _emit('error', where, msg)
  if Diagnostics.print_stack:
    raise RuntimeError(msg)
  sys.exit(1)

def error_if(cond, *args):
  if cond:
    error(*args)

def warn(*args):
  """Reports skipped command."""
  where, msg = _split(args)
  Diagnostics.skipped += 1
  _emit('warning', where, msg)

def warnings_reported():
  return Diagnostics.skipped

def set_basename(name):
  Diagnostics.prog = name

def set_options(print_stack=None, reset=False):
  """Configure reporting; reset clears the count of skipped commands."""
  if print_stack is not None:
    Diagnostics.print_stack = print_stack
  if reset:
    Diagnostics.skipped = 0
