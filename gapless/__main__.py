#!/usr/bin/env python3

# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Main driver for gapless.

Run with --help for details.
"""

import sys
import argparse
import logging

from gapless.common.error import error, error_if, warn, warnings_reported, set_basename, set_options
from gapless.common.printers import TablePrinter
from gapless.common import day as D
from gapless.parse import Parser, CommandType
from gapless.timeline import Timeline

def dump(timeline, out=None):
  out = out or sys.stdout
  with TablePrinter(['#', 'From Date', 'To Date'], out) as p:
    for row in timeline.rows():
      p.add(*row)

def run(cmds, timeline, assume_yes=False, validate=True, today=None, out=None):
  """Replays parsed commands against timeline."""
  out = out or sys.stdout

  def confirm(period):
    if not assume_yes:
      warn(cmd.loc, f"{period} overlaps existing periods and would be merged (use -y to proceed)")
    return assume_yes

  for cmd in cmds:
    if cmd.type == CommandType.SHOW:
      dump(timeline, out)
      continue

    if cmd.type == CommandType.CHECK:
      overlap = timeline.needs_confirmation(cmd.period)
      out.write(f"{cmd.period}: {'overlap' if overlap else 'no overlap'}\n")
      continue

    if cmd.type == CommandType.DELETE:
      if not timeline.can_delete():
        warn(cmd.loc, "can not delete the only period")
      elif not 0 <= cmd.index < len(timeline):
        warn(cmd.loc, f"no period with index {cmd.index}")
      else:
        timeline.delete(cmd.index)
      continue

    if validate:
      problems = timeline.validate(cmd.period, today)
      if problems:
        for msg in problems:
          warn(cmd.loc, msg)
        continue

    if cmd.type == CommandType.ADD:
      timeline.add(cmd.period, confirm)
    elif not timeline.can_edit():
      warn(cmd.loc, "can not edit the default period")
    elif not 0 <= cmd.index < len(timeline):
      warn(cmd.loc, f"no period with index {cmd.index}")
    else:
      timeline.edit(cmd.index, cmd.period, confirm)

def main(argv=None):
  set_basename('gapless')

  class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass
  parser = argparse.ArgumentParser(
    formatter_class=Formatter,
    description="Maintain a gapless partition of days into periods.",
    epilog="""\

SCRIPT contains one command per line:
  add FROM TO         Add new period.
  edit INDEX FROM TO  Replace period at INDEX.
  delete INDEX        Delete period at INDEX.
  check FROM TO       Report whether period would overlap existing ones.
  show                Print current periods.

Days are given as YYYY-MM-DD or as 'inception'/'cur'.

Examples:
  $ echo 'add 2020-01-01 2020-06-30' | {exe}
  $ {exe} -y periods.txt\
""".format(exe='python -mgapless'))
  parser.add_argument(
    'script',
    metavar='SCRIPT',
    help="Path to operations script.",
    nargs='?')
  parser.add_argument(
    '-y', '--yes',
    help="Merge overlapping periods without asking.",
    action='store_true')
  parser.add_argument(
    '--no-validate',
    help="Do not check that period starts before it ends and before today.",
    dest='validate',
    action='store_false',
    default=True)
  parser.add_argument(
    '--today',
    help="Override today's date (YYYY-MM-DD).")
  parser.add_argument(
    '--verbose', '-v',
    help="Print diagnostic info.",
    action='count',
    default=0)
  parser.add_argument(
    '--strict',
    help="Exit with error if any command was skipped.",
    action='store_true')
  parser.add_argument(
    '--print-stack',
    help="Print call stack on error (INTERNAL).",
    action='store_true')

  args = parser.parse_args(argv)

  v = min(2, args.verbose)
  loglevel = logging.WARNING - 10 * v
  logging.basicConfig(level=loglevel)

  set_options(print_stack=args.print_stack, reset=True)

  today = None
  if args.today is not None:
    try:
      today = D.from_date(D.parse(args.today))
    except ValueError:
      error(f"failed to parse --today: {args.today}")

  parser = Parser()
  if args.script is None:
    parser.reset('<stdin>', sys.stdin)
    cmds = parser.parse()
  else:
    try:
      with open(args.script, 'r') as f:
        parser.reset(args.script, f)
        cmds = parser.parse()
    except OSError as e:
      error(f"failed to open '{args.script}': {e.strerror}")

  timeline = Timeline()
  run(cmds, timeline, args.yes, args.validate, today)
  dump(timeline)

  n = warnings_reported()
  error_if(args.strict and n, f"{n} command(s) skipped")

if __name__ == '__main__':
  main()
