# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This file contains APIs for comparing and shifting calendar days.
# Days are 'YYYY-MM-DD' strings; two of them are sentinels which
# are recognized by equality and never treated as real dates.

import datetime

FORMAT = '%Y-%m-%d'

INCEPTION = '1111-11-11'
CUR = '9999-12-31'

_one_day = datetime.timedelta(days=1)

def parse(s):
  """Convert day string to datetime.date, raising ValueError on junk."""
  if not isinstance(s, str):
    raise ValueError(f"day must be a string: {s!r}")
  return datetime.datetime.strptime(s, FORMAT).date()

def from_date(d):
  return d.isoformat()

def is_sentinel(s):
  return s == INCEPTION or s == CUR

def on_axis(s):
  """Whether s is a sentinel or a real day strictly between them.

  Ordering by key() treats every real day as later than INCEPTION, so
  days before 1111-11-11 must be rejected before they reach the engine."""
  if is_sentinel(s):
    return True
  return parse(INCEPTION) < parse(s) < parse(CUR)

def key(s):
  """Sort key which places INCEPTION below and CUR above any real date."""
  if s == INCEPTION:
    return 0, datetime.date.min
  if s == CUR:
    return 2, datetime.date.max
  return 1, parse(s)

def compare(a, b):
  ka, kb = key(a), key(b)
  return (ka > kb) - (ka < kb)

def lt(a, b):
  return key(a) < key(b)

def le(a, b):
  return key(a) <= key(b)

def earliest(*days):
  return min(days, key=key)

def latest(*days):
  return max(days, key=key)

def shift(s, n):
  """Move day by n calendar days.

  Sentinels saturate when moved outwards: CUR + 1 is still CUR
  and INCEPTION - 1 is still INCEPTION. Moving them inwards
  gives the neighbouring real day."""
  if n == 0:
    return s
  if (s == CUR and n > 0) or (s == INCEPTION and n < 0):
    return s
  d = parse(s)
  try:
    return from_date(d + n * _one_day)
  except OverflowError:
    return CUR if n > 0 else INCEPTION

def next_day(s):
  return shift(s, 1)

def prev_day(s):
  return shift(s, -1)

def today():
  return from_date(datetime.date.today())

def pretty(s):
  """Human-readable day, as shown in period tables."""
  if s == INCEPTION:
    return 'Inception Date'
  if s == CUR:
    return 'Cur Date'
  return parse(s).strftime('%m/%d/%Y')
