# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This file contains APIs for describing ranges of calendar days.

from gapless.common import day as D

def _canon(s):
  if D.is_sentinel(s):
    return s
  return D.from_date(D.parse(s))

class Period:
  """Represents an inclusive range of days [from_date, to_date]."""

  __slots__ = ('l', 'r')

  def __init__(self, l, r=None):
    l = _canon(l)
    r = l if r is None else _canon(r)
    if D.lt(r, l):
      raise ValueError(f"period ends before it starts: {l} > {r}")
    self.l = l
    self.r = r

  @property
  def from_date(self):
    return self.l

  @property
  def to_date(self):
    return self.r

  def contains(self, d):
    return D.le(self.l, d) and D.le(d, self.r)

  def is_default(self):
    return self.l == D.INCEPTION and self.r == D.CUR

  def __eq__(self, i):
    # Plain (from, to) pairs compare by value too
    if isinstance(i, tuple):
      return (self.l, self.r) == i
    if not isinstance(i, Period):
      return NotImplemented
    return self.l == i.l and self.r == i.r

  def __iter__(self):
    return iter((self.l, self.r))

  def __hash__(self):
    return hash((self.l, self.r))

  def __repr__(self):
    return '[%s, %s]' % (self.l, self.r)

DEFAULT = Period(D.INCEPTION, D.CUR)

def by_start(i):
  """Sort key for periods."""
  return D.key(i.l)
