# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""APIs for editing a partition interactively.

Timeline holds the current partition and replaces it with
the result of the partition engine on every change."""

import logging

from gapless.common import day as D
from gapless import partition as P

logger = logging.getLogger(__name__)

class Timeline:
  """Holds partition of days into periods."""

  def __init__(self, periods=None):
    if periods:
      self._periods = P.normalize(periods, (D.INCEPTION, D.CUR))
    else:
      self._periods = P.default_partition()

  @property
  def periods(self):
    return list(self._periods)

  def __len__(self):
    return len(self._periods)

  def can_edit(self):
    return P.has_more_than_default(self._periods)

  def can_delete(self):
    return P.has_more_than_default(self._periods)

  def to_date_options(self):
    """Choices for end of a new or edited period."""
    days = {p.r for p in self._periods if not D.is_sentinel(p.r)}
    return [D.CUR] + sorted(days, key=D.key)

  @staticmethod
  def latest_from(to_date, today=None):
    """Last day which may start a period ending at to_date.

    Open-ended periods must start before today."""
    if to_date == D.CUR:
      return D.prev_day(today or D.today())
    return D.prev_day(to_date)

  def validate(self, candidate, today=None):
    """Returns list of problems with candidate (empty if none)."""
    l, r = candidate
    problems = []
    try:
      D.parse(l)
      D.parse(r)
    except ValueError as e:
      return [str(e)]
    for d in (l, r):
      if not D.on_axis(d):
        problems.append(f"day {d} precedes inception {D.INCEPTION}")
    if problems:
      return problems
    if not D.lt(l, r):
      problems.append(f"start {l} must precede end {r}")
    elif D.lt(self.latest_from(r, today), l):
      problems.append(f"start {l} is after {self.latest_from(r, today)}")
    return problems

  def needs_confirmation(self, candidate, index=None):
    """Whether change merges periods and should be confirmed by user."""
    others = self._periods
    if index is not None:
      others = others[:index] + others[index + 1:]
    return P.check_overlap(candidate, others)

  def _apply(self, operation, params, confirm):
    candidate = params.get('candidate')
    if candidate is not None \
        and self.needs_confirmation(candidate, params.get('index')):
      if confirm is None or not confirm(candidate):
        logger.info(f"{operation}: {candidate} overlaps existing periods, not confirmed")
        return False
    self._periods = P.compute_partition(operation, params, self._periods)
    logger.debug(f"{operation}: now {self._periods}")
    return True

  def add(self, candidate, confirm=None):
    return self._apply('add', {'candidate': P.as_period(candidate)}, confirm)

  def edit(self, index, candidate, confirm=None):
    if not self.can_edit():
      return False
    return self._apply('edit', {'index': index, 'candidate': P.as_period(candidate)}, confirm)

  def delete(self, index):
    if not self.can_delete():
      return False
    return self._apply('delete', {'index': index}, None)

  def rows(self):
    """Table rows: (index, from, to) with human-readable days."""
    return [(i, D.pretty(p.l), D.pretty(p.r)) for i, p in enumerate(self._periods)]

  def __repr__(self):
    return ', '.join(str(p) for p in self._periods)
