# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""APIs for keeping a gapless partition of days into periods.

All functions here are pure: they take the current partition
(a list of periods in any order) and return a new sorted list,
never modifying their arguments."""

import logging

from gapless.common import day as D
from gapless.common.interval import Period, DEFAULT, by_start

logger = logging.getLogger(__name__)

class Action:
  INSERT = 'insert'
  APPEND = 'append'
  SPLIT  = 'split'
  MERGE  = 'merge'

def as_period(p):
  """Accepts Period or (from, to) pair."""
  if isinstance(p, Period):
    return p
  l, r = p
  return Period(l, r)

def default_partition():
  return [DEFAULT]

def is_default_only(periods):
  return len(periods) == 1 and as_period(periods[0]).is_default()

def has_more_than_default(periods):
  return not is_default_only(periods)

def extent(periods):
  """First and last day covered by periods."""
  lo = D.earliest(*(p.l for p in periods))
  hi = D.latest(*(p.r for p in periods))
  return lo, hi

def check_overlap(candidate, periods):
  """Checks whether candidate overlaps or touches any of periods.

  This is advisory: the result tells whether the user should be
  asked to confirm a merge. Adding to the default partition never
  needs confirmation."""
  if is_default_only(periods):
    return False
  candidate = as_period(candidate)
  for p in map(as_period, periods):
    # Period starting right after an existing one counts as overlap
    if D.le(candidate.l, D.next_day(p.r)) and D.le(p.l, candidate.r):
      return True
  return False

def normalize(periods, extent=None):
  """Sorts periods and closes gaps and overlaps between them.

  Gaps are closed by stretching the earlier period, overlapping
  periods are absorbed into the earlier one. If extent (lo, hi) is given,
  the result is also stretched to cover it."""
  if not periods:
    return []

  ivs = sorted(map(as_period, periods), key=by_start)
  res = []
  l, r = ivs[0].l, ivs[0].r
  for iv in ivs[1:]:
    if D.lt(D.next_day(r), iv.l):
      r = D.prev_day(iv.l)
    if D.le(iv.l, r):
      r = D.latest(r, iv.r)
      continue
    res.append(Period(l, r))
    l, r = iv.l, iv.r
  res.append(Period(l, r))

  if extent is not None:
    lo, hi = extent
    if D.lt(lo, res[0].l):
      res[0] = Period(lo, res[0].r)
    if D.lt(res[-1].r, hi):
      res[-1] = Period(res[-1].l, hi)

  return res

def _find_start_after(ivs, d):
  for i, iv in enumerate(ivs):
    if D.lt(d, iv.l):
      return i
  return None

def _find_containing(ivs, d):
  for i, iv in enumerate(ivs):
    if iv.contains(d):
      return i
  return None

def classify(candidate, ivs):
  """Decide how candidate goes into sorted periods ivs.

  Returns (action, index) where index points into ivs."""
  within = _find_containing(ivs, candidate.l)
  if within is not None:
    if D.le(candidate.r, ivs[within].r):
      return Action.SPLIT, within
    return Action.MERGE, within

  before = _find_start_after(ivs, candidate.l)
  if before is None:
    return Action.APPEND, len(ivs)

  # Keep at least one free day before next period
  if D.lt(candidate.r, D.prev_day(ivs[before].l)):
    return Action.INSERT, before

  # Candidate starts in a gap and runs into next period
  return Action.MERGE, before

def _split(candidate, iv):
  parts = []
  if D.lt(iv.l, candidate.l):
    parts.append(Period(iv.l, D.prev_day(candidate.l)))
  parts.append(candidate)
  if D.lt(candidate.r, iv.r):
    parts.append(Period(D.next_day(candidate.r), iv.r))
  return parts

def _merge(candidate, ivs, start):
  # Bound is fixed by candidate, it does not grow with absorbed periods
  bound = D.next_day(candidate.r)
  end = start + 1
  while end < len(ivs) and D.le(ivs[end].l, bound):
    end += 1
  absorbed = ivs[start:end]

  l = D.earliest(candidate.l, *(iv.l for iv in absorbed))
  r = D.latest(*(iv.r for iv in absorbed))
  parts = [Period(l, candidate.r)]
  if D.lt(candidate.r, r):
    # Tail of last absorbed period survives
    parts.append(Period(D.next_day(candidate.r), r))
  return parts, end

def _add(candidate, ivs):
  action, i = classify(candidate, ivs)
  logger.debug(f"add: {candidate} -> {action} at {i}")

  if action == Action.APPEND:
    return ivs + [candidate]
  if action == Action.INSERT:
    return ivs[:i] + [candidate] + ivs[i:]
  if action == Action.SPLIT:
    return ivs[:i] + _split(candidate, ivs[i]) + ivs[i + 1:]

  parts, end = _merge(candidate, ivs, i)
  return ivs[:i] + parts + ivs[end:]

def add(candidate, periods):
  """Adds new period, splitting or merging existing ones as needed."""
  candidate = as_period(candidate)
  if not periods:
    return [candidate]
  ivs = sorted(map(as_period, periods), key=by_start)
  return normalize(_add(candidate, ivs), extent(ivs))

def edit(index, candidate, periods):
  """Replaces period at index (in caller's order) with candidate."""
  if not 0 <= index < len(periods):
    logger.debug(f"edit: index {index} out of range, ignoring")
    return list(periods)
  candidate = as_period(candidate)
  ivs = [as_period(p) for p in periods]
  rest = ivs[:index] + ivs[index + 1:]
  return normalize(add(candidate, rest), extent(ivs))

def delete(index, periods):
  """Removes period at index (in caller's order) and heals the hole.

  Predecessor takes over the freed days, or successor if deleted period
  was the first one. The last remaining period can not be deleted."""
  if len(periods) <= 1:
    return list(periods)
  if not 0 <= index < len(periods):
    logger.debug(f"delete: index {index} out of range, ignoring")
    return list(periods)

  ivs = sorted(map(as_period, periods), key=by_start)
  victim = as_period(periods[index])
  try:
    k = ivs.index(victim)
  except ValueError:
    logger.debug(f"delete: {victim} not found, ignoring")
    return list(periods)
  logger.debug(f"delete: {victim} at sorted position {k}")

  if k == 0:
    nxt = ivs[1]
    res = [Period(victim.l, nxt.r)] + ivs[2:]
  else:
    prev = ivs[k - 1]
    res = ivs[:k - 1] + [Period(prev.l, victim.r)] + ivs[k + 1:]

  return normalize(res, extent(ivs))

def compute_partition(operation, params, periods):
  """Applies 'add', 'edit' or 'delete' to periods.

  params holds 'candidate' for add, 'index' and 'candidate' for edit,
  'index' for delete."""
  if operation == 'add':
    return add(params['candidate'], periods)
  if operation == 'edit':
    return edit(params['index'], params['candidate'], periods)
  if operation == 'delete':
    return delete(params['index'], periods)
  raise ValueError(f"unknown operation '{operation}'")
