# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import random
import datetime

import pytest

from gapless.common import day as D
from gapless.common.interval import Period
from gapless import partition as P

INC = D.INCEPTION
CUR = D.CUR

def mk(*pairs):
  return [Period(l, r) for l, r in pairs]

# Result of adding first half of 2020 to default partition
p1 = mk((INC, '2019-12-31'),
        ('2020-01-01', '2020-06-30'),
        ('2020-07-01', CUR))

p2 = mk((INC, '2019-12-31'),
        ('2020-01-01', '2020-02-29'),
        ('2020-03-01', '2020-04-30'),
        ('2020-05-01', '2020-06-30'),
        ('2020-07-01', CUR))

def check_covering(periods):
  assert periods
  assert periods[0].from_date == INC
  assert periods[-1].to_date == CUR
  for a, b in zip(periods, periods[1:]):
    assert D.le(a.from_date, a.to_date)
    assert D.next_day(a.to_date) == b.from_date

def test_scenario_split_default():
  assert P.add(Period('2020-01-01', '2020-06-30'), P.default_partition()) == p1

def test_scenario_merge_middle_and_last():
  res = P.add(Period('2020-05-01', '2021-01-01'), p1)
  assert res == mk((INC, '2019-12-31'),
                   ('2020-01-01', '2021-01-01'),
                   ('2021-01-02', CUR))

def test_scenario_delete_middle():
  assert P.delete(1, p1) == mk((INC, '2020-06-30'), ('2020-07-01', CUR))

def test_scenario_overlap_with_default():
  assert not P.check_overlap(Period('2020-01-01', '2020-06-30'), P.default_partition())

def test_check_overlap():
  assert P.check_overlap(Period('2021-01-01', '2021-02-01'), p1)
  gappy = mk((INC, '2019-12-31'), ('2020-07-01', CUR))
  # Touching counts as overlap
  assert P.check_overlap(Period('2020-01-01', '2020-03-01'), gappy)
  assert not P.check_overlap(Period('2020-02-01', '2020-03-01'), gappy)
  assert not P.check_overlap(Period('2020-02-01', '2020-06-30'), gappy)

def test_empty():
  cand = Period('2020-01-01', '2020-06-30')
  assert P.add(cand, []) == [cand]
  assert P.normalize([]) == []

def test_pairs():
  assert P.add(('2020-01-01', '2020-06-30'), [(INC, CUR)]) == p1
  assert P.is_default_only([(INC, CUR)])
  assert P.has_more_than_default(p1)

def test_classify():
  assert P.classify(Period('2020-02-01', '2020-02-02'), p1) == (P.Action.SPLIT, 1)
  assert P.classify(Period('2020-02-01', '2020-12-31'), p1) == (P.Action.MERGE, 1)
  gappy = mk((INC, '2019-12-31'), ('2021-01-01', CUR))
  assert P.classify(Period('2020-03-01', '2020-06-30'), gappy) == (P.Action.INSERT, 1)
  assert P.classify(Period('2020-03-01', '2020-12-31'), gappy) == (P.Action.MERGE, 1)
  assert P.classify(Period('2020-03-01', '2020-12-31'), gappy[:1]) == (P.Action.APPEND, 1)

def test_split_at_start():
  res = P.add(Period('2020-01-01', '2020-03-31'), p1)
  assert res == mk((INC, '2019-12-31'),
                   ('2020-01-01', '2020-03-31'),
                   ('2020-04-01', '2020-06-30'),
                   ('2020-07-01', CUR))

def test_split_at_end():
  res = P.add(Period('2020-04-01', '2020-06-30'), p1)
  assert res == mk((INC, '2019-12-31'),
                   ('2020-01-01', '2020-03-31'),
                   ('2020-04-01', '2020-06-30'),
                   ('2020-07-01', CUR))

def test_add_existing():
  assert P.add(p1[1], p1) == p1

def test_merge_many():
  res = P.add(Period('2020-02-15', '2020-05-15'), p2)
  assert res == mk((INC, '2019-12-31'),
                   ('2020-01-01', '2020-05-15'),
                   ('2020-05-16', '2020-06-30'),
                   ('2020-07-01', CUR))

def test_merge_open_ended():
  res = P.add(Period('2020-05-01', CUR), p1)
  assert res == mk((INC, '2019-12-31'), ('2020-01-01', CUR))

def test_append():
  res = P.add(Period('2020-03-01', '2020-06-30'), mk((INC, '2019-12-31')))
  assert res == mk((INC, '2020-02-29'), ('2020-03-01', '2020-06-30'))

def test_insert():
  gappy = mk((INC, '2019-12-31'), ('2021-01-01', CUR))
  res = P.add(Period('2020-03-01', '2020-06-30'), gappy)
  assert res == mk((INC, '2020-02-29'),
                   ('2020-03-01', '2020-12-31'),
                   ('2021-01-01', CUR))

def test_merge_from_gap():
  gappy = mk((INC, '2019-12-31'), ('2020-07-01', CUR))
  res = P.add(Period('2020-03-01', '2020-06-30'), gappy)
  assert res == mk((INC, '2020-02-29'),
                   ('2020-03-01', '2020-06-30'),
                   ('2020-07-01', CUR))

def test_edit_shrink():
  res = P.edit(1, Period('2020-03-01', '2020-06-30'), p1)
  assert res == mk((INC, '2020-02-29'),
                   ('2020-03-01', '2020-06-30'),
                   ('2020-07-01', CUR))

def test_edit_grow():
  res = P.edit(1, Period('2020-01-01', '2020-12-31'), p1)
  assert res == mk((INC, '2019-12-31'),
                   ('2020-01-01', '2020-12-31'),
                   ('2021-01-01', CUR))

def test_edit_last():
  res = P.edit(2, Period('2020-09-01', '2020-12-31'), p1)
  assert res == mk((INC, '2019-12-31'),
                   ('2020-01-01', '2020-08-31'),
                   ('2020-09-01', CUR))

def test_edit_bad_index():
  assert P.edit(3, Period('2020-09-01', '2020-12-31'), p1) == p1
  assert P.edit(-1, Period('2020-09-01', '2020-12-31'), p1) == p1

def test_delete_first():
  assert P.delete(0, p1) == mk((INC, '2020-06-30'), ('2020-07-01', CUR))

def test_delete_last():
  assert P.delete(2, p1) == mk((INC, '2019-12-31'), ('2020-01-01', CUR))

def test_delete_only():
  assert P.delete(0, P.default_partition()) == P.default_partition()

def test_delete_bad_index():
  assert P.delete(5, p1) == p1

def test_delete_unsorted():
  periods = [p1[2], p1[0], p1[1]]
  assert P.delete(0, periods) == mk((INC, '2019-12-31'), ('2020-01-01', CUR))

def test_delete_then_readd():
  for i, iv in enumerate(p2):
    assert P.add(iv, P.delete(i, p2)) == p2

def test_normalize():
  periods = mk(('2020-03-01', '2020-06-30'),
               (INC, '2019-12-31'),
               ('2020-05-01', '2020-08-31'),
               ('2020-10-01', CUR))
  res = P.normalize(periods)
  assert res == mk((INC, '2020-02-29'),
                   ('2020-03-01', '2020-09-30'),
                   ('2020-10-01', CUR))
  assert P.normalize(res) == res
  assert P.normalize(p2) == p2

def test_normalize_extent():
  res = P.normalize(mk(('2020-01-01', '2020-06-30')), extent=(INC, CUR))
  assert res == P.default_partition()

def test_compute_partition():
  cand = Period('2020-01-01', '2020-06-30')
  assert P.compute_partition('add', {'candidate': cand}, P.default_partition()) == p1
  assert P.compute_partition('delete', {'index': 1}, p1) == P.delete(1, p1)
  assert P.compute_partition('edit', {'index': 1, 'candidate': cand}, p1) == p1
  with pytest.raises(ValueError):
    P.compute_partition('undo', {}, p1)

def test_inputs_not_modified():
  periods = list(p2)
  P.add(Period('2020-02-15', '2020-05-15'), periods)
  P.edit(2, Period('2020-02-15', '2020-05-15'), periods)
  P.delete(2, periods)
  P.normalize(list(reversed(periods)))
  assert periods == p2

def test_invariants():
  rng = random.Random(42)
  base = D.parse('2019-01-01')

  def rand_period():
    l = rng.randrange(0, 1500)
    r = l + rng.randrange(0, 400)
    return Period(D.from_date(base + datetime.timedelta(days=l)),
                  CUR if rng.random() < 0.1 else D.from_date(base + datetime.timedelta(days=r)))

  periods = P.default_partition()
  for _ in range(500):
    op = rng.choice(['add', 'add', 'edit', 'delete'])
    if op == 'add':
      periods = P.add(rand_period(), periods)
    elif op == 'edit':
      periods = P.edit(rng.randrange(len(periods)), rand_period(), periods)
    else:
      n = len(periods)
      periods = P.delete(rng.randrange(n), periods)
      assert len(periods) == max(1, n - 1)
    check_covering(periods)
    assert P.normalize(periods) == periods
