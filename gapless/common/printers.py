# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Pretty-printing APIs."""

import sys

class TablePrinter:
  """Prints rows of strings as aligned columns."""

  def __init__(self, header, out=sys.stdout, sep='  '):
    self.header = list(header)
    self.rows = []
    self.out = out
    self.sep = sep

  def add(self, *row):
    assert len(row) == len(self.header)
    self.rows.append([str(x) for x in row])

  def __enter__(self):
    return self

  def __exit__(self, type, value, traceback):
    if type is None:
      self.flush()

  def flush(self):
    widths = [len(h) for h in self.header]
    for row in self.rows:
      widths = [max(w, len(x)) for w, x in zip(widths, row)]

    def line(cells):
      s = self.sep.join(x.ljust(w) for x, w in zip(cells, widths))
      self.out.write(s.rstrip() + '\n')

    line(self.header)
    line(['-' * w for w in widths])
    for row in self.rows:
      line(row)
    self.rows = []
