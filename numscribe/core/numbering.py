# Copyright 2025 The Numscribe Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Numbering systems and splitting of magnitudes into scale groups.

Three grouping schemes are supported:

1) Short scale, groups of three digits (thousand, million, ...).

2) Myriad scale, groups of four digits (Chinese 万, 亿, ...).

3) Mixed scale, where the lowest group has three digits and the remaining
   ones two (Indian thousand, lakh, crore, ...). The group sizes are derived
   from the divisors of the special groupings.
"""

import dataclasses
import enum

from numscribe.core import agreement
from numscribe.core import errors
from numscribe.core import forms as forms_lib


class GroupRadix(enum.Enum):
  SHORT = 1000
  MYRIAD = 10000
  MIXED = 0


@dataclasses.dataclass(frozen=True)
class ScaleEntry:
  """Scale word at one position of the scale table.

  Attributes:
    forms: Inflected forms of the scale word.
    rule: Agreement between the group count and the scale word.
    one_word: Replacement lexeme for a count of one that is not elided.
    closes_numeral: The scale word is a noun, so the numeral counting it is
      complete on its own (French "deux cents millions").
  """
  forms: forms_lib.FormSet
  rule: agreement.MorphologyRule = dataclasses.field(
      default_factory=agreement.InvariantRule)
  one_word: str | None = None
  closes_numeral: bool = False


@dataclasses.dataclass(frozen=True)
class NumberingSystem:
  """Grouping scheme plus the scale table of a language.

  Attributes:
    radix: Grouping scheme.
    scales: Scale entries for scale indices 1, 2, ... A `None` entry is a
      hole in the table.
    special_groupings: (divisor, label) pairs, one per scale entry, giving
      the value of each scale for mixed systems.
  """
  radix: GroupRadix
  scales: tuple[ScaleEntry | None, ...]
  special_groupings: tuple[tuple[int, str], ...] = ()

  def __post_init__(self) -> None:
    if self.radix != GroupRadix.MIXED:
      return
    if len(self.special_groupings) != len(self.scales):
      raise ValueError(
          "Mixed numbering systems need one special grouping per scale, got "
          f"{len(self.special_groupings)} for {len(self.scales)} scales")
    previous = 1
    for divisor, label in self.special_groupings:
      if divisor <= previous or divisor % previous:
        raise ValueError(f"Bad divisor {divisor} for grouping `{label}`")
      previous = divisor

  @property
  def max_scale_index(self) -> int:
    return len(self.scales)

  def divisor(self, index: int) -> int:
    """Value of one unit of the group at `index`."""
    if self.radix != GroupRadix.MIXED:
      return self.radix.value ** index
    if index == 0:
      return 1
    return self.special_groupings[index - 1][0]

  def group_radix(self, index: int) -> int:
    """Number of distinct values a group at `index` can take."""
    if self.radix != GroupRadix.MIXED:
      return self.radix.value
    if not self.special_groupings:
      return 1000
    if index < self.max_scale_index:
      return self.divisor(index + 1) // self.divisor(index)
    # The topmost group repeats the size of the previous one.
    return self.divisor(index) // self.divisor(index - 1)

  @property
  def limit(self) -> int:
    """Smallest magnitude that no longer fits into the scale table."""
    top = self.max_scale_index
    return self.divisor(top) * self.group_radix(top)

  def scale(self, index: int) -> ScaleEntry:
    """Returns the scale entry for `index`.

    Args:
      index: Scale index, 1 for the first scale word.

    Returns:
      Scale entry.

    Raises:
      UnsupportedMagnitude: if there is no entry at that index.
    """
    if index < 1 or index > self.max_scale_index:
      raise errors.UnsupportedMagnitude(index)
    entry = self.scales[index - 1]
    if entry is None:
      raise errors.UnsupportedMagnitude(index)
    return entry


def short_scale(scales: tuple[ScaleEntry | None, ...]) -> NumberingSystem:
  return NumberingSystem(GroupRadix.SHORT, scales)


def myriad_scale(scales: tuple[ScaleEntry | None, ...]) -> NumberingSystem:
  return NumberingSystem(GroupRadix.MYRIAD, scales)


def mixed_scale(
    scales: tuple[ScaleEntry | None, ...],
    special_groupings: tuple[tuple[int, str], ...]
) -> NumberingSystem:
  return NumberingSystem(GroupRadix.MIXED, scales, special_groupings)


def chunk(magnitude: int, system: NumberingSystem) -> list[tuple[int, int]]:
  """Splits `magnitude` into (group value, scale index) pairs.

  Groups are computed from the least significant end but returned most
  significant first. Zero groups in the middle are kept so that callers can
  detect skipped scales.

  Args:
    magnitude: Non-negative integer.
    system: Numbering system.

  Returns:
    List of (group value, scale index) pairs. Zero yields `[(0, 0)]`.

  Raises:
    ValueError: if `magnitude` is negative.
    ScaleOverflow: if `magnitude` does not fit into the scale table.
  """
  if magnitude < 0:
    raise ValueError(f"Cannot chunk negative magnitude {magnitude}")
  groups = []
  remaining = magnitude
  index = 0
  while True:
    if index > system.max_scale_index:
      raise errors.ScaleOverflow(magnitude, system.max_scale_index)
    remaining, value = divmod(remaining, system.group_radix(index))
    groups.append((value, index))
    if not remaining:
      break
    index += 1
  groups.reverse()
  return groups
