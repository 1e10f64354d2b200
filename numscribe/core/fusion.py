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

"""Deterministic fusion of adjacent words.

Some languages do not simply put a space between the parts of a numeral. In
Georgian the final vowel of the left word drops before a following numeral
(ასი + ერთი -> ას ერთი) and vigesimal compounds are glued with a linker
(ოცი + და + ერთი -> ოცდაერთი). A `FusionTable` maps a connector name and the
beginning of the right word to a `FusionRule`. Lookups are total: anything
not in the table is joined with a single space.
"""

import dataclasses
from typing import Mapping


@dataclasses.dataclass(frozen=True)
class FusionRule:
  """How to glue two words.

  Attributes:
    left_trim: Suffix removed from the left word, if present.
    infix: Material inserted between the words.
    right_trim: Prefix removed from the right word, if present.
    space: Whether the parts are separated by spaces.
  """
  left_trim: str = ""
  infix: str = ""
  right_trim: str = ""
  space: bool = True

  def apply(self, left: str, right: str) -> str:
    if self.left_trim and left.endswith(self.left_trim):
      left = left[:-len(self.left_trim)]
    if self.right_trim and right.startswith(self.right_trim):
      right = right[len(self.right_trim):]
    if self.space:
      return " ".join(part for part in (left, self.infix, right) if part)
    return f"{left}{self.infix}{right}"


class FusionTable:
  """Fusion rules keyed by connector and right-word prefix.

  The empty prefix matches any right word. The longest matching prefix wins.
  """

  def __init__(
      self, rules: Mapping[str, Mapping[str, FusionRule]] | None = None
  ) -> None:
    self._rules = {
        connector: dict(by_prefix)
        for connector, by_prefix in (rules or {}).items()
    }

  def lookup(self, connector: str, right: str) -> FusionRule | None:
    by_prefix = self._rules.get(connector)
    if not by_prefix:
      return None
    best = None
    for prefix, rule in by_prefix.items():
      if right.startswith(prefix):
        if best is None or len(prefix) > len(best[0]):
          best = (prefix, rule)
    return best[1] if best else None

  def join(self, left: str, connector: str, right: str) -> str:
    if not left:
      return right
    if not right:
      return left
    rule = self.lookup(connector, right)
    if rule is None:
      return f"{left} {right}"
    return rule.apply(left, right)


EMPTY = FusionTable()
