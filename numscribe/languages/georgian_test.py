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

import decimal

from absl.testing import absltest
from absl.testing import parameterized
from numscribe.core import engine
from numscribe.core import options as options_lib
from numscribe.languages import georgian as lib


def _convert(
    number: int | str,
    options: options_lib.ConversionOptions | None = None
) -> str:
  return engine.convert(decimal.Decimal(number), options, lib.GEORGIAN)


class GeorgianTest(parameterized.TestCase):

  @parameterized.parameters(
      (19, "ცხრამეტი"),
      (20, "ოცი"),
      (21, "ოცდაერთი"),
      (30, "ოცდაათი"),
      (40, "ორმოცი"),
      (55, "ორმოცდათხუთმეტი"),
      (99, "ოთხმოცდაცხრამეტი"),
  )
  def test_vigesimal(self, number: int, expected: str) -> None:
    self.assertEqual(_convert(number), expected)

  @parameterized.parameters(
      (100, "ასი"),
      (101, "ას ერთი"),
      (200, "ორასი"),
      (342, "სამას ორმოცდაორი"),
      (1000, "ათასი"),
      (1001, "ათას ერთი"),
      (2000, "ორი ათასი"),
      (1000000, "ერთი მილიონი"),
      (1000001, "ერთი მილიონი ერთი"),
  )
  def test_stem_fusion(self, number: int, expected: str) -> None:
    self.assertEqual(_convert(number), expected)

  def test_currency(self) -> None:
    options = options_lib.ConversionOptions(currency=True)
    self.assertEqual(
        _convert("1.01", options), "ერთი ლარი და ერთი თეთრი")


if __name__ == "__main__":
  absltest.main()
