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
from numscribe.core import normalizer as lib

Decimal = decimal.Decimal


class NormalizeTest(parameterized.TestCase):

  @parameterized.parameters(
      (5, Decimal(5)),
      (-12, Decimal(-12)),
      (10**40, Decimal(10**40)),
      (0.1, Decimal("0.1")),
      (2.5, Decimal("2.5")),
      ("  12.5 ", Decimal("12.5")),
      ("-7", Decimal(-7)),
      (Decimal("1.50"), Decimal("1.50")),
  )
  def test_numbers(self, number, expected: decimal.Decimal) -> None:
    self.assertEqual(lib.normalize(number), expected)

  def test_float_keeps_short_form(self) -> None:
    self.assertEqual(str(lib.normalize(0.1)), "0.1")

  @parameterized.parameters(
      None, True, False, "", "abc", "nan", "inf", "-Infinity",
      float("nan"), float("inf"), Decimal("NaN"), ([1],), object(),
  )
  def test_not_a_number(self, number) -> None:
    self.assertIsNone(lib.normalize(number))


class InfinitySignTest(parameterized.TestCase):

  @parameterized.parameters(
      (float("inf"), 1),
      (float("-inf"), -1),
      ("Infinity", 1),
      ("-inf", -1),
      (Decimal("-Infinity"), -1),
      (5, 0),
      (True, 0),
      ("abc", 0),
      (float("nan"), 0),
      (None, 0),
  )
  def test_sign(self, number, expected: int) -> None:
    self.assertEqual(lib.infinity_sign(number), expected)


if __name__ == "__main__":
  absltest.main()
