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
from numscribe.core import fraction as lib

_DIGITS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine",
)


class FractionDigitsTest(parameterized.TestCase):

  @parameterized.parameters(
      ("1.50", "50"),
      ("3", ""),
      ("0.05", "05"),
      ("12.345", "345"),
      ("1E+2", ""),
      ("-2.7", "7"),
  )
  def test_digits(self, value: str, expected: str) -> None:
    self.assertEqual(lib.fraction_digits(decimal.Decimal(value)), expected)


class RenderFractionTest(absltest.TestCase):

  def test_trailing_zeros_trimmed(self) -> None:
    self.assertEqual(lib.render_fraction("50", "point", _DIGITS), "point five")
    self.assertEqual(
        lib.render_fraction("50", "point", _DIGITS),
        lib.render_fraction("5", "point", _DIGITS))

  def test_nothing_left(self) -> None:
    self.assertEqual(lib.render_fraction("000", "point", _DIGITS), "")
    self.assertEqual(lib.render_fraction("", "point", _DIGITS), "")

  def test_inner_zeros_kept(self) -> None:
    self.assertEqual(
        lib.render_fraction("05", "point", _DIGITS), "point zero five")

  def test_joiner(self) -> None:
    digits = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
    self.assertEqual(
        lib.render_fraction("14", "点", digits, joiner=""), "点一四")

  def test_bad_digits(self) -> None:
    with self.assertRaises(ValueError):
      lib.render_fraction("5a", "point", _DIGITS)


if __name__ == "__main__":
  absltest.main()
