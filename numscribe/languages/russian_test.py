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
from numscribe.core import forms
from numscribe.core import options as options_lib
from numscribe.languages import russian as lib

_YEAR = options_lib.ConversionOptions(format=options_lib.Format.YEAR)


def _convert(
    number: int | str,
    options: options_lib.ConversionOptions | None = None
) -> str:
  return engine.convert(decimal.Decimal(number), options, lib.RUSSIAN)


class RussianTest(parameterized.TestCase):

  @parameterized.parameters(
      (1, "один"),
      (2, "два"),
      (12, "двенадцать"),
      (21, "двадцать один"),
      (111, "сто одиннадцать"),
      (1000, "одна тысяча"),
      (2000, "две тысячи"),
      (5000, "пять тысяч"),
      (21000, "двадцать одна тысяча"),
      (1000000, "один миллион"),
      (3000000, "три миллиона"),
      (11000000, "одиннадцать миллионов"),
      (2022001, "два миллиона двадцать две тысячи один"),
  )
  def test_cardinals(self, number: int, expected: str) -> None:
    self.assertEqual(_convert(number), expected)

  def test_neuter(self) -> None:
    options = options_lib.ConversionOptions(gender=forms.Gender.NEUTER)
    self.assertEqual(_convert(1, options), "одно")
    self.assertEqual(_convert(2, options), "два")

  @parameterized.parameters(
      (1000, "тысячный"),
      (1001, "тысяча первый"),
      (1812, "тысяча восемьсот двенадцатый"),
      (1900, "тысяча девятисотый"),
      (1980, "тысяча девятьсот восьмидесятый"),
      (1984, "тысяча девятьсот восемьдесят четвёртый"),
      (2000, "двухтысячный"),
      (10000, "десятитысячный"),
      (21000, "двадцатиоднотысячный"),
      (45000, "сорокапятитысячный"),
      (100000, "стотысячный"),
      (300000, "трёхсоттысячный"),
      (1000000, "один миллион"),
      (2024, "две тысячи двадцать четвёртый"),
      (44, "сорок четвёртый"),
      (-44, "сорок четвёртый до н. э."),
  )
  def test_years(self, year: int, expected: str) -> None:
    self.assertEqual(_convert(year, _YEAR), expected)

  def test_currency(self) -> None:
    options = options_lib.ConversionOptions(currency=True)
    self.assertEqual(
        _convert("101.05", options), "сто один рубль пять копеек")
    self.assertEqual(
        _convert("1002.03", options), "одна тысяча два рубля три копейки")


if __name__ == "__main__":
  absltest.main()
