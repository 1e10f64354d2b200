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
from numscribe.languages import hindi as lib


def _convert(
    number: int | str,
    options: options_lib.ConversionOptions | None = None
) -> str:
  return engine.convert(decimal.Decimal(number), options, lib.HINDI)


class HindiTest(parameterized.TestCase):

  @parameterized.parameters(
      (0, "शून्य"),
      (5, "पाँच"),
      (42, "बयालीस"),
      (100, "एक सौ"),
      (250, "दो सौ पचास"),
      (1000, "एक हज़ार"),
      (100000, "एक लाख"),
      (1234567, "बारह लाख चौंतीस हज़ार पाँच सौ सड़सठ"),
      (10000000, "एक करोड़"),
      (1000000001, "एक अरब एक"),
  )
  def test_cardinals(self, number: int, expected: str) -> None:
    self.assertEqual(_convert(number), expected)

  def test_every_word_under_hundred(self) -> None:
    words = {_convert(number) for number in range(100)}
    self.assertLen(words, 100)

  def test_years(self) -> None:
    options = options_lib.ConversionOptions(format=options_lib.Format.YEAR)
    self.assertEqual(_convert(1900, options), "उन्नीस सौ")
    self.assertEqual(_convert(1947, options), "एक हज़ार नौ सौ सैंतालीस")

  def test_currency(self) -> None:
    options = options_lib.ConversionOptions(currency=True)
    self.assertEqual(_convert("1.01", options), "एक रुपया और एक पैसा")
    self.assertEqual(_convert("2.5", options), "दो रुपये और पचास पैसे")


if __name__ == "__main__":
  absltest.main()
