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
from numscribe.core import currency
from numscribe.core import engine
from numscribe.core import forms
from numscribe.core import options as options_lib
from numscribe.languages import arabic as lib


def _convert(
    number: int | str,
    options: options_lib.ConversionOptions | None = None
) -> str:
  return engine.convert(decimal.Decimal(number), options, lib.ARABIC)


class ArabicTest(parameterized.TestCase):

  @parameterized.parameters(
      (1, "واحد"),
      (2, "اثنان"),
      (3, "ثلاثة"),
      (10, "عشرة"),
      (11, "أحد عشر"),
      (12, "اثنا عشر"),
      (13, "ثلاثة عشر"),
      (21, "واحد وعشرون"),
      (25, "خمسة وعشرون"),
      (100, "مئة"),
      (105, "مئة وخمسة"),
  )
  def test_cardinals(self, number: int, expected: str) -> None:
    self.assertEqual(_convert(number), expected)

  @parameterized.parameters(
      (1000, "ألف"),
      (1005, "ألف وخمسة"),
      (2000, "ألفان"),
      (3000, "ثلاثة آلاف"),
      (11000, "أحد عشر ألفًا"),
      (100000, "مئة ألف"),
      (1000000, "مليون"),
      (2000000, "مليونان"),
  )
  def test_scales(self, number: int, expected: str) -> None:
    self.assertEqual(_convert(number), expected)

  def test_feminine(self) -> None:
    options = options_lib.ConversionOptions(gender=forms.Gender.FEMININE)
    self.assertEqual(_convert(1, options), "واحدة")
    self.assertEqual(_convert(3, options), "ثلاث")
    self.assertEqual(_convert(12, options), "اثنتا عشرة")
    self.assertEqual(_convert(21, options), "إحدى وعشرون")

  @parameterized.parameters(
      ("1", "ريال"),
      ("2", "ريالان"),
      ("3", "ثلاثة ريالات"),
      ("11", "أحد عشر ريالًا"),
      ("100", "مئة ريال"),
      ("1.5", "ريال وخمسون هللة"),
  )
  def test_currency(self, amount: str, expected: str) -> None:
    options = options_lib.ConversionOptions(currency=True)
    self.assertEqual(_convert(amount, options), expected)

  def test_polarity_with_feminine_unit(self) -> None:
    options = options_lib.ConversionOptions(
        currency=True, currency_info=currency.LBP)
    self.assertEqual(_convert(3, options), "ثلاث ليرات")
    self.assertEqual(_convert(2, options), "ليرتان")
    self.assertEqual(_convert("0.03", options), "ثلاثة قروش")

  def test_year(self) -> None:
    options = options_lib.ConversionOptions(format=options_lib.Format.YEAR)
    self.assertEqual(_convert(-44, options), "أربعة وأربعون ق.م")


if __name__ == "__main__":
  absltest.main()
