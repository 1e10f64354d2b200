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


from absl.testing import absltest
from numscribe.core import currency
from numscribe.core import options as lib


class ConversionOptionsTest(absltest.TestCase):

  def test_defaults(self) -> None:
    options = lib.ConversionOptions()
    self.assertEqual(options.format, lib.Format.PLAIN)
    self.assertFalse(options.currency)
    self.assertIsNone(options.currency_info)

  def test_currency_with_explicit_unit(self) -> None:
    options = lib.ConversionOptions(currency=True, currency_info=currency.USD)
    self.assertTrue(options.currency)
    self.assertIs(options.currency_info, currency.USD)

  def test_english_options_extend_base(self) -> None:
    options = lib.EnglishOptions(currency=True, include_and=True)
    self.assertIsInstance(options, lib.ConversionOptions)
    self.assertTrue(options.currency)
    self.assertTrue(options.include_and)


if __name__ == "__main__":
  absltest.main()
