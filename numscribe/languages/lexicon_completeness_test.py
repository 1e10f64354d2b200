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

"""Checks that every inflection a rule can select is defined.

Lookups at runtime fall back along a fixed chain, so a missing form would
silently produce a wrong word. Here every lookup is strict.
"""

from absl.testing import absltest
from absl.testing import parameterized
from numscribe.core import currency
from numscribe.core import forms
from numscribe.languages import base
from numscribe.languages import registry

Lang = registry.Lang

_COUNTS = (
    0, 1, 2, 3, 4, 5, 9, 10, 11, 12, 14, 19, 20, 21, 22, 25, 99, 100, 101,
    102, 103, 111, 200, 1000,
)

_EXTRA_CURRENCIES = {
    Lang.AR: (currency.LBP,),
    Lang.EN: (currency.GBP,),
}


def _contexts() -> list[forms.MorphologyContext]:
  return [
      forms.MorphologyContext(is_terminal=terminal, role=role)
      for terminal in (True, False)
      for role in forms.Role
  ]


class LexiconCompletenessTest(parameterized.TestCase):

  @parameterized.parameters(*Lang)
  def test_scale_words(self, lang: Lang) -> None:
    system = registry.get_language(lang).system
    for entry in system.scales:
      if entry is None:
        continue
      for count in _COUNTS:
        for context in _contexts():
          word = entry.rule.inflect(
              count, entry.forms, context.replace(count=count), strict=True)
          self.assertNotEmpty(word)

  @parameterized.parameters(*Lang)
  def test_currency_units(self, lang: Lang) -> None:
    lexicon = registry.get_language(lang).lexicon
    infos = (lexicon.default_currency,) + _EXTRA_CURRENCIES.get(lang, ())
    for info in infos:
      for form_set in (info.main_forms, info.sub_forms):
        if form_set is None:
          continue
        for count in _COUNTS:
          for context in _contexts():
            word = lexicon.unit_rule.inflect(
                count, form_set, context.replace(count=count), strict=True)
            self.assertNotEmpty(word)

  @parameterized.parameters(*Lang)
  def test_lexicon(self, lang: Lang) -> None:
    language = registry.get_language(lang)
    lexicon = language.lexicon
    self.assertEqual(lexicon.code, lang.value)
    self.assertLen(lexicon.digits, 10)
    self.assertEqual(lexicon.digits[0], lexicon.zero)
    for separator in base.DecimalSeparator:
      self.assertNotEmpty(language.decimal_word(separator))
    self.assertNotEmpty(lexicon.infinity)
    self.assertNotEmpty(lexicon.negative_infinity)
    self.assertNotEmpty(lexicon.not_a_number)


class LexiconTableTest(absltest.TestCase):

  def test_validation(self) -> None:
    english = registry.get_language(Lang.EN).lexicon
    fields = dict(
        code="xx", name="Test", zero="zero", digits=english.digits,
        negative_prefix="minus", decimal_words=english.decimal_words,
        default_decimal=base.DecimalSeparator.POINT, conjunction="and",
        era_bc="BC", era_ad="AD", infinity="inf", negative_infinity="-inf",
        not_a_number="nan", default_currency=currency.USD,
        unit_rule=english.unit_rule)
    self.assertEqual(base.LexiconTable(**fields).code, "xx")
    with self.assertRaises(ValueError):
      base.LexiconTable(**(fields | dict(digits=english.digits[:9])))
    with self.assertRaises(ValueError):
      base.LexiconTable(**(fields | dict(
          decimal_words={base.DecimalSeparator.POINT: "point"})))


if __name__ == "__main__":
  absltest.main()
