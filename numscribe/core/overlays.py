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

"""Currency and calendar-year readings built on top of the core numerals."""

import decimal
from typing import Any

from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import options as options_lib

Role = forms.Role

_CENT = decimal.Decimal("0.01")


class CurrencyOverlay:
  """Reads an amount as main units plus sub units.

  The numerals agree in gender with the unit they count, and the unit is
  inflected with the language's unit agreement rule.
  """

  def __init__(self, language: Any) -> None:
    self._language = language

  def split(
      self, amount: decimal.Decimal,
      options: options_lib.ConversionOptions
  ) -> tuple[int, int]:
    """Splits a non-negative amount into main and sub units.

    Args:
      amount: Non-negative amount.
      options: Conversion options, `round` rounds to cents first.

    Returns:
      Pair of main units and sub units (0..99).
    """
    if options.round:
      amount = amount.quantize(_CENT, rounding=decimal.ROUND_HALF_UP)
    main = int(amount)
    sub = int(((amount - main) * 100).to_integral_value(
        rounding=decimal.ROUND_HALF_UP))
    if sub >= 100:
      main += 1
      sub -= 100
    return main, sub

  def info(
      self, options: options_lib.ConversionOptions
  ) -> currency.CurrencyInfo:
    return options.currency_info or self._language.lexicon.default_currency

  def render_units(self, count: int, unit: forms.FormSet, role: Role) -> str:
    """Renders `count` units of `unit`, e.g. "two dollars"."""
    language = self._language
    rule = language.lexicon.unit_rule
    context = forms.MorphologyContext(
        count=count,
        target_gender=unit.gender,
        apply_polarity=language.lexicon.apply_polarity,
        role=role)
    word = rule.inflect(count, unit, context)
    if count == 0:
      numeral = language.render_zero(context)
    elif rule.elides(count):
      numeral = None
    else:
      numeral = language.words(count, context)
    return language.attach_unit(numeral, word, context)

  def render(
      self, amount: decimal.Decimal,
      options: options_lib.ConversionOptions
  ) -> str:
    """Renders a non-negative amount of money.

    Args:
      amount: Non-negative amount.
      options: Conversion options.

    Returns:
      Amount in words. A zero amount reads as zero main units.
    """
    info = self.info(options)
    main, sub = self.split(amount, options)
    parts = []
    if main:
      parts.append(self.render_units(main, info.main_forms, Role.CURRENCY_MAIN))
    if sub and info.sub_forms:
      parts.append(self.render_units(sub, info.sub_forms, Role.CURRENCY_SUB))
    if not parts:
      return self.render_units(0, info.main_forms, Role.CURRENCY_MAIN)
    if len(parts) == 1:
      return parts[0]
    conjunction = info.separator
    if conjunction is None:
      conjunction = self._language.lexicon.conjunction
    return self._language.join_amounts(parts[0], conjunction, parts[1])


class YearOverlay:
  """Reads a number as a calendar year, with era markers."""

  def __init__(self, language: Any) -> None:
    self._language = language

  def _with_era(self, text: str, era: str) -> str:
    if self._language.lexicon.era_prefix:
      return self._language.join_words(era, text)
    return self._language.join_words(text, era)

  def render(
      self, magnitude: decimal.Decimal,
      options: options_lib.ConversionOptions
  ) -> str:
    """Renders a year.

    Fractional years are truncated toward zero. Negative years carry the BC
    marker instead of a sign, positive years the AD marker if requested.

    Args:
      magnitude: Signed year.
      options: Conversion options.

    Returns:
      Year in words.
    """
    language = self._language
    lexicon = language.lexicon
    year = int(magnitude)
    absolute = abs(year)
    context = language.context(Role.YEAR, options)
    if absolute == 0:
      text = language.render_zero(context)
    elif absolute in lexicon.year_exceptions:
      text = lexicon.year_exceptions[absolute]
    else:
      text = language.render_year(absolute, context)
    if year < 0:
      return self._with_era(text, lexicon.era_bc)
    if year > 0 and options.include_era:
      return self._with_era(text, lexicon.era_ad)
    return text
