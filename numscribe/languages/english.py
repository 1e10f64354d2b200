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

"""English number names (short scale)."""

from numscribe.core import agreement
from numscribe.core import composer
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.core import options as options_lib
from numscribe.languages import base

_UNDER_TWENTY = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
)

_HUNDRED = "hundred"

_SCALES = (
    "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion", "undecillion", "duodecillion", "tredecillion",
    "quattuordecillion", "quindecillion",
)

SYSTEM = numbering.short_scale(tuple(
    numbering.ScaleEntry(forms.FormSet(singular=word)) for word in _SCALES))

LEXICON = base.LexiconTable(
    code="en",
    name="English",
    zero="zero",
    digits=_UNDER_TWENTY[:10],
    negative_prefix="minus",
    decimal_words={
        base.DecimalSeparator.COMMA: "comma",
        base.DecimalSeparator.PERIOD: "point",
        base.DecimalSeparator.POINT: "point",
    },
    default_decimal=base.DecimalSeparator.PERIOD,
    conjunction="and",
    era_bc="BC",
    era_ad="AD",
    infinity="Infinity",
    negative_infinity="Negative Infinity",
    not_a_number="Not a Number",
    default_currency=currency.USD,
    unit_rule=agreement.SingularPluralRule(),
)


class English(base.Language):
  """English, optionally with British "and" after hundreds.

  Years in 1100..1999 and 2010..2099 are read in pairs ("nineteen
  eighty-four", "twenty twenty-four").
  """

  def __init__(self, include_and: bool = False) -> None:
    super().__init__(LEXICON, SYSTEM)
    self._include_and = include_and

  @property
  def include_and(self) -> bool:
    return self._include_and

  def with_options(
      self, options: options_lib.ConversionOptions
  ) -> base.Language:
    include_and = getattr(options, "include_and", False)
    if include_and == self._include_and:
      return self
    return English(include_and=include_and)

  def _under_hundred(self, value: int) -> str:
    if value < 20:
      return _UNDER_TWENTY[value]
    tens, units = divmod(value, 10)
    if not units:
      return _TENS[tens]
    return f"{_TENS[tens]}-{_UNDER_TWENTY[units]}"

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    words = []
    if hundreds:
      words.append(f"{_UNDER_TWENTY[hundreds]} {_HUNDRED}")
    if rest:
      if hundreds and self._include_and:
        words.append("and")
      words.append(self._under_hundred(rest))
    return " ".join(words)

  def group_linker(
      self,
      previous: composer.RenderedGroup,
      current: composer.RenderedGroup,
      context: forms.MorphologyContext,
  ) -> composer.Linker:
    if (self._include_and and current.scale_index == 0 and
        current.value < 100):
      return composer.Linker(" and ")
    return super().group_linker(previous, current, context)

  def render_year(self, year: int, context: forms.MorphologyContext) -> str:
    if 1100 <= year < 2000 or 2010 <= year < 2100:
      high, low = divmod(year, 100)
      head = self._under_hundred(high)
      if not low:
        return f"{head} {_HUNDRED}"
      if low < 10:
        return f"{head} oh {_UNDER_TWENTY[low]}"
      return f"{head} {self._under_hundred(low)}"
    return self.words(year, context)


ENGLISH = English()
