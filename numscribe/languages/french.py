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

"""French number names.

Points of interest:

1) 70..79 and 90..99 are built on 60 and 80 (soixante-dix, quatre-vingt-dix).

2) "cent" and "quatre-vingt" take the plural -s only when they end the
   numeral: "deux cents" but "deux cent trois" and "deux cent mille". Scale
   nouns (million, milliard) do not count as numerals, so "deux cents
   millions".

3) "mille" is invariant and is never preceded by "un".
"""

from numscribe.core import agreement
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.languages import base

_UNITS = (
    "zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit",
    "neuf", "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
)

_TENS = {
    2: "vingt",
    3: "trente",
    4: "quarante",
    5: "cinquante",
    6: "soixante",
}

_TERMINAL_PLURAL = agreement.SingularPluralRule(terminal_only=True)
_HUNDRED = forms.FormSet(singular="cent", plain="cents")
_EIGHTY = forms.FormSet(singular="quatre-vingt", plain="quatre-vingts")


def _noun_scale(singular: str, plural: str) -> numbering.ScaleEntry:
  return numbering.ScaleEntry(
      forms.FormSet(singular=singular, plain=plural),
      rule=agreement.SingularPluralRule(),
      closes_numeral=True)


SYSTEM = numbering.short_scale((
    numbering.ScaleEntry(
        forms.FormSet(singular="mille"),
        rule=agreement.InvariantRule(elide_one=True)),
    _noun_scale("million", "millions"),
    _noun_scale("milliard", "milliards"),
    _noun_scale("billion", "billions"),
    _noun_scale("billiard", "billiards"),
    _noun_scale("trillion", "trillions"),
    _noun_scale("trilliard", "trilliards"),
    _noun_scale("quadrillion", "quadrillions"),
))

LEXICON = base.LexiconTable(
    code="fr",
    name="French",
    zero="zéro",
    digits=_UNITS[:10],
    negative_prefix="moins",
    decimal_words={
        base.DecimalSeparator.COMMA: "virgule",
        base.DecimalSeparator.PERIOD: "point",
        base.DecimalSeparator.POINT: "point",
    },
    default_decimal=base.DecimalSeparator.COMMA,
    conjunction="et",
    era_bc="av. J.-C.",
    era_ad="ap. J.-C.",
    infinity="Infini",
    negative_infinity="Moins l'infini",
    not_a_number="N'est pas un nombre",
    default_currency=currency.EUR_FR,
    unit_rule=agreement.SingularPluralRule(),
)


class French(base.Language):
  """French (France) number names."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def _under_hundred(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    if value <= 16:
      return _UNITS[value]
    if value < 20:
      return f"dix-{_UNITS[value - 10]}"
    if value < 70:
      tens, units = divmod(value, 10)
      if not units:
        return _TENS[tens]
      if units == 1:
        return f"{_TENS[tens]} et un"
      return f"{_TENS[tens]}-{_UNITS[units]}"
    if value < 80:
      rest = value - 60
      if rest == 11:
        return "soixante et onze"
      return f"soixante-{self._under_hundred(rest, context)}"
    rest = value - 80
    eighty = _TERMINAL_PLURAL.inflect(
        4, _EIGHTY,
        context.replace(is_terminal=context.is_terminal and not rest))
    if not rest:
      return eighty
    return f"{eighty}-{self._under_hundred(rest, context)}"

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    words = []
    if hundreds:
      hundred = _TERMINAL_PLURAL.inflect(
          hundreds, _HUNDRED,
          context.replace(is_terminal=context.is_terminal and not rest))
      if hundreds == 1:
        words.append(hundred)
      else:
        words.append(f"{_UNITS[hundreds]} {hundred}")
    if rest:
      words.append(self._under_hundred(rest, context))
    return " ".join(words)


FRENCH = French()
