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

"""Russian number names.

Scale words and currency units agree with their count following the East
Slavic triad (рубль / рубля / рублей). The numerals one and two agree in
gender with the noun they count, so "тысяча" (feminine) gives "одна тысяча",
"две тысячи". Years are ordinal: only the last component of the numeral is
ordinal ("тысяча девятьсот восемьдесят четвёртый"), and exact thousands fuse
into one word ("двадцатипятитысячный"). Exact multiples of a thousand
thousands are read as cardinals.
"""

from numscribe.core import agreement
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.languages import base

Gender = forms.Gender

_ONE = {
    Gender.MASCULINE: "один",
    Gender.FEMININE: "одна",
    Gender.NEUTER: "одно",
}

_TWO = {
    Gender.MASCULINE: "два",
    Gender.FEMININE: "две",
    Gender.NEUTER: "два",
}

_UNITS = (
    "ноль", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь",
    "девять", "десять", "одиннадцать", "двенадцать", "тринадцать",
    "четырнадцать", "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать",
    "девятнадцать",
)

_TENS = (
    "", "", "двадцать", "тридцать", "сорок", "пятьдесят", "шестьдесят",
    "семьдесят", "восемьдесят", "девяносто",
)

_HUNDREDS = (
    "", "сто", "двести", "триста", "четыреста", "пятьсот", "шестьсот",
    "семьсот", "восемьсот", "девятьсот",
)

# Ordinal (masculine nominative) of every numeral component.
_ORDINALS = {
    1: "первый", 2: "второй", 3: "третий", 4: "четвёртый", 5: "пятый",
    6: "шестой", 7: "седьмой", 8: "восьмой", 9: "девятый", 10: "десятый",
    11: "одиннадцатый", 12: "двенадцатый", 13: "тринадцатый",
    14: "четырнадцатый", 15: "пятнадцатый", 16: "шестнадцатый",
    17: "семнадцатый", 18: "восемнадцатый", 19: "девятнадцатый",
    20: "двадцатый", 30: "тридцатый", 40: "сороковой", 50: "пятидесятый",
    60: "шестидесятый", 70: "семидесятый", 80: "восьмидесятый",
    90: "девяностый", 100: "сотый", 200: "двухсотый", 300: "трёхсотый",
    400: "четырёхсотый", 500: "пятисотый", 600: "шестисотый",
    700: "семисотый", 800: "восьмисотый", 900: "девятисотый",
}

# Genitive stems used in compound ordinals ("двухтысячный").
_UNIT_STEMS = {
    1: "одно", 2: "двух", 3: "трёх", 4: "четырёх", 5: "пяти", 6: "шести",
    7: "семи", 8: "восьми", 9: "девяти", 10: "десяти", 11: "одиннадцати",
    12: "двенадцати", 13: "тринадцати", 14: "четырнадцати",
    15: "пятнадцати", 16: "шестнадцати", 17: "семнадцати",
    18: "восемнадцати", 19: "девятнадцати",
}

_TENS_STEMS = (
    "", "", "двадцати", "тридцати", "сорока", "пятидесяти", "шестидесяти",
    "семидесяти", "восьмидесяти", "девяноста",
)

_HUNDREDS_STEMS = (
    "", "сто", "двухсот", "трёхсот", "четырёхсот", "пятисот", "шестисот",
    "семисот", "восьмисот", "девятисот",
)

_THOUSAND_ORDINAL = "тысячный"

_TRIAD = agreement.SlavicTriadRule()


def _thousand_ordinal(thousands: int) -> str:
  """Fuses the genitive of `thousands` (1 to 999) with "тысячный"."""
  if thousands == 1:
    return _THOUSAND_ORDINAL
  hundreds, rest = divmod(thousands, 100)
  stem = _HUNDREDS_STEMS[hundreds]
  if rest < 20:
    stem += _UNIT_STEMS.get(rest, "")
  else:
    tens, units = divmod(rest, 10)
    stem += _TENS_STEMS[tens] + _UNIT_STEMS.get(units, "")
  return stem + _THOUSAND_ORDINAL



def _scale(
    singular: str, paucal: str, genitive: str,
    gender: Gender = Gender.MASCULINE
) -> numbering.ScaleEntry:
  return numbering.ScaleEntry(
      forms.FormSet(
          singular=singular,
          paucal_low=paucal,
          genitive_plural=genitive,
          gender=gender),
      rule=_TRIAD)


_THOUSAND = _scale("тысяча", "тысячи", "тысяч", Gender.FEMININE)

SYSTEM = numbering.short_scale((
    _THOUSAND,
    _scale("миллион", "миллиона", "миллионов"),
    _scale("миллиард", "миллиарда", "миллиардов"),
    _scale("триллион", "триллиона", "триллионов"),
    _scale("квадриллион", "квадриллиона", "квадриллионов"),
    _scale("квинтиллион", "квинтиллиона", "квинтиллионов"),
    _scale("секстиллион", "секстиллиона", "секстиллионов"),
    _scale("септиллион", "септиллиона", "септиллионов"),
))

LEXICON = base.LexiconTable(
    code="ru",
    name="Russian",
    zero="ноль",
    digits=_UNITS[:10],
    negative_prefix="минус",
    decimal_words={
        base.DecimalSeparator.COMMA: "запятая",
        base.DecimalSeparator.PERIOD: "точка",
        base.DecimalSeparator.POINT: "точка",
    },
    default_decimal=base.DecimalSeparator.COMMA,
    conjunction="",
    era_bc="до н. э.",
    era_ad="н. э.",
    infinity="Бесконечность",
    negative_infinity="Минус бесконечность",
    not_a_number="Не число",
    default_currency=currency.RUB,
    unit_rule=_TRIAD,
    year_exceptions={1000: _THOUSAND_ORDINAL},
)


class Russian(base.Language):
  """Russian number names."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def _unit(self, value: int, gender: Gender) -> str:
    if value == 1:
      return _ONE.get(gender, _ONE[Gender.MASCULINE])
    if value == 2:
      return _TWO.get(gender, _TWO[Gender.MASCULINE])
    return _UNITS[value]

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    words = []
    if hundreds:
      words.append(_HUNDREDS[hundreds])
    if 10 <= rest < 20:
      words.append(_UNITS[rest])
    elif rest:
      tens, units = divmod(rest, 10)
      if tens:
        words.append(_TENS[tens])
      if units:
        words.append(self._unit(units, context.target_gender))
    return " ".join(words)

  def elides(
      self, value: int, entry: numbering.ScaleEntry,
      context: forms.MorphologyContext
  ) -> bool:
    # Years read "тысяча девятьсот ...", not "одна тысяча ...".
    if (context.role == forms.Role.YEAR and entry is _THOUSAND and
        value == 1):
      return True
    return super().elides(value, entry, context)

  def render_year(self, year: int, context: forms.MorphologyContext) -> str:
    thousands, rest = divmod(year, 1000)
    if not rest:
      if 0 < thousands < 1000:
        return _thousand_ordinal(thousands)
      return self.words(year, context)
    # Only the last non-zero component of the numeral becomes ordinal.
    if 10 <= rest % 100 < 20:
      last = rest % 100
    elif rest % 10:
      last = rest % 10
    elif rest % 100:
      last = rest % 100
    else:
      last = rest
    head = year - last
    ordinal = _ORDINALS[last]
    if not head:
      return ordinal
    return self.join_words(self.words(head, context), ordinal)


RUSSIAN = Russian()
