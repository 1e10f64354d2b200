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

"""Modern Standard Arabic number names.

Points of interest:

1) Units precede tens and are linked with و ("واحد وعشرون").

2) Gender polarity: the numerals 3..10 take the gender opposite to the
   counted noun, while 1 and 2 agree with it. The word tables below are
   indexed by the morphological gender of the numeral itself, so ثلاث (used
   with feminine nouns) is listed as masculine.

3) A counted noun (scale word or currency unit) is singular after 1, dual
   after 2, plural after 3..10 and accusative singular after 11..99. The
   numerals 1 and 2 are dropped since the noun form expresses them ("ألف",
   "ألفان").
"""

from numscribe.core import agreement
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.languages import base

Gender = forms.Gender

_RULE = agreement.ArabicHexadRule()

_UNITS = {
    Gender.MASCULINE: (
        "", "واحد", "اثنان", "ثلاث", "أربع", "خمس", "ست", "سبع", "ثمان",
        "تسع", "عشر",
    ),
    Gender.FEMININE: (
        "", "واحدة", "اثنتان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة",
        "ثمانية", "تسعة", "عشرة",
    ),
}

# Unit words inside compounds (21, 31, ...) where feminine one is إحدى.
_COMPOUND_ONE = {Gender.MASCULINE: "واحد", Gender.FEMININE: "إحدى"}

_ELEVEN = {Gender.MASCULINE: "أحد عشر", Gender.FEMININE: "إحدى عشرة"}
_TWELVE = {Gender.MASCULINE: "اثنا عشر", Gender.FEMININE: "اثنتا عشرة"}

# The "ten" of 13..19 agrees directly with the noun.
_TEEN_TEN = {Gender.MASCULINE: "عشر", Gender.FEMININE: "عشرة"}

_TENS = (
    "", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون",
    "تسعون",
)

_HUNDREDS = (
    "", "مئة", "مئتان", "ثلاثمئة", "أربعمئة", "خمسمئة", "ستمئة", "سبعمئة",
    "ثمانمئة", "تسعمئة",
)

_AND = "و"


def _scale(
    singular: str, dual: str, plural: str, accusative: str
) -> numbering.ScaleEntry:
  return numbering.ScaleEntry(
      forms.FormSet(
          singular=singular,
          dual=dual,
          paucal_high=plural,
          accusative_singular=accusative,
          plain=plural,
          gender=Gender.MASCULINE),
      rule=_RULE)


SYSTEM = numbering.short_scale((
    _scale("ألف", "ألفان", "آلاف", "ألفًا"),
    _scale("مليون", "مليونان", "ملايين", "مليونًا"),
    _scale("مليار", "ملياران", "مليارات", "مليارًا"),
    _scale("تريليون", "تريليونان", "تريليونات", "تريليونًا"),
    _scale("كوادريليون", "كوادريليونان", "كوادريليونات", "كوادريليونًا"),
    _scale("كوينتليون", "كوينتليونان", "كوينتليونات", "كوينتليونًا"),
))

LEXICON = base.LexiconTable(
    code="ar",
    name="Arabic",
    zero="صفر",
    digits=(
        "صفر", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة",
        "ثمانية", "تسعة",
    ),
    negative_prefix="سالب",
    decimal_words={
        base.DecimalSeparator.COMMA: "فاصلة",
        base.DecimalSeparator.PERIOD: "نقطة",
        base.DecimalSeparator.POINT: "نقطة",
    },
    default_decimal=base.DecimalSeparator.COMMA,
    conjunction=_AND,
    era_bc="ق.م",
    era_ad="م",
    infinity="لانهاية",
    negative_infinity="سالب لانهاية",
    not_a_number="ليس رقمًا",
    default_currency=currency.SAR,
    unit_rule=_RULE,
    group_joiner=f" {_AND}",
    conjunction_attaches=True,
    apply_polarity=True,
)


def _gender(gender: Gender) -> Gender:
  return Gender.FEMININE if gender == Gender.FEMININE else Gender.MASCULINE


class Arabic(base.Language):
  """Arabic number names with gender agreement and polarity."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def _numeral_gender(
      self, digit: int, context: forms.MorphologyContext
  ) -> Gender:
    noun_gender = _gender(context.target_gender)
    if not context.apply_polarity:
      return noun_gender
    return _gender(_RULE.numeral_gender(digit, noun_gender))

  def _under_hundred(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    noun_gender = _gender(context.target_gender)
    if value <= 10:
      return _UNITS[self._numeral_gender(value, context)][value]
    if value == 11:
      return _ELEVEN[noun_gender]
    if value == 12:
      return _TWELVE[noun_gender]
    tens, units = divmod(value, 10)
    if tens == 1:
      unit = _UNITS[self._numeral_gender(units, context)][units]
      return f"{unit} {_TEEN_TEN[noun_gender]}"
    if not units:
      return _TENS[tens]
    if units == 1:
      unit = _COMPOUND_ONE[noun_gender]
    else:
      unit = _UNITS[self._numeral_gender(units, context)][units]
    return f"{unit} {_AND}{_TENS[tens]}"

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    if not hundreds:
      return self._under_hundred(rest, context)
    if not rest:
      return _HUNDREDS[hundreds]
    return f"{_HUNDREDS[hundreds]} {_AND}{self._under_hundred(rest, context)}"


ARABIC = Arabic()
