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

"""Hindi number names (Indian numbering system).

Every number below one hundred has its own word. Above the hundreds the
grouping is mixed: thousand (10^3), then every further scale is a factor of
one hundred (lakh 10^5, crore 10^7, ...).
"""

from numscribe.core import agreement
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.languages import base

_UNDER_HUNDRED = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह",
    "अठारह", "उन्नीस", "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस",
    "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस", "तीस", "इकतीस", "बत्तीस",
    "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चौवालीस", "पैंतालीस",
    "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास", "पचास", "इक्यावन", "बावन",
    "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ", "साठ",
    "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ",
    "उनहत्तर", "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर",
    "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी", "अस्सी", "इक्यासी", "बयासी",
    "तिरासी", "चौरासी", "पचासी", "छियासी", "सतासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानबे", "बानबे", "तिरानबे", "चौरानबे", "पंचानबे", "छियानवे",
    "सत्तानबे", "अठ्ठानवे", "निन्यानवे",
)

_HUNDRED = "सौ"

_GROUPINGS = (
    (10**3, "हज़ार"),
    (10**5, "लाख"),
    (10**7, "करोड़"),
    (10**9, "अरब"),
    (10**11, "खरब"),
    (10**13, "नील"),
    (10**15, "पद्म"),
    (10**17, "शंख"),
)

SYSTEM = numbering.mixed_scale(
    tuple(numbering.ScaleEntry(forms.FormSet(singular=label))
          for _, label in _GROUPINGS),
    _GROUPINGS,
)

LEXICON = base.LexiconTable(
    code="hi",
    name="Hindi",
    zero=_UNDER_HUNDRED[0],
    digits=_UNDER_HUNDRED[:10],
    negative_prefix="ऋण",
    decimal_words={
        base.DecimalSeparator.COMMA: "अल्पविराम",
        base.DecimalSeparator.PERIOD: "दशमलव",
        base.DecimalSeparator.POINT: "दशमलव",
    },
    default_decimal=base.DecimalSeparator.PERIOD,
    conjunction="और",
    era_bc="ईसा पूर्व",
    era_ad="ईस्वी",
    infinity="अनंत",
    negative_infinity="ऋण अनंत",
    not_a_number="अमान्य संख्या",
    default_currency=currency.INR,
    unit_rule=agreement.SingularPluralRule(),
)


class Hindi(base.Language):
  """Hindi number names."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    words = []
    if hundreds:
      words.append(f"{_UNDER_HUNDRED[hundreds]} {_HUNDRED}")
    if rest:
      words.append(_UNDER_HUNDRED[rest])
    return " ".join(words)

  def render_year(self, year: int, context: forms.MorphologyContext) -> str:
    # Whole centuries are counted in hundreds: उन्नीस सौ (1900).
    if 1100 <= year < 2000 and not year % 100:
      return f"{_UNDER_HUNDRED[year // 100]} {_HUNDRED}"
    return self.words(year, context)


HINDI = Hindi()
