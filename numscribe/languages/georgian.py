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

"""Georgian number names.

Tens are vigesimal: 20, 40, 60 and 80 have their own words and the remainder
up to 19 is glued on with და after dropping the final ი of the score:
ოცი + და + ერთი -> ოცდაერთი (21), ოცი + და + ათი -> ოცდაათი (30).
Hundreds and thousands lose their final ი when more material follows
(ასი, but ას ერთი; ათასი, but ათას ერთი). Both processes go through the
fusion table. Nouns after numerals stay singular.
"""

from numscribe.core import agreement
from numscribe.core import composer
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import fusion
from numscribe.core import numbering
from numscribe.languages import base

_UNITS = (
    "ნული", "ერთი", "ორი", "სამი", "ოთხი", "ხუთი", "ექვსი", "შვიდი", "რვა",
    "ცხრა", "ათი", "თერთმეტი", "თორმეტი", "ცამეტი", "თოთხმეტი", "თხუთმეტი",
    "თექვსმეტი", "ჩვიდმეტი", "თვრამეტი", "ცხრამეტი",
)

_SCORES = {20: "ოცი", 40: "ორმოცი", 60: "სამოცი", 80: "ოთხმოცი"}

_HUNDRED = "ასი"

_HUNDRED_PREFIXES = (
    "", "", "ორ", "სამ", "ოთხ", "ხუთ", "ექვს", "შვიდ", "რვა", "ცხრა",
)

# Fusion connectors.
VIGESIMAL = "და"
STEM = "stem"

FUSION = fusion.FusionTable({
    VIGESIMAL: {"": fusion.FusionRule(
        left_trim="ი", infix=VIGESIMAL, space=False)},
    STEM: {"": fusion.FusionRule(left_trim="ი")},
})

SYSTEM = numbering.short_scale((
    numbering.ScaleEntry(
        forms.FormSet(singular="ათასი"),
        rule=agreement.InvariantRule(elide_one=True)),
    numbering.ScaleEntry(forms.FormSet(singular="მილიონი")),
    numbering.ScaleEntry(forms.FormSet(singular="მილიარდი")),
    numbering.ScaleEntry(forms.FormSet(singular="ტრილიონი")),
    numbering.ScaleEntry(forms.FormSet(singular="კვადრილიონი")),
    numbering.ScaleEntry(forms.FormSet(singular="კვინტილიონი")),
    numbering.ScaleEntry(forms.FormSet(singular="სექსტილიონი")),
    numbering.ScaleEntry(forms.FormSet(singular="სეპტილიონი")),
))

LEXICON = base.LexiconTable(
    code="ka",
    name="Georgian",
    zero=_UNITS[0],
    digits=_UNITS[:10],
    negative_prefix="მინუს",
    decimal_words={
        base.DecimalSeparator.COMMA: "მძიმე",
        base.DecimalSeparator.PERIOD: "წერტილი",
        base.DecimalSeparator.POINT: "წერტილი",
    },
    default_decimal=base.DecimalSeparator.COMMA,
    conjunction="და",
    era_bc="ჩვენს წელთაღრიცხვამდე",
    era_ad="ჩვენი წელთაღრიცხვით",
    infinity="უსასრულობა",
    negative_infinity="მინუს უსასრულობა",
    not_a_number="არა რიცხვი",
    default_currency=currency.GEL,
    unit_rule=agreement.InvariantRule(),
    fusion=FUSION,
)


class Georgian(base.Language):
  """Georgian number names."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def _under_hundred(self, value: int) -> str:
    if value < 20:
      return _UNITS[value]
    score, rest = divmod(value, 20)
    score_word = _SCORES[score * 20]
    if not rest:
      return score_word
    return FUSION.join(score_word, VIGESIMAL, _UNITS[rest])

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    if not hundreds:
      return self._under_hundred(rest)
    hundred = _HUNDRED_PREFIXES[hundreds] + _HUNDRED
    if not rest:
      return hundred
    return FUSION.join(hundred, STEM, self._under_hundred(rest))

  def group_linker(
      self,
      previous: composer.RenderedGroup,
      current: composer.RenderedGroup,
      context: forms.MorphologyContext,
  ) -> composer.Linker:
    if previous.scale_index == 1:
      return composer.Linker(connector=STEM)
    return super().group_linker(previous, current, context)


GEORGIAN = Georgian()
