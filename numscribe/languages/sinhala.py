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

"""Sinhala number names.

Sinhala marks the end of a cardinal with the bound suffix යි (එක -> එකයි).
Scale words have a free form at the end of a numeral (දහස) and a bound form
when more follows (දහස් එකයි). Counts before scale words use combining forms
(දෙ දහස, දහ දහස). Years are spoken without the suffix and keep the "one"
before a thousand that is followed by more digits (එක් දහස් නවසියය).
"""

from typing import Sequence

from numscribe.core import agreement
from numscribe.core import composer
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.languages import base

Role = forms.Role

_UNITS = ("", "එක", "දෙක", "තුන", "හතර", "පහ", "හය", "හත", "අට", "නවය")

_TEENS = (
    "දහය", "එකොළහ", "දොළහ", "දහතුන", "දාහතර", "පහළොව", "දහසය", "දහහත",
    "දහඅට", "දහනවය",
)

_TENS_PREFIXES = (
    "", "", "විසි", "තිස්", "හතලිස්", "පනස්", "හැට", "හැත්තෑ", "අසූ", "අනූ",
)

_EXACT_TENS = (
    "", "", "විස්ස", "තිහ", "හතළිහ", "පනහ", "හැට", "හැත්තෑව", "අසූව", "අනූව",
)

# Combining forms of counts before hundreds and scale words.
_COMBINING = {
    2: "දෙ", 3: "තුන්", 4: "හාර", 5: "පන්", 6: "හය", 7: "හත්", 8: "අට",
    9: "නව", 10: "දහ", 11: "එකොළොස්", 12: "දොළොස්",
}

_HUNDRED = forms.FormSet(singular="සියය", plain="සිය")

_ZERO = "බිංදුව"

_SUFFIX = agreement.SuffixRule("යි")

_TERMINAL = agreement.TerminalFormRule(elide_one=True)


def _scale(free: str, bound: str) -> numbering.ScaleEntry:
  return numbering.ScaleEntry(
      forms.FormSet(singular=free, plain=bound),
      rule=_TERMINAL,
      one_word="එක්")


SYSTEM = numbering.short_scale((
    _scale("දහස", "දහස්"),
    _scale("මිලියනය", "මිලියන"),
    _scale("බිලියනය", "බිලියන"),
    _scale("ට්‍රිලියනය", "ට්‍රිලියන"),
    _scale("ක්වඩ්‍රිලියනය", "ක්වඩ්‍රිලියන"),
))

LEXICON = base.LexiconTable(
    code="si",
    name="Sinhala",
    zero=_ZERO,
    digits=(_ZERO,) + _UNITS[1:],
    negative_prefix="සෘණ",
    decimal_words={
        base.DecimalSeparator.COMMA: "කොමා",
        base.DecimalSeparator.PERIOD: "දශම",
        base.DecimalSeparator.POINT: "දශම",
    },
    default_decimal=base.DecimalSeparator.PERIOD,
    conjunction="",
    era_bc="ක්‍රි.පූ.",
    era_ad="ක්‍රි.ව.",
    infinity="අනන්තය",
    negative_infinity="සෘණ අනන්තය",
    not_a_number="අංකයක් නොවේ",
    default_currency=currency.LKR,
    unit_rule=agreement.SingularPluralRule(elide_one=True),
)


class Sinhala(base.Language):
  """Sinhala number names."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def _under_hundred(self, value: int) -> str:
    if value < 10:
      return _UNITS[value]
    if value < 20:
      return _TEENS[value - 10]
    tens, units = divmod(value, 10)
    if not units:
      return _EXACT_TENS[tens]
    return _TENS_PREFIXES[tens] + _UNITS[units]

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    hundreds, rest = divmod(value, 100)
    words = []
    if hundreds:
      prefix = _UNITS[1] if hundreds == 1 else _COMBINING[hundreds]
      words.append(prefix + _HUNDRED.resolve(
          forms.Form.PLAIN if rest else forms.Form.SINGULAR))
    if rest:
      words.append(self._under_hundred(rest))
    return " ".join(words)

  def render_scale_count(
      self, value: int, entry: numbering.ScaleEntry,
      context: forms.MorphologyContext
  ) -> str:
    if value in _COMBINING:
      return _COMBINING[value]
    return self.render_group(value, context)

  def elides(
      self, value: int, entry: numbering.ScaleEntry,
      context: forms.MorphologyContext
  ) -> bool:
    # Years keep "එක්" before a scale word that is followed by more digits.
    if context.role == Role.YEAR and not context.is_terminal:
      return False
    return super().elides(value, entry, context)

  def render_zero(self, context: forms.MorphologyContext) -> str:
    if context.role in (Role.CURRENCY_MAIN, Role.CURRENCY_SUB):
      return _SUFFIX.attach(_ZERO)
    return _ZERO

  def finalize(
      self, text: str, groups: Sequence[composer.RenderedGroup],
      context: forms.MorphologyContext
  ) -> str:
    bare = len(groups) == 1 and groups[0].elided
    if _SUFFIX.applies(context, bare_scale_noun=bare):
      return _SUFFIX.attach(text)
    return text

  def attach_unit(
      self, numeral: str | None, unit: str, context: forms.MorphologyContext
  ) -> str:
    # The unit comes first. With the count elided, the unit takes the suffix.
    if numeral is None:
      return _SUFFIX.attach(unit)
    return self.join_words(unit, numeral)


SINHALA = Sinhala()
