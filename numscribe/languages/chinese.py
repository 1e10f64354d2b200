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

"""Mandarin Chinese number names (simplified characters).

Numbers are grouped by four digits (万, 亿). A single 零 stands for any run
of zeros, both inside a group (一千零一) and between groups (一万零五,
一亿零五). Ten at the very start of a number is 十 rather than 一十.
"""

import decimal

from numscribe.core import agreement
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import numbering
from numscribe.core import options as options_lib
from numscribe.core import overlays
from numscribe.languages import base

_DIGITS = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")

_PLACES = ("", "十", "百", "千")

_ZERO = _DIGITS[0]

_SCALES = ("万", "亿", "万亿", "亿亿", "万亿亿", "亿亿亿")

# Currency: 元 main unit, 角 tenths, 分 hundredths, 整 marks whole amounts.
_JIAO = "角"
_WHOLE = "整"

SYSTEM = numbering.myriad_scale(tuple(
    numbering.ScaleEntry(forms.FormSet(singular=word)) for word in _SCALES))

LEXICON = base.LexiconTable(
    code="zh",
    name="Chinese",
    zero=_ZERO,
    digits=_DIGITS,
    negative_prefix="负",
    decimal_words={
        base.DecimalSeparator.COMMA: "点",
        base.DecimalSeparator.PERIOD: "点",
        base.DecimalSeparator.POINT: "点",
    },
    default_decimal=base.DecimalSeparator.POINT,
    conjunction="",
    era_bc="公元前",
    era_ad="公元",
    infinity="无穷大",
    negative_infinity="负无穷大",
    not_a_number="不是数字",
    default_currency=currency.CNY,
    unit_rule=agreement.InvariantRule(),
    word_separator="",
    scale_joiner="",
    group_joiner="",
    zero_linker=_ZERO,
    zero_on_leading_gap=True,
    era_prefix=True,
)


class ChineseCurrencyOverlay(overlays.CurrencyOverlay):
  """Reads amounts as 元, 角 and 分."""

  def render(
      self, amount: decimal.Decimal,
      options: options_lib.ConversionOptions
  ) -> str:
    language = self._language
    info = self.info(options)
    main_unit = info.main_forms.singular
    sub_unit = info.sub_forms.singular if info.sub_forms else ""
    main, sub = self.split(amount, options)
    context = language.context(forms.Role.CURRENCY_MAIN, options)
    if not main and not sub:
      return f"{_ZERO}{main_unit}{_WHOLE}"
    text = ""
    if main:
      text = f"{language.words(main, context)}{main_unit}"
    if not sub:
      return f"{text}{_WHOLE}"
    jiao, fen = divmod(sub, 10)
    if jiao:
      text += f"{_DIGITS[jiao]}{_JIAO}"
    elif main:
      text += _ZERO
    if fen:
      text += f"{_DIGITS[fen]}{sub_unit}"
    return text


class Chinese(base.Language):
  """Chinese number names."""

  def __init__(self) -> None:
    super().__init__(LEXICON, SYSTEM)

  def render_group(
      self, value: int, context: forms.MorphologyContext
  ) -> str:
    words = []
    started = False
    pending_zero = False
    for place in range(len(_PLACES) - 1, -1, -1):
      digit = value // 10 ** place % 10
      if not digit:
        pending_zero = started
        continue
      if pending_zero:
        words.append(_ZERO)
        pending_zero = False
      if place == 1 and digit == 1 and not started and context.is_leading:
        words.append(_PLACES[1])
      else:
        words.append(_DIGITS[digit] + _PLACES[place])
      started = True
    return "".join(words)

  def render_year(self, year: int, context: forms.MorphologyContext) -> str:
    # Four-digit years are read digit by digit (二零二四).
    if 1000 <= year < 10000:
      return "".join(_DIGITS[int(digit)] for digit in str(year))
    return self.words(year, context)

  def currency_overlay(self) -> overlays.CurrencyOverlay:
    return ChineseCurrencyOverlay(self)


CHINESE = Chinese()
