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

"""Lexicon tables and the base class of all languages.

A language is a `LexiconTable` (pure constant data), a `NumberingSystem`
and a group renderer. The default implementations of the composition hooks
cover languages that put spaces between words and simply juxtapose the count
and the scale word. Languages override the hooks where they differ.
"""

import abc
import dataclasses
from typing import Mapping, Sequence

from numscribe.core import agreement
from numscribe.core import composer
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import fusion as fusion_lib
from numscribe.core import numbering
from numscribe.core import options as options_lib
from numscribe.core import overlays

DecimalSeparator = options_lib.DecimalSeparator
Gender = forms.Gender
MorphologyContext = forms.MorphologyContext
Role = forms.Role


@dataclasses.dataclass(frozen=True)
class LexiconTable:
  """Constant per-language data.

  Attributes:
    code: ISO 639-1 code.
    name: English name of the language.
    zero: Word for zero.
    digits: Plain words for the digits 0..9, used after the decimal point.
    negative_prefix: Word for the minus sign.
    decimal_words: Word for each kind of decimal separator.
    default_decimal: Separator used when none is requested.
    conjunction: Default conjunction between currency amounts.
    era_bc: Marker for negative years.
    era_ad: Marker for positive years.
    infinity: Literal for positive infinity.
    negative_infinity: Literal for negative infinity.
    not_a_number: Literal for input that is not a number.
    default_currency: Currency used when none is requested.
    unit_rule: Agreement between amounts and currency units.
    word_separator: Separator between words.
    scale_joiner: Separator between a count and its scale word.
    group_joiner: Separator between two non-zero groups.
    zero_linker: Word inserted in place of skipped zero groups.
    zero_on_leading_gap: Also insert `zero_linker` when the lower group has
      a leading zero place.
    conjunction_attaches: The currency conjunction is written together with
      the following word.
    era_prefix: Era markers go before the year.
    default_gender: Gender of the implicit counted noun.
    year_gender: Gender used for years.
    apply_polarity: Numerals 3..10 take the gender opposite to the noun.
    year_exceptions: Irregular readings of particular years.
    fusion: Fusion rules for adjacent words.
  """
  code: str
  name: str
  zero: str
  digits: tuple[str, ...]
  negative_prefix: str
  decimal_words: Mapping[DecimalSeparator, str]
  default_decimal: DecimalSeparator
  conjunction: str
  era_bc: str
  era_ad: str
  infinity: str
  negative_infinity: str
  not_a_number: str
  default_currency: currency.CurrencyInfo
  unit_rule: agreement.MorphologyRule
  word_separator: str = " "
  scale_joiner: str = " "
  group_joiner: str = " "
  zero_linker: str | None = None
  zero_on_leading_gap: bool = False
  conjunction_attaches: bool = False
  era_prefix: bool = False
  default_gender: Gender = Gender.MASCULINE
  year_gender: Gender = Gender.MASCULINE
  apply_polarity: bool = False
  year_exceptions: Mapping[int, str] = dataclasses.field(default_factory=dict)
  fusion: fusion_lib.FusionTable = dataclasses.field(
      default_factory=fusion_lib.FusionTable)

  def __post_init__(self) -> None:
    if len(self.digits) != 10:
      raise ValueError(
          f"{self.code}: expected 10 digit words, got {len(self.digits)}")
    missing = [
        sep for sep in DecimalSeparator if sep not in self.decimal_words]
    if missing:
      raise ValueError(f"{self.code}: no decimal words for {missing}")


class Language(abc.ABC):
  """Number names of one language."""

  def __init__(
      self, lexicon: LexiconTable, system: numbering.NumberingSystem
  ) -> None:
    self._lexicon = lexicon
    self._system = system

  @property
  def lexicon(self) -> LexiconTable:
    return self._lexicon

  @property
  def system(self) -> numbering.NumberingSystem:
    return self._system

  @property
  def code(self) -> str:
    return self._lexicon.code

  def with_options(
      self, options: options_lib.ConversionOptions
  ) -> "Language":
    """Returns the language configured for `options`."""
    del options
    return self

  def context(
      self, role: Role,
      options: options_lib.ConversionOptions | None = None
  ) -> MorphologyContext:
    gender = self._lexicon.default_gender
    if role == Role.YEAR:
      gender = self._lexicon.year_gender
    elif options and options.gender:
      gender = options.gender
    return MorphologyContext(
        target_gender=gender,
        apply_polarity=self._lexicon.apply_polarity,
        role=role)

  @abc.abstractmethod
  def render_group(self, value: int, context: MorphologyContext) -> str:
    """Renders a single group value (below the group radix) into words."""

  def render_zero(self, context: MorphologyContext) -> str:
    del context
    return self._lexicon.zero

  def words(self, number: int, context: MorphologyContext) -> str:
    """Renders a non-negative integer.

    Args:
      number: Magnitude.
      context: Agreement context.

    Returns:
      Numeral words.

    Raises:
      ScaleOverflow: if `number` is too large for the scale table.
      UnsupportedMagnitude: if a needed scale word is missing.
    """
    if number == 0:
      return self.render_zero(context)
    return composer.compose(
        numbering.chunk(number, self._system), self, context)

  def render_scale_count(
      self, value: int, entry: numbering.ScaleEntry,
      context: MorphologyContext
  ) -> str:
    del entry
    return self.render_group(value, context)

  def elides(
      self, value: int, entry: numbering.ScaleEntry,
      context: MorphologyContext
  ) -> bool:
    del context
    return entry.rule.elides(value)

  def attach_scale(self, numeral: str | None, word: str) -> str:
    if numeral is None:
      return word
    return f"{numeral}{self._lexicon.scale_joiner}{word}"

  def group_linker(
      self,
      previous: composer.RenderedGroup,
      current: composer.RenderedGroup,
      context: MorphologyContext,
  ) -> composer.Linker:
    del context
    lexicon = self._lexicon
    if lexicon.zero_linker is not None:
      skipped = previous.scale_index - current.scale_index > 1
      leading_zero = lexicon.zero_on_leading_gap and (
          current.value * 10 < self._system.group_radix(current.scale_index))
      if skipped or leading_zero:
        return composer.Linker(lexicon.zero_linker)
    return composer.Linker(lexicon.group_joiner)

  def finalize(
      self, text: str, groups: Sequence[composer.RenderedGroup],
      context: MorphologyContext
  ) -> str:
    del groups, context
    return text

  def join_words(self, *parts: str) -> str:
    return self._lexicon.word_separator.join(part for part in parts if part)

  def decimal_word(self, separator: DecimalSeparator | None) -> str:
    return self._lexicon.decimal_words[
        separator or self._lexicon.default_decimal]

  def render_year(self, year: int, context: MorphologyContext) -> str:
    """Renders a positive year. Defaults to the cardinal number."""
    return self.words(year, context)

  def attach_unit(
      self, numeral: str | None, unit: str, context: MorphologyContext
  ) -> str:
    del context
    return self.join_words(numeral or "", unit)

  def join_amounts(self, main: str, conjunction: str, sub: str) -> str:
    if not conjunction:
      return self.join_words(main, sub)
    if self._lexicon.conjunction_attaches:
      return self.join_words(main, f"{conjunction}{sub}")
    return self.join_words(main, conjunction, sub)

  def currency_overlay(self) -> overlays.CurrencyOverlay:
    return overlays.CurrencyOverlay(self)

  def year_overlay(self) -> overlays.YearOverlay:
    return overlays.YearOverlay(self)
