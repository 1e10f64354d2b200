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

"""Agreement between numerals and the nouns they count.

Each language family gets one rule class. The rules are stateless: they map a
count (plus the agreement context) to an inflection slot, and tell the caller
which gender the numeral itself should take and whether the numeral is
dropped entirely because the noun form already carries the count.
"""

import abc

from numscribe.core import forms

Form = forms.Form
FormSet = forms.FormSet
Gender = forms.Gender
MorphologyContext = forms.MorphologyContext
Role = forms.Role


class MorphologyRule(abc.ABC):
  """Base class for agreement rules.

  If `elide_one` is enabled the numeral "one" is not spoken before the noun,
  e.g. French "mille" rather than "un mille".
  """

  def __init__(self, elide_one: bool = False) -> None:
    self._elide_one = elide_one

  @abc.abstractmethod
  def select_form(self, count: int, context: MorphologyContext) -> Form:
    """Returns the inflection slot governed by `count`."""

  def numeral_gender(self, count: int, noun_gender: Gender) -> Gender:
    """Gender of the numeral counting a noun of `noun_gender`."""
    del count
    return noun_gender

  def elides(self, count: int) -> bool:
    return self._elide_one and count == 1

  def inflect(
      self, count: int, form_set: FormSet, context: MorphologyContext,
      strict: bool = False
  ) -> str:
    return form_set.resolve(self.select_form(count, context), strict=strict)


class InvariantRule(MorphologyRule):
  """Nouns that do not inflect for number after numerals."""

  def select_form(self, count: int, context: MorphologyContext) -> Form:
    return Form.SINGULAR


class SingularPluralRule(MorphologyRule):
  """Germanic and Romance agreement: one is singular, the rest plural.

  With `terminal_only` the plural is only marked when the word ends the
  whole numeral (French "deux cents" but "deux cent trois").
  """

  def __init__(
      self, elide_one: bool = False, terminal_only: bool = False
  ) -> None:
    super().__init__(elide_one=elide_one)
    self._terminal_only = terminal_only

  def select_form(self, count: int, context: MorphologyContext) -> Form:
    if count == 1:
      return Form.SINGULAR
    if self._terminal_only and not context.is_terminal:
      return Form.SINGULAR
    return Form.PLAIN


class SlavicTriadRule(MorphologyRule):
  """East Slavic agreement (singular, paucal 2..4, genitive plural)."""

  def select_form(self, count: int, context: MorphologyContext) -> Form:
    if 11 <= count % 100 <= 19:
      return Form.GENITIVE_PLURAL
    last_digit = count % 10
    if last_digit == 1:
      return Form.SINGULAR
    if 2 <= last_digit <= 4:
      return Form.PAUCAL_LOW
    return Form.GENITIVE_PLURAL


class ArabicHexadRule(MorphologyRule):
  """Arabic agreement with dual, paucal and gender polarity.

  The numerals one and two are never spoken before a counted noun: the
  singular and the dual already express the count.
  """

  def __init__(self) -> None:
    super().__init__(elide_one=True)

  def select_form(self, count: int, context: MorphologyContext) -> Form:
    if count == 0:
      return Form.PLAIN
    if count == 1:
      return Form.SINGULAR
    if count == 2:
      return Form.DUAL
    remainder = count % 100
    if 3 <= remainder <= 10:
      return Form.PAUCAL_HIGH
    if 11 <= remainder <= 99:
      return Form.ACCUSATIVE_SINGULAR
    return Form.SINGULAR

  def numeral_gender(self, count: int, noun_gender: Gender) -> Gender:
    if 3 <= count % 100 <= 10:
      return forms.opposite_gender(noun_gender)
    return noun_gender

  def elides(self, count: int) -> bool:
    return count in (1, 2)


class TerminalFormRule(MorphologyRule):
  """Free form at the end of a numeral, bound (plain slot) form elsewhere."""

  def select_form(self, count: int, context: MorphologyContext) -> Form:
    return Form.SINGULAR if context.is_terminal else Form.PLAIN


class SuffixRule:
  """Agglutinative bound suffix on the final word of a numeral.

  The suffix goes on the last word of an integer expression in the roles
  listed in `roles`. A scale noun spoken on its own (count elided, nothing
  before it) stays bare in the roles listed in `bare_roles`.
  """

  def __init__(
      self, suffix: str,
      roles: tuple[Role, ...] = (
          Role.STANDALONE, Role.CURRENCY_MAIN, Role.CURRENCY_SUB),
      bare_roles: tuple[Role, ...] = (Role.STANDALONE,),
  ) -> None:
    self._suffix = suffix
    self._roles = roles
    self._bare_roles = bare_roles

  @property
  def suffix(self) -> str:
    return self._suffix

  def applies(
      self, context: MorphologyContext, bare_scale_noun: bool = False
  ) -> bool:
    if context.role not in self._roles:
      return False
    return not (bare_scale_noun and context.role in self._bare_roles)

  def attach(self, text: str) -> str:
    return text + self._suffix if text else text
