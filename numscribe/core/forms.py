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

"""Grammatical forms of counted nouns and the agreement context.

A `FormSet` holds the inflected variants of a single noun (a scale word such
as "thousand" or a currency unit such as "ruble"). Agreement rules pick one
of the `Form` slots and the form set resolves it to a string.
"""

import dataclasses
import enum

from numscribe.core import errors


class Form(enum.Enum):
  """Closed set of inflection slots used in numeral agreement."""
  SINGULAR = "singular"
  DUAL = "dual"
  PAUCAL_LOW = "paucal_low"  # Counts ending in 2..4.
  PAUCAL_HIGH = "paucal_high"  # Counts 3..10.
  GENITIVE_PLURAL = "genitive_plural"
  ACCUSATIVE_SINGULAR = "accusative_singular"
  PLAIN = "plain"  # Unmarked plural.


class Gender(enum.Enum):
  MASCULINE = "masculine"
  FEMININE = "feminine"
  NEUTER = "neuter"
  NONE = "none"


def opposite_gender(gender: Gender) -> Gender:
  if gender == Gender.MASCULINE:
    return Gender.FEMININE
  if gender == Gender.FEMININE:
    return Gender.MASCULINE
  return gender


class Role(enum.Enum):
  """What a numeral is doing in the output."""
  STANDALONE = "standalone"
  SCALE_COUNT = "scale_count"
  CURRENCY_MAIN = "currency_main"
  CURRENCY_SUB = "currency_sub"
  YEAR = "year"


# Order in which undefined slots are substituted.
FALLBACK_CHAIN = (Form.GENITIVE_PLURAL, Form.PLAIN, Form.SINGULAR)


@dataclasses.dataclass(frozen=True)
class FormSet:
  """Inflected forms of a single noun.

  Only `singular` is mandatory. Undefined slots are `None`.
  """
  singular: str
  dual: str | None = None
  paucal_low: str | None = None
  paucal_high: str | None = None
  genitive_plural: str | None = None
  accusative_singular: str | None = None
  plain: str | None = None
  gender: Gender = Gender.MASCULINE

  def get(self, form: Form) -> str | None:
    return getattr(self, form.value)

  def resolve(self, form: Form, strict: bool = False) -> str:
    """Returns the string for `form`.

    Args:
      form: Requested slot.
      strict: If enabled, an undefined slot is an error rather than being
        substituted along `FALLBACK_CHAIN`.

    Returns:
      Inflected noun.

    Raises:
      MissingUnitForm: in strict mode, if the slot is undefined.
    """
    value = self.get(form)
    if value is not None:
      return value
    if strict:
      raise errors.MissingUnitForm(form.value, self.singular)
    for fallback in FALLBACK_CHAIN:
      value = self.get(fallback)
      if value is not None:
        return value
    return self.singular


@dataclasses.dataclass(frozen=True)
class MorphologyContext:
  """Per-call agreement context.

  Attributes:
    count: The number governing agreement.
    target_gender: Gender the numeral must agree with.
    apply_polarity: Whether gender polarity (3..10) is in force.
    role: What the numeral is doing.
    is_leading: The numeral starts the whole number.
    is_terminal: Nothing follows this word in the numeral.
  """
  count: int = 0
  target_gender: Gender = Gender.MASCULINE
  apply_polarity: bool = False
  role: Role = Role.STANDALONE
  is_leading: bool = True
  is_terminal: bool = True

  def replace(self, **changes) -> "MorphologyContext":
    return dataclasses.replace(self, **changes)
