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

"""Per-call conversion options."""

import dataclasses
import enum

from numscribe.core import currency as currency_lib
from numscribe.core import forms


class Format(enum.Enum):
  PLAIN = "plain"
  YEAR = "year"


class DecimalSeparator(enum.Enum):
  COMMA = "comma"
  PERIOD = "period"
  POINT = "point"


@dataclasses.dataclass(frozen=True)
class ConversionOptions:
  """Options controlling a single conversion.

  Fields left at `None` take the default of the target language.

  Attributes:
    format: Plain number or calendar year.
    currency: Render the number as an amount of money.
    currency_info: Currency to use, defaults to the language's currency.
    decimal_separator: Which word to use for the decimal separator.
    round: Round currency amounts to two decimal places first.
    gender: Gender of the (implicit) counted noun.
    negative_prefix: Word for the minus sign.
    include_era: Add the AD marker to positive years.
  """
  format: Format = Format.PLAIN
  currency: bool = False
  currency_info: currency_lib.CurrencyInfo | None = None
  decimal_separator: DecimalSeparator | None = None
  round: bool = False
  gender: forms.Gender | None = None
  negative_prefix: str | None = None
  include_era: bool = False


@dataclasses.dataclass(frozen=True)
class EnglishOptions(ConversionOptions):
  """English options.

  Attributes:
    include_and: British style "one hundred and five".
  """
  include_and: bool = False
