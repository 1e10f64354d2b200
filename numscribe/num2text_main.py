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

r"""Prints numbers in words.

Example:
--------
  python -m numscribe.num2text_main --lang=ru --currency 1234.56 21
"""

from typing import Sequence

from absl import app
from absl import flags
from absl import logging

from numscribe import num2text
from numscribe.core import currency
from numscribe.core import forms
from numscribe.core import options as options_lib

_LANG = flags.DEFINE_string(
    "lang", "en",
    "Language code, e.g. `en`, `ru` or `zh-CN`."
)

_CURRENCY = flags.DEFINE_bool(
    "currency", False,
    "Render the numbers as amounts of money."
)

_CURRENCY_CODE = flags.DEFINE_string(
    "currency_code", None,
    "Currency to use instead of the language's default, e.g. `USD` or `RUB`. "
    "Implies `--currency`."
)

_YEAR = flags.DEFINE_bool(
    "year", False,
    "Read the numbers as calendar years."
)

_INCLUDE_ERA = flags.DEFINE_bool(
    "include_era", False,
    "Add the era marker to positive years."
)

_DECIMAL_SEPARATOR = flags.DEFINE_enum_class(
    "decimal_separator", None, options_lib.DecimalSeparator,
    "Word for the decimal separator. Defaults to the language's usual one."
)

_ROUND = flags.DEFINE_bool(
    "round", False,
    "Round currency amounts to two decimal places."
)

_NEGATIVE_PREFIX = flags.DEFINE_string(
    "negative_prefix", None,
    "Word to use for the minus sign."
)

_GENDER = flags.DEFINE_enum_class(
    "gender", None, forms.Gender,
    "Gender of the counted noun for languages with gendered numerals."
)

_INCLUDE_AND = flags.DEFINE_bool(
    "include_and", False,
    "English only: British style `one hundred and five`."
)

_FALLBACK = flags.DEFINE_string(
    "fallback", None,
    "String to print for numbers that cannot be converted."
)

FLAGS = flags.FLAGS


def options_from_flags() -> options_lib.ConversionOptions:
  """Builds conversion options from the command-line flags."""
  currency_info = None
  if _CURRENCY_CODE.value:
    currency_info = currency.by_code(_CURRENCY_CODE.value)
  return options_lib.EnglishOptions(
      format=(
          options_lib.Format.YEAR if _YEAR.value else options_lib.Format.PLAIN
      ),
      currency=_CURRENCY.value or currency_info is not None,
      currency_info=currency_info,
      decimal_separator=_DECIMAL_SEPARATOR.value,
      round=_ROUND.value,
      gender=_GENDER.value,
      negative_prefix=_NEGATIVE_PREFIX.value,
      include_era=_INCLUDE_ERA.value,
      include_and=_INCLUDE_AND.value,
  )


def main(argv: Sequence[str]) -> None:
  if len(argv) < 2:
    raise app.UsageError("Specify one or more numbers to convert.")

  converter = num2text.Num2Text(fallback_on_error=_FALLBACK.value)
  try:
    converter.set_lang_by_code(_LANG.value)
    options = options_from_flags()
  except ValueError as e:
    raise app.UsageError(str(e)) from e
  logging.info("Converting %d numbers to `%s` ...",
               len(argv) - 1, converter.current_lang.value)
  for number in argv[1:]:
    print(converter.convert(number, options))


def run() -> None:
  app.run(main)


if __name__ == "__main__":
  run()
