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

"""Conversion of a normalized decimal into words.

This is the core entry point. It expects a finite `decimal.Decimal` (see
`normalizer`) and raises `errors.ConversionError` subclasses. It keeps no
state between calls.
"""

import decimal
from typing import Any

from numscribe.core import forms
from numscribe.core import fraction
from numscribe.core import options as options_lib

Role = forms.Role


def render_number(
    absolute: decimal.Decimal,
    options: options_lib.ConversionOptions,
    language: Any,
) -> str:
  """Renders a non-negative decimal as integer part plus fraction digits."""
  lexicon = language.lexicon
  context = language.context(Role.STANDALONE, options)
  text = language.words(int(absolute), context)
  fraction_text = fraction.render_fraction(
      fraction.fraction_digits(absolute),
      language.decimal_word(options.decimal_separator),
      lexicon.digits,
      joiner=lexicon.word_separator)
  return language.join_words(text, fraction_text)


def convert(
    magnitude: decimal.Decimal,
    options: options_lib.ConversionOptions | None,
    language: Any,
) -> str:
  """Converts `magnitude` into words of `language`.

  Args:
    magnitude: Finite signed decimal.
    options: Conversion options, defaults are used if `None`.
    language: Target language.

  Returns:
    The number in words.

  Raises:
    ValueError: if `magnitude` is not finite.
    ScaleOverflow: if the magnitude is beyond the language's scale table.
    UnsupportedMagnitude: if a needed scale word is missing.
  """
  if not magnitude.is_finite():
    raise ValueError(f"Cannot convert non-finite value {magnitude}")
  options = options or options_lib.ConversionOptions()
  language = language.with_options(options)
  if options.format == options_lib.Format.YEAR:
    return language.year_overlay().render(magnitude, options)

  absolute = abs(magnitude)
  if options.currency:
    text = language.currency_overlay().render(absolute, options)
  else:
    text = render_number(absolute, options, language)
  if magnitude < 0:
    prefix = options.negative_prefix
    if prefix is None:
      prefix = language.lexicon.negative_prefix
    text = language.join_words(prefix, text)
  return text
