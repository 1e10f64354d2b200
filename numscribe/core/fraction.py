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

"""Digit-by-digit rendering of the fractional part of a number."""

import decimal
from typing import Sequence


def fraction_digits(value: decimal.Decimal) -> str:
  """Returns the digits after the decimal point of `value` as written.

  Args:
    value: Finite decimal.

  Returns:
    Digit string, possibly with trailing zeros ("1.50" -> "50"). Empty if
    the value has no fractional part.
  """
  _, digits, exponent = value.as_tuple()
  if not isinstance(exponent, int) or exponent >= 0:
    return ""
  places = -exponent
  text = "".join(str(digit) for digit in digits)
  return text.rjust(places, "0")[-places:]


def render_fraction(
    digits: str,
    separator_word: str,
    digit_words: Sequence[str],
    joiner: str = " ",
) -> str:
  """Renders a fractional digit string.

  Trailing zeros carry no value and are dropped, so "50" and "5" read the
  same. Each remaining digit is spoken with its plain single-digit word.

  Args:
    digits: Digits after the decimal point.
    separator_word: Word for the decimal separator ("point").
    digit_words: Words for the digits 0..9.
    joiner: Separator between words.

  Returns:
    Separator word followed by the digit words, or the empty string if no
    significant digits are left.

  Raises:
    ValueError: if `digits` contains anything but ASCII digits.
  """
  trimmed = digits.rstrip("0")
  if not trimmed:
    return ""
  if not trimmed.isdigit() or not trimmed.isascii():
    raise ValueError(f"Not a digit string: `{digits}`")
  words = [separator_word]
  words.extend(digit_words[int(digit)] for digit in trimmed)
  return joiner.join(words)
