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

"""Normalization of user input to `decimal.Decimal`."""

import decimal
import math
from typing import Any


def _parse_string(text: str) -> decimal.Decimal | None:
  text = text.strip()
  if not text:
    return None
  try:
    return decimal.Decimal(text)
  except decimal.InvalidOperation:
    return None


def infinity_sign(number: Any) -> int:
  """Returns 1 or -1 for positive or negative infinity, 0 otherwise."""
  if isinstance(number, bool):
    return 0
  if isinstance(number, float):
    if math.isinf(number):
      return 1 if number > 0 else -1
    return 0
  if isinstance(number, str):
    number = _parse_string(number)
  if isinstance(number, decimal.Decimal) and number.is_infinite():
    return -1 if number.is_signed() else 1
  return 0


def normalize(number: Any) -> decimal.Decimal | None:
  """Converts `number` to a finite decimal.

  Floats go through their shortest decimal representation, so 0.1 stays 0.1.

  Args:
    number: An `int`, `float`, `str` or `decimal.Decimal`.

  Returns:
    Finite decimal, or `None` for anything that is not a finite number
    (`None`, booleans, NaN, infinities, unparsable strings, other types).
  """
  if number is None or isinstance(number, bool):
    return None
  if isinstance(number, int):
    return decimal.Decimal(number)
  if isinstance(number, float):
    if math.isnan(number) or math.isinf(number):
      return None
    return decimal.Decimal(repr(number))
  if isinstance(number, str):
    number = _parse_string(number)
  if isinstance(number, decimal.Decimal):
    return number if number.is_finite() else None
  return None
