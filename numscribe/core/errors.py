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

"""Errors raised by the conversion engine.

The engine never produces its own error text. Callers catch these and decide
what to render (typically a user supplied fallback string).
"""


class ConversionError(Exception):  # pylint: disable=g-bad-exception-name
  pass


class ScaleOverflow(ConversionError):  # pylint: disable=g-bad-exception-name
  """Magnitude needs a scale group beyond the end of the scale table."""

  def __init__(self, magnitude: int, max_scale_index: int) -> None:
    super().__init__(
        f"Magnitude {magnitude} needs more than {max_scale_index} scale "
        "groups"
    )
    self.magnitude = magnitude
    self.max_scale_index = max_scale_index


class UnsupportedMagnitude(  # pylint: disable=g-bad-exception-name
    ConversionError
):
  """A non-zero group falls on a scale index with no scale entry."""

  def __init__(self, scale_index: int) -> None:
    super().__init__(f"No scale word defined for scale index {scale_index}")
    self.scale_index = scale_index


class MissingUnitForm(ConversionError):  # pylint: disable=g-bad-exception-name
  """A strict form lookup hit an undefined slot of a form set."""

  def __init__(self, form: str, noun: str) -> None:
    super().__init__(f"Form `{form}` is not defined for `{noun}`")
    self.form = form
    self.noun = noun
