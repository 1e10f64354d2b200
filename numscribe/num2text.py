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

"""Library entry point: numbers to words in a selected language.

Example:

  converter = num2text.Num2Text(lang=registry.Lang.RU)
  converter.convert(21)  # "двадцать один"
  converter.convert(
      2.5, options.ConversionOptions(currency=True))  # "два рубля ..."
"""

from typing import Any

from absl import logging

from numscribe.core import engine
from numscribe.core import errors
from numscribe.core import normalizer
from numscribe.core import options as options_lib
from numscribe.languages import base
from numscribe.languages import registry

Lang = registry.Lang


class Num2Text:
  """Converts numbers to words.

  Infinities are rendered with the language's infinity literal. Input that is
  not a number (NaN, garbage strings, `None`) gives `fallback_on_error` or
  the language's "not a number" literal. Conversion errors (numbers beyond the
  scale table) give `fallback_on_error` if one is set and are raised
  otherwise.
  """

  def __init__(
      self,
      lang: Lang = Lang.EN,
      fallback_on_error: str | None = None,
  ) -> None:
    self._lang = lang
    self._fallback_on_error = fallback_on_error

  @property
  def current_lang(self) -> Lang:
    return self._lang

  @property
  def language(self) -> base.Language:
    return registry.get_language(self._lang)

  def set_lang(self, lang: Lang) -> None:
    logging.debug("Switching language from %s to %s", self._lang, lang)
    self._lang = lang

  def set_lang_by_code(
      self,
      code: str,
      fallback_to_default: bool = False,
      default_lang: Lang = Lang.EN,
  ) -> None:
    """Selects the language by ISO code.

    Args:
      code: Language code or locale, e.g. "ru" or "en-GB".
      fallback_to_default: Use `default_lang` for unknown codes rather than
        raising.
      default_lang: Language to fall back on.

    Raises:
      ValueError: if the code is unknown and `fallback_to_default` is off.
    """
    lang = Lang.from_code(code)
    if lang is None:
      if not fallback_to_default:
        raise ValueError(
            f"Unsupported language code `{code}`. Supported: "
            f"{', '.join(registry.supported_codes())}")
      logging.warning(
          "Unsupported language code `%s`, using %s", code, default_lang.value)
      lang = default_lang
    self.set_lang(lang)

  def set_lang_by_code_safe(self, code: str) -> bool:
    """Like `set_lang_by_code` but reports failure instead of raising."""
    lang = Lang.from_code(code)
    if lang is None:
      return False
    self.set_lang(lang)
    return True

  def convert(
      self, number: Any,
      options: options_lib.ConversionOptions | None = None
  ) -> str:
    """Converts `number` to words.

    Args:
      number: `int`, `float`, `str` or `decimal.Decimal`.
      options: Conversion options.

    Returns:
      The number in words.

    Raises:
      ConversionError: if the number cannot be converted and no fallback
        string was configured.
    """
    language = self.language
    lexicon = language.lexicon
    sign = normalizer.infinity_sign(number)
    if sign:
      return lexicon.infinity if sign > 0 else lexicon.negative_infinity
    value = normalizer.normalize(number)
    if value is None:
      logging.warning("Not a number: %r", number)
      if self._fallback_on_error is not None:
        return self._fallback_on_error
      return lexicon.not_a_number
    try:
      return engine.convert(value, options, language)
    except errors.ConversionError as e:
      if self._fallback_on_error is None:
        raise
      logging.warning("Failed to convert %s to %s: %s", value, language.code, e)
      return self._fallback_on_error

  __call__ = convert
