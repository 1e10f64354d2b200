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

"""Registry of supported languages."""

import enum

from numscribe.languages import arabic
from numscribe.languages import base
from numscribe.languages import chinese
from numscribe.languages import english
from numscribe.languages import french
from numscribe.languages import georgian
from numscribe.languages import hindi
from numscribe.languages import russian
from numscribe.languages import sinhala


class Lang(enum.Enum):
  """Supported languages, keyed by ISO 639-1 code."""
  AR = "ar"
  EN = "en"
  FR = "fr"
  HI = "hi"
  KA = "ka"
  RU = "ru"
  SI = "si"
  ZH = "zh"

  @classmethod
  def from_code(cls, code: str) -> "Lang | None":
    """Finds a language by code.

    Only the primary subtag is considered, so "en-US", "en_GB" and "EN" all
    give English.

    Args:
      code: Language code or locale.

    Returns:
      The language, or `None` if the code is not supported.
    """
    primary = code.strip().replace("_", "-").split("-")[0].lower()
    for lang in cls:
      if lang.value == primary:
        return lang
    return None


_LANGUAGES = {
    Lang.AR: arabic.ARABIC,
    Lang.EN: english.ENGLISH,
    Lang.FR: french.FRENCH,
    Lang.HI: hindi.HINDI,
    Lang.KA: georgian.GEORGIAN,
    Lang.RU: russian.RUSSIAN,
    Lang.SI: sinhala.SINHALA,
    Lang.ZH: chinese.CHINESE,
}


def get_language(lang: Lang) -> base.Language:
  return _LANGUAGES[lang]


def supported_codes() -> list[str]:
  return sorted(lang.value for lang in Lang)
