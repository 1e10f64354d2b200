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

"""Currency unit names.

A `CurrencyInfo` is specified with flat unit names, the way they are usually
listed in dictionaries, and turned into `FormSet`s for the main unit and the
sub unit once, at construction time. The agreement rule of the target
language then picks the slot at formatting time.
"""

import dataclasses

from numscribe.core import forms

Gender = forms.Gender


@dataclasses.dataclass(frozen=True)
class CurrencyInfo:
  """Names of a currency's main unit and sub unit.

  Attributes:
    main_singular: Main unit with a count of one ("dollar").
    main_plural: Unmarked plural ("dollars").
    main_plural_2to4: Paucal for counts ending in 2..4 ("рубля").
    main_plural_genitive: Genitive plural ("рублей").
    main_dual: Dual ("ريالان").
    main_plural_3to10: Paucal for counts 3..10 ("ريالات").
    main_accusative: Accusative singular for counts 11..99 ("ريالًا").
    main_gender: Grammatical gender of the main unit.
    sub_singular: Sub unit with a count of one. Empty if there is no sub unit.
    sub_*: Same slots for the sub unit.
    separator: Conjunction between the main and sub amounts. Defaults to the
      language's conjunction.
  """
  main_singular: str
  main_plural: str | None = None
  main_plural_2to4: str | None = None
  main_plural_genitive: str | None = None
  main_dual: str | None = None
  main_plural_3to10: str | None = None
  main_accusative: str | None = None
  main_gender: Gender = Gender.MASCULINE
  sub_singular: str | None = None
  sub_plural: str | None = None
  sub_plural_2to4: str | None = None
  sub_plural_genitive: str | None = None
  sub_dual: str | None = None
  sub_plural_3to10: str | None = None
  sub_accusative: str | None = None
  sub_gender: Gender = Gender.MASCULINE
  separator: str | None = None
  main_forms: forms.FormSet = dataclasses.field(init=False, repr=False)
  sub_forms: forms.FormSet | None = dataclasses.field(init=False, repr=False)

  def __post_init__(self) -> None:
    main_forms = forms.FormSet(
        singular=self.main_singular,
        dual=self.main_dual,
        paucal_low=self.main_plural_2to4,
        paucal_high=self.main_plural_3to10,
        genitive_plural=self.main_plural_genitive,
        accusative_singular=self.main_accusative,
        plain=self.main_plural,
        gender=self.main_gender,
    )
    sub_forms = None
    if self.sub_singular:
      sub_forms = forms.FormSet(
          singular=self.sub_singular,
          dual=self.sub_dual,
          paucal_low=self.sub_plural_2to4,
          paucal_high=self.sub_plural_3to10,
          genitive_plural=self.sub_plural_genitive,
          accusative_singular=self.sub_accusative,
          plain=self.sub_plural,
          gender=self.sub_gender,
      )
    # Frozen dataclass: derived fields are set once here.
    object.__setattr__(self, "main_forms", main_forms)
    object.__setattr__(self, "sub_forms", sub_forms)


USD = CurrencyInfo(
    main_singular="dollar",
    main_plural="dollars",
    sub_singular="cent",
    sub_plural="cents",
    separator="and",
)

GBP = CurrencyInfo(
    main_singular="pound",
    main_plural="pounds",
    sub_singular="penny",
    sub_plural="pence",
    separator="and",
)

EUR_FR = CurrencyInfo(
    main_singular="euro",
    main_plural="euros",
    sub_singular="centime",
    sub_plural="centimes",
    separator="et",
)

RUB = CurrencyInfo(
    main_singular="рубль",
    main_plural_2to4="рубля",
    main_plural_genitive="рублей",
    main_gender=Gender.MASCULINE,
    sub_singular="копейка",
    sub_plural_2to4="копейки",
    sub_plural_genitive="копеек",
    sub_gender=Gender.FEMININE,
)

SAR = CurrencyInfo(
    main_singular="ريال",
    main_dual="ريالان",
    main_plural_3to10="ريالات",
    main_accusative="ريالًا",
    main_plural="ريالات",
    main_gender=Gender.MASCULINE,
    sub_singular="هللة",
    sub_dual="هللتان",
    sub_plural_3to10="هللات",
    sub_accusative="هللة",
    sub_plural="هللات",
    sub_gender=Gender.FEMININE,
    separator="و",
)

LBP = CurrencyInfo(
    main_singular="ليرة",
    main_dual="ليرتان",
    main_plural_3to10="ليرات",
    main_accusative="ليرة",
    main_plural="ليرات",
    main_gender=Gender.FEMININE,
    sub_singular="قرش",
    sub_dual="قرشان",
    sub_plural_3to10="قروش",
    sub_accusative="قرشًا",
    sub_plural="قروش",
    sub_gender=Gender.MASCULINE,
    separator="و",
)

CNY = CurrencyInfo(
    main_singular="元",
    sub_singular="分",
)

INR = CurrencyInfo(
    main_singular="रुपया",
    main_plural="रुपये",
    sub_singular="पैसा",
    sub_plural="पैसे",
    separator="और",
)

GEL = CurrencyInfo(
    main_singular="ლარი",
    sub_singular="თეთრი",
    separator="და",
)

LKR = CurrencyInfo(
    main_singular="රුපියල",
    main_plural="රුපියල්",
    sub_singular="සතය",
    sub_plural="සත",
)

PREDEFINED = {
    "USD": USD,
    "GBP": GBP,
    "EUR_FR": EUR_FR,
    "RUB": RUB,
    "SAR": SAR,
    "LBP": LBP,
    "CNY": CNY,
    "INR": INR,
    "GEL": GEL,
    "LKR": LKR,
}


def by_code(code: str) -> CurrencyInfo:
  """Looks up a predefined currency.

  Args:
    code: Currency code, case-insensitive ("usd", "EUR_FR").

  Returns:
    Currency info.

  Raises:
    ValueError: if the code is unknown.
  """
  key = code.strip().upper()
  if key not in PREDEFINED:
    raise ValueError(
        f"Unknown currency `{code}`. Known: {', '.join(sorted(PREDEFINED))}")
  return PREDEFINED[key]
