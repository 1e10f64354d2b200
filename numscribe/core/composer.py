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

"""Composition of rendered scale groups into a full numeral.

The composer walks the non-zero groups from the most significant one down.
For every group it renders the count, picks the inflected scale word, decides
whether the count is elided, and then links the group to the previous one.
All of these decisions are delegated to the language object, which provides
the following hooks:

  system: `NumberingSystem` with the scale table.
  lexicon: `LexiconTable`, only `fusion` is used here.
  render_group(value, context) -> str
  render_scale_count(value, entry, context) -> str
  elides(value, entry, context) -> bool
  attach_scale(numeral, word) -> str
  group_linker(previous, current, context) -> Linker
  finalize(text, groups, context) -> str
"""

import dataclasses
from typing import Any, Sequence

from numscribe.core import forms

MorphologyContext = forms.MorphologyContext
Role = forms.Role


@dataclasses.dataclass(frozen=True)
class RenderedGroup:
  """A group rendered together with its scale word.

  Attributes:
    text: Words of the group.
    value: Group value.
    scale_index: Scale index, zero for the units group.
    elided: The count of the scale word was not spoken.
  """
  text: str
  value: int
  scale_index: int
  elided: bool = False


@dataclasses.dataclass(frozen=True)
class Linker:
  """How a group attaches to the group before it.

  Attributes:
    text: Literal material between the groups, including any spaces.
    connector: If set, the groups are glued by the language's fusion table
      under this connector name and `text` is ignored.
  """
  text: str = " "
  connector: str | None = None


def render_scale_group(
    value: int, scale_index: int, language: Any, context: MorphologyContext
) -> RenderedGroup:
  """Renders one non-zero group and its scale word.

  Args:
    value: Group value.
    scale_index: Scale index of the group.
    language: Language object.
    context: Context of the group. `is_leading` and `is_terminal` describe
      the position of the group in the whole numeral.

  Returns:
    Rendered group.

  Raises:
    UnsupportedMagnitude: if the scale table has no entry for `scale_index`.
  """
  if scale_index == 0:
    return RenderedGroup(language.render_group(value, context), value, 0)
  entry = language.system.scale(scale_index)
  word = entry.rule.inflect(value, entry.forms, context)
  if language.elides(value, entry, context):
    return RenderedGroup(
        language.attach_scale(None, word), value, scale_index, elided=True)
  if value == 1 and entry.one_word:
    numeral = entry.one_word
  else:
    count_context = context.replace(
        target_gender=entry.forms.gender,
        role=Role.SCALE_COUNT,
        is_terminal=entry.closes_numeral,
    )
    numeral = language.render_scale_count(value, entry, count_context)
  return RenderedGroup(
      language.attach_scale(numeral, word), value, scale_index)


def compose(
    groups: Sequence[tuple[int, int]],
    language: Any,
    context: MorphologyContext,
) -> str:
  """Composes chunked groups into words.

  Args:
    groups: (value, scale index) pairs, most significant first.
    language: Language object.
    context: Agreement context of the whole numeral.

  Returns:
    Numeral words.
  """
  nonzero = [(value, index) for value, index in groups if value]
  if not nonzero:
    return language.render_zero(context)
  last = len(nonzero) - 1
  rendered = []
  for position, (value, index) in enumerate(nonzero):
    group_context = context.replace(
        count=value, is_leading=position == 0, is_terminal=position == last)
    rendered.append(render_scale_group(value, index, language, group_context))

  text = rendered[0].text
  for previous, current in zip(rendered, rendered[1:]):
    linker = language.group_linker(previous, current, context)
    if linker.connector:
      text = language.lexicon.fusion.join(text, linker.connector, current.text)
    else:
      text = f"{text}{linker.text}{current.text}"
  return language.finalize(text, rendered, context)
