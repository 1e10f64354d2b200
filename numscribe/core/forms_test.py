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

from absl.testing import absltest
from absl.testing import parameterized
from numscribe.core import errors
from numscribe.core import forms as lib

Form = lib.Form
Gender = lib.Gender

_RUBLE = lib.FormSet(
    singular="рубль", paucal_low="рубля", genitive_plural="рублей")


class FormSetTest(parameterized.TestCase):

  def test_defined_slots(self) -> None:
    self.assertEqual(_RUBLE.resolve(Form.SINGULAR), "рубль")
    self.assertEqual(_RUBLE.resolve(Form.PAUCAL_LOW), "рубля")
    self.assertEqual(_RUBLE.resolve(Form.GENITIVE_PLURAL), "рублей")
    self.assertIsNone(_RUBLE.get(Form.DUAL))

  def test_fallback_chain(self) -> None:
    # Genitive plural comes first.
    self.assertEqual(_RUBLE.resolve(Form.DUAL), "рублей")
    dollar = lib.FormSet(singular="dollar", plain="dollars")
    self.assertEqual(dollar.resolve(Form.GENITIVE_PLURAL), "dollars")
    self.assertEqual(dollar.resolve(Form.ACCUSATIVE_SINGULAR), "dollars")
    yuan = lib.FormSet(singular="元")
    for form in Form:
      self.assertEqual(yuan.resolve(form), "元")

  @parameterized.parameters(
      Form.DUAL, Form.PAUCAL_HIGH, Form.ACCUSATIVE_SINGULAR, Form.PLAIN)
  def test_strict(self, form: Form) -> None:
    with self.assertRaises(errors.MissingUnitForm) as context:
      _RUBLE.resolve(form, strict=True)
    self.assertEqual(context.exception.form, form.value)
    self.assertEqual(context.exception.noun, "рубль")

  def test_default_gender(self) -> None:
    self.assertEqual(_RUBLE.gender, Gender.MASCULINE)


class MorphologyContextTest(absltest.TestCase):

  def test_defaults(self) -> None:
    context = lib.MorphologyContext()
    self.assertEqual(context.count, 0)
    self.assertEqual(context.role, lib.Role.STANDALONE)
    self.assertTrue(context.is_leading)
    self.assertTrue(context.is_terminal)
    self.assertFalse(context.apply_polarity)

  def test_replace(self) -> None:
    context = lib.MorphologyContext(target_gender=Gender.FEMININE)
    changed = context.replace(count=3, is_terminal=False)
    self.assertEqual(changed.count, 3)
    self.assertFalse(changed.is_terminal)
    self.assertEqual(changed.target_gender, Gender.FEMININE)
    # The original is untouched.
    self.assertEqual(context.count, 0)
    self.assertTrue(context.is_terminal)

  def test_opposite_gender(self) -> None:
    self.assertEqual(
        lib.opposite_gender(Gender.MASCULINE), Gender.FEMININE)
    self.assertEqual(
        lib.opposite_gender(Gender.FEMININE), Gender.MASCULINE)
    self.assertEqual(lib.opposite_gender(Gender.NEUTER), Gender.NEUTER)


if __name__ == "__main__":
  absltest.main()
