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

"""Pytest setup for the absltest-based test modules."""

import os
import sys

from absl import flags
# Defines `--test_tmpdir` and `--test_srcdir`.
from absl.testing import absltest  # pylint: disable=unused-import
import pytest


@pytest.fixture(scope="session", autouse=True)
def parse_absl_flags() -> None:
  """Parses absl flags once so that flag values can be read in tests."""
  # Pytest's own arguments are not absl flags.
  flags.FLAGS(sys.argv[:1])
  tmpdir = flags.FLAGS.test_tmpdir
  if not os.path.exists(tmpdir):
    os.makedirs(tmpdir)
