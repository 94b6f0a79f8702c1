# Copyright 2026 Emoji Tools Authors. All rights reserved.
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

"""Some common utilities for tools to use."""

import logging


def seq_to_string(seq, sep=' '):
  """Return a string of 'U+XXXX' code points for the characters of seq."""
  return sep.join('U+%04X' % ord(c) for c in seq)


def setup_logging(loglevel):
  """Set up logging to stream to stderr.

  The loglevel is a logging level name or a level value (int or string).
  Returns false if the level is not recognized."""

  try:
    loglevel = int(loglevel)
  except ValueError:
    loglevel = getattr(logging, loglevel.upper(), loglevel)
  if not isinstance(loglevel, int):
    print('Could not set log level, should be one of debug, info, warning, '
          'error, critical, or a numeric value')
    return False
  logging.basicConfig(level=loglevel)
  return True
