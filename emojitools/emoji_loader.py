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

"""Load the emoji catalog.

The catalog is a json array of objects like:

  {"emoji": "\\ud83d\\ude04", "description": "smiling face with open mouth and
   smiling eyes", "supports_fitzpatrick": false, "aliases": ["smile"],
   "tags": ["happy", "joy", "pleased"]}

'supports_fitzpatrick' and 'tags' are optional.  Rows without an 'emoji'
string are placeholders and are skipped.
"""

import io
import json
import logging
from os import path

from emojitools import emojiconfig
from emojitools.emoji import Emoji

logger = logging.getLogger(__name__)

_DATA_DIR_PATH = path.join(path.abspath(path.dirname(__file__)), 'data')
DEFAULT_CATALOG = path.join(_DATA_DIR_PATH, 'emojis.json')


class EmojiDataError(ValueError):
  """The catalog could not be read or is malformed."""


def _string_list(entry, key, index):
  value = entry.get(key, [])
  if not isinstance(value, list) or not all(
      isinstance(v, str) for v in value):
    raise EmojiDataError(
        'entry %d: "%s" must be a list of strings, got %r' % (
            index, key, value))
  return value


def build_emoji(entry, index=0):
  """Convert one catalog entry to an Emoji, or None for placeholder rows."""
  if not isinstance(entry, dict):
    raise EmojiDataError('entry %d is not an object: %r' % (index, entry))

  unicode = entry.get('emoji')
  if not unicode or not isinstance(unicode, str):
    logger.debug('skipping entry %d, no emoji', index)
    return None

  aliases = _string_list(entry, 'aliases', index)
  if not aliases:
    raise EmojiDataError('entry %d (%s) has no aliases' % (index, unicode))
  tags = _string_list(entry, 'tags', index)

  supports_fitzpatrick = entry.get('supports_fitzpatrick', False)
  if not isinstance(supports_fitzpatrick, bool):
    raise EmojiDataError(
        'entry %d (%s): supports_fitzpatrick must be a boolean' % (
            index, aliases[0]))

  description = entry.get('description') or ''
  return Emoji(description, supports_fitzpatrick, aliases, tags, unicode)


def load_emojis(stream):
  """Read the catalog from a text or binary stream and return the list of
  Emoji in catalog order.

  Duplicate sequences are kept, with a warning; whoever indexes them
  later gets last-write-wins behavior."""
  try:
    data = json.load(stream)
  except ValueError as e:
    raise EmojiDataError('emoji catalog is not valid json: %s' % e)
  if not isinstance(data, list):
    raise EmojiDataError(
        'emoji catalog must be a json array, got %s' % type(data).__name__)

  result = []
  seen = {}
  for i, entry in enumerate(data):
    emoji = build_emoji(entry, i)
    if emoji is None:
      continue
    if emoji.unicode in seen:
      logger.warning(
          'already have data for sequence %s (%s), replaced by %s',
          emoji.unicode, seen[emoji.unicode], emoji.aliases[0])
    seen[emoji.unicode] = emoji.aliases[0]
    result.append(emoji)
  return result


def load_emojis_from_path(filepath):
  try:
    with io.open(filepath, 'r', encoding='utf-8') as f:
      emojis = load_emojis(f)
  except (IOError, OSError) as e:
    raise EmojiDataError('could not read emoji catalog %s: %s' % (filepath, e))
  logger.info('loaded %d emoji from %s', len(emojis), filepath)
  return emojis


def load_default_emojis():
  """Load the catalog named by the 'emoji_catalog' config entry, or the
  packaged one."""
  return load_emojis_from_path(emojiconfig.emoji_catalog(DEFAULT_CATALOG))
