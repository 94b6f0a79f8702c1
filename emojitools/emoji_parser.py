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

"""Locate emoji in text.

Indices are indices into the python string, so one per code point.  A match
is the longest catalogued sequence starting at the first position where any
sequence starts, followed by a skin tone modifier if the emoji takes one.
"""

import collections

from emojitools.emoji import Fitzpatrick


class UnicodeCandidate(collections.namedtuple(
    'UnicodeCandidate',
    'emoji, emoji_start_index, emoji_end_index, fitzpatrick, '
    'fitzpatrick_end_index')):
  """An emoji found in a text.  emoji_end_index covers the base sequence
  only; fitzpatrick_end_index equals it when there is no modifier."""
  __slots__ = ()

  @property
  def fitzpatrick_start_index(self):
    return self.emoji_end_index

  @property
  def has_fitzpatrick(self):
    return self.fitzpatrick is not None

  @property
  def fitzpatrick_unicode(self):
    return self.fitzpatrick.value if self.fitzpatrick else None

  @property
  def fitzpatrick_type(self):
    """Lower case modifier name such as 'type_3', or ''."""
    return self.fitzpatrick.name.lower() if self.fitzpatrick else ''

  @property
  def unicode(self):
    return self.emoji.get_unicode(self.fitzpatrick)


def _default_trie():
  # emoji_manager uses this module, so import it late
  from emojitools import emoji_manager
  return emoji_manager.get_default_manager().trie


def get_next_unicode_candidate(text, start=0, trie=None):
  """Return the first UnicodeCandidate at or after index start, or None.

  This keeps no state; callers scanning a whole text resume at the returned
  candidate's fitzpatrick_end_index."""
  if not text or start >= len(text):
    return None
  if trie is None:
    trie = _default_trie()

  for i in range(max(start, 0), len(text)):
    match = trie.longest_match(text, i)
    if match is None:
      continue
    emoji, end = match
    fitzpatrick = None
    if emoji.supports_fitzpatrick and end < len(text):
      fitzpatrick = Fitzpatrick.from_unicode(text[end])
    fitzpatrick_end = end + 1 if fitzpatrick else end
    return UnicodeCandidate(emoji, i, end, fitzpatrick, fitzpatrick_end)
  return None


def get_unicode_candidates(text, trie=None):
  """Yield the non-overlapping candidates in text, left to right."""
  if trie is None:
    trie = _default_trie()
  candidate = get_next_unicode_candidate(text, 0, trie)
  while candidate is not None:
    yield candidate
    candidate = get_next_unicode_candidate(
        text, candidate.fitzpatrick_end_index, trie)


def extract_emojis(text, trie=None):
  """Return the emoji in text, modifiers included, in order."""
  return [c.unicode for c in get_unicode_candidates(text, trie)]
