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

"""Holds the loaded emoji and provides search functions.

An EmojiManager indexes a list of Emoji by tag and alias and builds the
trie used to find emoji in text.  It does not change after construction, so
one instance can be shared freely.

The module level functions use a default manager built from the configured
catalog the first time one of them is called.  If building it fails the
error is kept and raised again by every later call.
"""

import logging
import threading

from emojitools import emoji_loader
from emojitools import emoji_parser
from emojitools import similarity
from emojitools.emoji_trie import EmojiTrie

logger = logging.getLogger(__name__)

# Tag holding the emoji that have no tags.
TAG_NONE = '_none'

ALIAS_DELIMITER = ':'


def trim_alias(alias):
  """Strip one leading and one trailing ':' if present."""
  result = alias
  if result.startswith(ALIAS_DELIMITER):
    result = result[1:]
  if result.endswith(ALIAS_DELIMITER):
    result = result[:-1]
  return result


class EmojiManager(object):

  def __init__(self, emojis):
    emojis = list(emojis)
    emojis_by_tag = {}
    emojis_by_tag_alias = {TAG_NONE: {}}

    for emoji in emojis:
      for tag in emoji.tags:
        emojis_by_tag.setdefault(tag, set()).add(emoji)
        emojis_by_tag_alias.setdefault(tag, {})

    for emoji in emojis:
      for tag in emoji.tags or (TAG_NONE,):
        alias_map = emojis_by_tag_alias[tag]
        for alias in emoji.aliases:
          alias_map[alias] = emoji

    self.trie = EmojiTrie(emojis)
    self._emojis_by_tag = emojis_by_tag
    self._emojis_by_tag_alias = emojis_by_tag_alias
    # longest sequences first
    self._all_emojis = tuple(
        sorted(emojis, key=lambda e: len(e.unicode), reverse=True))
    logger.debug(
        'indexed %d emoji under %d tags', len(emojis), len(emojis_by_tag))

  def get_for_tag(self, tag):
    """Return the set of Emoji for tag, or None if the tag is unknown."""
    if tag is None:
      return None
    emojis = self._emojis_by_tag.get(tag)
    return None if emojis is None else frozenset(emojis)

  def get_all_tags(self):
    return frozenset(self._emojis_by_tag)

  def get_all(self):
    """All emoji, longest sequences first."""
    return self._all_emojis

  def get_by_unicode(self, unicode):
    if unicode is None:
      return None
    return self.trie.get_emoji(unicode)

  def get_for_alias(self, alias):
    """Return the Emoji for alias under any tag, or None.

    If the alias is used under several tags for different emoji, which one
    is returned is not defined."""
    if not alias:
      return None
    alias = trim_alias(alias)
    for alias_map in self._emojis_by_tag_alias.values():
      emoji = alias_map.get(alias)
      if emoji is not None:
        return emoji
    return None

  def get_for_alias_with_tag(self, alias, tag):
    if not alias:
      return None
    alias_map = self._emojis_by_tag_alias.get(tag)
    if alias_map is None:
      return None
    return alias_map.get(trim_alias(alias))

  def get_for_alias_with_similarity(self, alias, algorithm, threshold):
    """Return the Emoji for alias, or failing that for the closest alias
    under any tag.

    threshold is the similarity required, as a fraction of the length of
    alias from 0.0 to 1.0."""
    if not alias:
      return None
    similarity.check_algorithm(algorithm)
    emoji = self.get_for_alias(alias)
    if emoji is not None:
      return emoji

    aliases = set()
    for alias_map in self._emojis_by_tag_alias.values():
      aliases.update(alias_map)
    closest = similarity.get_closest_string(
        aliases, trim_alias(alias), algorithm, threshold)
    return self.get_for_alias(closest)

  def get_for_alias_with_tag_and_similarity(
      self, alias, tag, algorithm, threshold):
    """Like get_for_alias_with_similarity, limited to the aliases under tag.
    An unknown tag returns None."""
    if not alias:
      return None
    alias_map = self._emojis_by_tag_alias.get(tag)
    if alias_map is None:
      return None
    trimmed = trim_alias(alias)
    similarity.check_algorithm(algorithm)
    emoji = alias_map.get(trimmed)
    if emoji is not None:
      return emoji

    closest = similarity.get_closest_string(
        alias_map.keys(), trimmed, algorithm, threshold)
    return alias_map.get(closest) if closest is not None else None

  def classify(self, sequence):
    """Return the Matches value for sequence against the catalog."""
    return self.trie.is_emoji(sequence)

  def is_emoji(self, string):
    """True if string is exactly one emoji, with its modifier if any."""
    if not string:
      return False
    candidate = emoji_parser.get_next_unicode_candidate(string, 0, self.trie)
    return (candidate is not None and
            candidate.emoji_start_index == 0 and
            candidate.fitzpatrick_end_index == len(string))

  def contains_emoji(self, string):
    if not string:
      return False
    return emoji_parser.get_next_unicode_candidate(
        string, 0, self.trie) is not None

  def is_only_emojis(self, string):
    """True if string is made of emoji and nothing else.  The empty string
    counts."""
    if string is None:
      return False
    end = 0
    for candidate in emoji_parser.get_unicode_candidates(string, self.trie):
      if candidate.emoji_start_index != end:
        return False
      end = candidate.fitzpatrick_end_index
    return end == len(string)


_default_manager = None
_default_error = None
_default_lock = threading.Lock()


def get_default_manager():
  """Return the process-wide manager, building it on first use."""
  global _default_manager, _default_error

  manager = _default_manager
  if manager is not None:
    return manager
  with _default_lock:
    if _default_manager is None:
      if _default_error is not None:
        raise emoji_loader.EmojiDataError(
            'emoji data failed to load earlier: %s' % _default_error)
      try:
        _default_manager = EmojiManager(emoji_loader.load_default_emojis())
      except emoji_loader.EmojiDataError as e:
        _default_error = e
        logger.error('could not load emoji data: %s', e)
        raise
    return _default_manager


def get_for_tag(tag):
  return get_default_manager().get_for_tag(tag)


def get_all_tags():
  return get_default_manager().get_all_tags()


def get_all():
  return get_default_manager().get_all()


def get_by_unicode(unicode):
  return get_default_manager().get_by_unicode(unicode)


def get_for_alias(alias):
  return get_default_manager().get_for_alias(alias)


def get_for_alias_with_tag(alias, tag):
  return get_default_manager().get_for_alias_with_tag(alias, tag)


def get_for_alias_with_similarity(alias, algorithm, threshold):
  return get_default_manager().get_for_alias_with_similarity(
      alias, algorithm, threshold)


def get_for_alias_with_tag_and_similarity(alias, tag, algorithm, threshold):
  return get_default_manager().get_for_alias_with_tag_and_similarity(
      alias, tag, algorithm, threshold)


def classify(sequence):
  return get_default_manager().classify(sequence)


def is_emoji(string):
  return get_default_manager().is_emoji(string)


def contains_emoji(string):
  return get_default_manager().contains_emoji(string)


def is_only_emojis(string):
  return get_default_manager().is_only_emojis(string)
