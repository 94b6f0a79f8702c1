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

"""Prefix tree over emoji sequences, one code point per edge."""

import enum


class Matches(enum.Enum):
    """Classification of a whole sequence against the trie."""
    EXACTLY = 'exactly'
    POSSIBLY = 'possibly'
    IMPOSSIBLE = 'impossible'

    def exact_match(self):
        return self is Matches.EXACTLY

    def impossible_match(self):
        return self is Matches.IMPOSSIBLE


class _Node(object):
    __slots__ = ('children', 'emoji')

    def __init__(self):
        self.children = {}
        self.emoji = None

    def is_end_of_emoji(self):
        return self.emoji is not None


class EmojiTrie(object):
    """Trie built from a list of Emoji.

    Nodes only reference the Emoji, the list passed in owns them.  If two
    emoji share a sequence the one inserted last is the one found.
    """

    def __init__(self, emojis):
        self.root = _Node()
        self.max_depth = 0
        for emoji in emojis:
            self._add(emoji)

    def _add(self, emoji):
        node = self.root
        for c in emoji.unicode:
            child = node.children.get(c)
            if child is None:
                child = node.children[c] = _Node()
            node = child
        node.emoji = emoji
        self.max_depth = max(self.max_depth, len(emoji.unicode))

    def _find_node(self, sequence):
        node = self.root
        for c in sequence:
            node = node.children.get(c)
            if node is None:
                return None
        return node

    def is_emoji(self, sequence):
        """Classify sequence (a string or a sequence of characters).

        Returns Matches.EXACTLY if the sequence is an emoji, Matches.POSSIBLY
        if it is a strict prefix of one, and Matches.IMPOSSIBLE otherwise.
        """
        if sequence is None:
            return Matches.IMPOSSIBLE

        node = self._find_node(sequence)
        if node is None:
            return Matches.IMPOSSIBLE
        if node.is_end_of_emoji():
            return Matches.EXACTLY
        if node.children:
            return Matches.POSSIBLY
        # only the root of an empty trie gets here
        return Matches.IMPOSSIBLE

    def get_emoji(self, unicode):
        """Return the Emoji for exactly this sequence, or None."""
        if not unicode:
            return None
        node = self._find_node(unicode)
        return None if node is None else node.emoji

    def longest_match(self, text, start=0):
        """Walk the trie over text from index start.

        Returns a tuple of (emoji, end) for the longest emoji sequence
        beginning at start, with end exclusive, or None.  Longest rather than
        first, since some sequences are prefixes of others (e.g. a symbol and
        the same symbol followed by the emoji variation selector).
        """
        best = None
        node = self.root
        i = start
        # no emoji is longer than max_depth
        stop = min(len(text), start + self.max_depth)
        while i < stop:
            node = node.children.get(text[i])
            if node is None:
                break
            i += 1
            if node.is_end_of_emoji():
                best = (node.emoji, i)
        return best

    def __len__(self):
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_end_of_emoji():
                count += 1
            stack.extend(node.children.values())
        return count
