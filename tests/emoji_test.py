#!/usr/bin/env python
#
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

"""Tests for emoji.py."""

import unittest

from emojitools import emoji
from emojitools.emoji import Emoji, Fitzpatrick, UnsupportedFitzpatrickError

THUMBSUP = Emoji(
    'thumbs up sign', True, ['+1', 'thumbsup'], ['approve'], u'\U0001f44d')
SMILE = Emoji('smiling face', False, ['smile'], ['happy'], u'\U0001f604')


class EmojiTest(unittest.TestCase):
    def test_fields(self):
        self.assertEqual(('+1', 'thumbsup'), THUMBSUP.aliases)
        self.assertEqual(('approve',), THUMBSUP.tags)
        self.assertTrue(THUMBSUP.supports_fitzpatrick)
        self.assertEqual(u'\U0001f44d', str(THUMBSUP))

    def test_value_equality(self):
        same = Emoji('thumbs up sign', 1, ('+1', 'thumbsup'), ('approve',),
                     u'\U0001f44d')
        self.assertEqual(THUMBSUP, same)
        self.assertEqual(1, len(set([THUMBSUP, same])))

    def test_html(self):
        self.assertEqual('&#128077;', THUMBSUP.html_decimal)
        self.assertEqual('&#x1f44d;', THUMBSUP.html_hexadecimal)
        flag = Emoji('flag', False, ['us'], [], u'\U0001f1fa\U0001f1f8')
        self.assertEqual('&#127482;&#127480;', flag.html_decimal)

    def test_get_unicode(self):
        self.assertEqual(u'\U0001f44d', THUMBSUP.get_unicode())
        self.assertEqual(u'\U0001f44d\U0001f3ff',
                         THUMBSUP.get_unicode(Fitzpatrick.TYPE_6))
        self.assertRaises(
            UnsupportedFitzpatrickError, SMILE.get_unicode,
            Fitzpatrick.TYPE_3)
        self.assertRaises(ValueError, THUMBSUP.get_unicode, u'\U0001f3ff')


class FitzpatrickTest(unittest.TestCase):
    def test_from_unicode(self):
        self.assertIs(Fitzpatrick.TYPE_1_2,
                      Fitzpatrick.from_unicode(u'\U0001f3fb'))
        self.assertIs(Fitzpatrick.TYPE_6,
                      Fitzpatrick.from_unicode(u'\U0001f3ff'))
        self.assertIsNone(Fitzpatrick.from_unicode('a'))
        self.assertIsNone(Fitzpatrick.from_unicode(None))

    def test_from_type(self):
        self.assertIs(Fitzpatrick.TYPE_3, Fitzpatrick.from_type('type_3'))
        self.assertIsNone(Fitzpatrick.from_type('type_7'))
        self.assertIsNone(Fitzpatrick.from_type(''))

    def test_is_fitzpatrick(self):
        self.assertTrue(emoji.is_fitzpatrick(0x1f3fb))
        self.assertTrue(emoji.is_fitzpatrick(u'\U0001f3fd'))
        self.assertFalse(emoji.is_fitzpatrick(0x1f3fa))
        self.assertFalse(emoji.is_fitzpatrick('ab'))
        for fitzpatrick in Fitzpatrick:
            self.assertTrue(emoji.is_fitzpatrick(fitzpatrick.unicode))


if __name__ == '__main__':
    unittest.main()
