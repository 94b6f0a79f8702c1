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

"""Tests for emoji_lookup.py."""

import contextlib
import io
import unittest
from unittest import mock

from emojitools import emoji_loader
from emojitools import emoji_lookup
from emojitools import emoji_manager
from emojitools import emojiconfig
from emojitools.emoji_manager import EmojiManager
from emojitools.similarity import SimilarityAlgorithm


def _manager():
    return EmojiManager(
        emoji_loader.load_emojis_from_path(emoji_loader.DEFAULT_CATALOG))


class LookupAliasTest(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.manager = _manager()

    def test_exact(self):
        self.assertEqual(
            'smile', emoji_lookup.lookup_alias(self.manager, ':smile:').aliases[0])
        self.assertIsNone(emoji_lookup.lookup_alias(self.manager, 'smle'))
        self.assertIsNone(
            emoji_lookup.lookup_alias(self.manager, 'smile', tag='sports'))

    def test_similar(self):
        emoji = emoji_lookup.lookup_alias(
            self.manager, 'smle', None, SimilarityAlgorithm.LEVENSHTEIN, 0.5)
        self.assertEqual('smile', emoji.aliases[0])
        emoji = emoji_lookup.lookup_alias(
            self.manager, 'baskball', 'sports', SimilarityAlgorithm.FUZZY, 0.7)
        self.assertEqual('basketball', emoji.aliases[0])

    def test_scan_text(self):
        lines = emoji_lookup.scan_text(
            self.manager, u'hi \U0001f44b\U0001f3ff and \U0001f604')
        self.assertEqual(2, len(lines))
        self.assertTrue(lines[0].startswith('3-5 '))
        self.assertTrue(lines[0].endswith(':wave: (type_6)'))
        self.assertIn('U+1F604', lines[1])
        self.assertEqual([], emoji_lookup.scan_text(self.manager, 'plain'))


class MainTest(unittest.TestCase):
    """Tests for the command line entry point."""

    def setUp(self):
        patcher = mock.patch.object(
            emoji_manager, 'get_default_manager', return_value=_manager())
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = emoji_lookup.main(argv)
        return status, out.getvalue()

    def test_aliases(self):
        status, out = self.run_main([':smile:', 'thumbsup'])
        self.assertEqual(0, status)
        self.assertIn(':smile:: \U0001f604 U+1F604 :smile:', out)
        self.assertIn(':+1: :thumbsup:', out)

    def test_alias_not_found(self):
        status, out = self.run_main(['smle'])
        self.assertEqual(1, status)
        self.assertIn('smle: not found', out)

    def test_similar_alias(self):
        status, out = self.run_main(
            ['smle', '--algorithm', 'levenshtein', '--threshold', '0.5'])
        self.assertEqual(0, status)
        self.assertIn(':smile:', out)

    def test_scan(self):
        status, out = self.run_main(['--scan', u'ok \U0001f44d'])
        self.assertEqual(0, status)
        self.assertIn('3-4', out)
        status, out = self.run_main(['--scan', 'nothing'])
        self.assertEqual(1, status)
        self.assertIn('no emoji found', out)

    def test_tags(self):
        status, out = self.run_main(['--tags'])
        self.assertEqual(0, status)
        self.assertIn('happy\n', out)

    def test_nothing_to_do(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_main([])

    def test_bad_algorithm(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_main(['smle', '--algorithm', 'soundex'])

    def test_threshold_out_of_range(self):
        for threshold in ('-0.5', '1.5', 'nan'):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    self.run_main(['qqqqs', '--fuzzy', '--threshold', threshold])

    def test_bad_configured_algorithm(self):
        err = io.StringIO()
        with mock.patch.object(
            emojiconfig, 'similarity_algorithm', return_value='soundex'):
            with contextlib.redirect_stderr(err):
                with self.assertRaises(SystemExit):
                    self.run_main(['smle', '--fuzzy'])
        self.assertIn('soundex', err.getvalue())


if __name__ == '__main__':
    unittest.main()
