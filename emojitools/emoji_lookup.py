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

"""Look up emoji by alias, or list the emoji found in some text."""

import argparse
import logging
import sys

from emojitools import emoji_manager
from emojitools import emoji_parser
from emojitools import emojiconfig
from emojitools import similarity
from emojitools import tool_utils

logger = logging.getLogger(__name__)


def _format_emoji(emoji):
  return '%s %s :%s:' % (
      emoji.unicode, tool_utils.seq_to_string(emoji.unicode),
      ': :'.join(emoji.aliases))


def lookup_alias(manager, alias, tag=None, algorithm=None, threshold=None):
  """Resolve alias with the options from the command line.  With no
  algorithm only exact matches are returned."""
  if algorithm is None:
    if tag is None:
      return manager.get_for_alias(alias)
    return manager.get_for_alias_with_tag(alias, tag)
  if tag is None:
    return manager.get_for_alias_with_similarity(alias, algorithm, threshold)
  return manager.get_for_alias_with_tag_and_similarity(
      alias, tag, algorithm, threshold)


def scan_text(manager, text):
  """Return printable lines, one for each emoji found in text."""
  lines = []
  for candidate in emoji_parser.get_unicode_candidates(text, manager.trie):
    line = '%d-%d %s' % (
        candidate.emoji_start_index, candidate.fitzpatrick_end_index,
        _format_emoji(candidate.emoji))
    if candidate.has_fitzpatrick:
      line += ' (%s)' % candidate.fitzpatrick_type
    lines.append(line)
  return lines


def _process_aliases(manager, args):
  ok = True
  for alias in args.aliases:
    emoji = lookup_alias(
        manager, alias, args.tag, args.algorithm, args.threshold)
    if emoji is None:
      print('%s: not found' % alias)
      ok = False
    else:
      print('%s: %s' % (alias, _format_emoji(emoji)))
  return ok


def main(argv=None):
  parser = argparse.ArgumentParser(description=__doc__)
  parser.add_argument('aliases', help='Aliases to look up, with or without '
                      'colons', metavar='alias', nargs='*')
  parser.add_argument('--tag', help='Only look up aliases under this tag')
  parser.add_argument('--algorithm',
                      help='Also accept close aliases, using this similarity '
                      'algorithm',
                      choices=[a.value for a in similarity.SimilarityAlgorithm])
  parser.add_argument('--fuzzy',
                      help='Accept close aliases using the configured '
                      'algorithm (%s)' % emojiconfig.similarity_algorithm(),
                      action='store_true')
  parser.add_argument('--threshold',
                      help='Similarity required for close aliases, from 0.0 '
                      'to 1.0 (default %(default)s)',
                      type=float,
                      default=emojiconfig.similarity_threshold())
  parser.add_argument('--scan',
                      help='List the emoji found in this text',
                      metavar='text')
  parser.add_argument('--tags',
                      help='List all tags',
                      action='store_true')
  parser.add_argument('-l', '--loglevel',
                      help='log level name/value',
                      default='warning')
  args = parser.parse_args(argv)

  if not tool_utils.setup_logging(args.loglevel):
    return 2
  logger.debug('config: %s', emojiconfig.config_path())
  if not (args.aliases or args.scan or args.tags):
    parser.error('nothing to do, give aliases, --scan or --tags')
  if not 0.0 <= args.threshold <= 1.0:
    parser.error('--threshold %s is not between 0.0 and 1.0' % args.threshold)
  if args.fuzzy and args.algorithm is None:
    args.algorithm = emojiconfig.similarity_algorithm()
  if args.algorithm is not None:
    try:
      args.algorithm = similarity.SimilarityAlgorithm.from_name(args.algorithm)
    except ValueError as e:
      parser.error(str(e))

  manager = emoji_manager.get_default_manager()
  ok = True
  if args.tags:
    for tag in sorted(manager.get_all_tags()):
      print(tag)
  if args.scan:
    lines = scan_text(manager, args.scan)
    if not lines:
      print('no emoji found')
      ok = False
    for line in lines:
      print(line)
  if args.aliases:
    ok = _process_aliases(manager, args) and ok
  return 0 if ok else 1


if __name__ == '__main__':
  sys.exit(main())
