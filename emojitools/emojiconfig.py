#!/usr/bin/env python
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

"""Read config file for emoji tools.

This looks for a file named '.emojiconfig' in the users home directory, or
failing that /usr/local/share/emojitools/config.  It should contain lines
consisting of a name, '=' and a value.  The expected names are
'emoji_catalog' (absolute path to an alternate emojis.json),
'similarity_threshold' and 'similarity_algorithm'.

Running without a config is fine, the packaged catalog and the defaults
below are used.
"""

from os import path

DEFAULT_SIMILARITY_THRESHOLD = 0.7
DEFAULT_SIMILARITY_ALGORITHM = 'levenshtein'

CONFIG_PATHS = [
    path.expanduser('~/.emojiconfig'), '/usr/local/share/emojitools/config']

_values = {}
_config_path = None  # so we know


def _read_config(lines):
  """Parse lines of the form <name> = <value> into a dict.  Blank lines and
  lines starting with '#' are ignored."""
  values = {}
  for line in lines:
    line = line.strip()
    if not line or line.startswith('#'):
      continue
    if '=' not in line:
      raise ValueError('bad config line "%s", expected name=value' % line)
    k, v = line.split('=', 1)
    values[k.strip()] = v.strip()
  return values


def _setup(paths=None):
  global _config_path

  _values.clear()
  _config_path = None
  for configfile in paths or CONFIG_PATHS:
    if path.exists(configfile):
      with open(configfile, 'r', encoding='utf-8') as f:
        _values.update(_read_config(f))
      _config_path = configfile
      break
  # This needs to be silent, the command line tool prints only results.

_setup()


def reload(paths=None):
  """Re-read the config, optionally from the given list of candidate files."""
  _setup(paths)


def config_path():
  return _config_path


def get(key, default=''):
  return _values.get(key, default)


def emoji_catalog(default=''):
  """Local path to an alternate emoji catalog, or default."""
  result = _values.get('emoji_catalog', default)
  return path.expanduser(result) if result else result


def similarity_threshold(default=DEFAULT_SIMILARITY_THRESHOLD):
  value = _values.get('similarity_threshold')
  if value is None:
    return default
  try:
    threshold = float(value)
  except ValueError:
    raise ValueError('similarity_threshold "%s" is not a number' % value)
  if not 0.0 <= threshold <= 1.0:
    raise ValueError(
        'similarity_threshold %s is not between 0.0 and 1.0' % value)
  return threshold


def similarity_algorithm(default=DEFAULT_SIMILARITY_ALGORITHM):
  """Name of the similarity algorithm, lower case."""
  return _values.get('similarity_algorithm', default).lower()


if __name__ == '__main__':
  keyset = set(_values.keys())
  if not keyset:
    print('no keys defined, probably no emojiconfig file was found.')
  else:
    wid = max(len(k) for k in keyset)
    fmt = '%%%ds: %%s' % wid
    for k in sorted(keyset):
      print(fmt % (k, get(k)))
    print('config: %s' % _config_path)
