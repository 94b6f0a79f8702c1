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

"""The emoji record and the skin tone (fitzpatrick) modifiers."""

import collections
import enum


FITZPATRICK_FIRST = 0x1f3fb
FITZPATRICK_LAST = 0x1f3ff


class UnsupportedFitzpatrickError(ValueError):
  """Raised when a skin tone modifier is applied to an emoji that does not
  take one."""


class Fitzpatrick(enum.Enum):
  """Skin tone modifiers, one code point each."""
  TYPE_1_2 = u'\U0001f3fb'
  TYPE_3 = u'\U0001f3fc'
  TYPE_4 = u'\U0001f3fd'
  TYPE_5 = u'\U0001f3fe'
  TYPE_6 = u'\U0001f3ff'

  @property
  def unicode(self):
    return self.value

  @classmethod
  def from_unicode(cls, unicode):
    if not is_fitzpatrick(unicode):
      return None
    if not isinstance(unicode, str):
      unicode = chr(unicode)
    return cls(unicode)

  @classmethod
  def from_type(cls, type_name):
    """Return the modifier for a name like 'type_3', or None."""
    if not type_name:
      return None
    return cls.__members__.get(type_name.upper())


def is_fitzpatrick(cp):
  """Return true if cp (an int or a one character string) is a skin tone
  modifier."""
  if isinstance(cp, str):
    if len(cp) != 1:
      return False
    cp = ord(cp)
  elif not isinstance(cp, int):
    return False
  return FITZPATRICK_FIRST <= cp <= FITZPATRICK_LAST


class Emoji(collections.namedtuple(
    'Emoji', 'description, supports_fitzpatrick, aliases, tags, unicode')):
  """One catalogued emoji.

  aliases and tags are tuples in catalog order, unicode is the canonical
  sequence without any skin tone modifier.  Instances are immutable and
  compare by value.
  """
  __slots__ = ()

  def __new__(cls, description, supports_fitzpatrick, aliases, tags, unicode):
    return super(Emoji, cls).__new__(
        cls, description, bool(supports_fitzpatrick), tuple(aliases),
        tuple(tags), unicode)

  @property
  def html_decimal(self):
    return ''.join('&#%d;' % ord(c) for c in self.unicode)

  @property
  def html_hexadecimal(self):
    return ''.join('&#x%x;' % ord(c) for c in self.unicode)

  def get_unicode(self, fitzpatrick=None):
    """Return the sequence with the given modifier appended.  With no
    modifier this is just the canonical sequence."""
    if fitzpatrick is None:
      return self.unicode
    if not self.supports_fitzpatrick:
      raise UnsupportedFitzpatrickError(
          'emoji %s (%s) does not support skin tone modifiers' % (
              self.aliases[0], self.unicode))
    if not isinstance(fitzpatrick, Fitzpatrick):
      raise ValueError('not a fitzpatrick modifier: %r' % (fitzpatrick,))
    return self.unicode + fitzpatrick.value

  def __str__(self):
    return self.unicode
