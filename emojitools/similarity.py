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

"""String similarity for approximate alias lookup."""

import decimal
import enum
import logging

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)


class SimilarityAlgorithm(enum.Enum):
  LEVENSHTEIN = 'levenshtein'
  FUZZY = 'fuzzy'

  @classmethod
  def from_name(cls, name):
    """Return the algorithm for a case-insensitive name, raising ValueError
    if there is none."""
    try:
      return cls(name.lower())
    except (AttributeError, ValueError):
      raise ValueError('unsupported similarity algorithm: %r' % (name,))


def check_algorithm(algorithm):
  if not isinstance(algorithm, SimilarityAlgorithm):
    raise ValueError('unsupported similarity algorithm: %r' % (algorithm,))


def levenshtein_distance(a, b):
  return Levenshtein.distance(a, b)


def fuzzy_score(term, query):
  """Score how well query matches term, higher is better.

  Each query character found in the term, in order, scores one point, and
  two more if it immediately follows the previously matched character.
  Matching is case-insensitive.
  """
  if term is None or query is None:
    raise ValueError('term and query must not be None')
  term_lower = term.lower()
  query_lower = query.lower()

  score = 0
  term_index = 0
  previous_match_index = None
  for query_char in query_lower:
    while term_index < len(term_lower):
      term_char = term_lower[term_index]
      term_index += 1
      if query_char == term_char:
        score += 1
        if previous_match_index is not None and (
            previous_match_index + 1 == term_index - 1):
          score += 2
        previous_match_index = term_index - 1
        break
  return score


def threshold_as_num_letters(query, threshold):
  """Convert a similarity fraction into a count of letters of query,
  rounding halves up.

  The threshold goes through its decimal string so that 0.9 of 15 letters
  is 1.5 and rounds to 2, not 1.4999... rounding to 1.
  """
  letters = (1 - decimal.Decimal(str(threshold))) * len(query)
  return int(letters.to_integral_value(rounding=decimal.ROUND_HALF_UP))


def get_closest_string(words, query, algorithm, threshold):
  """Return the word closest to query, or None if none meets the threshold.

  For LEVENSHTEIN the best distance must be less than the letter budget from
  threshold_as_num_letters, for FUZZY the best score must be greater than
  it.  On ties the first best word seen wins.
  """
  check_algorithm(algorithm)

  budget = threshold_as_num_letters(query, threshold)
  best_similarity = None
  best_word = None
  for word in words:
    if algorithm is SimilarityAlgorithm.LEVENSHTEIN:
      sim = levenshtein_distance(query, word)
      if best_similarity is None or sim < best_similarity:
        best_similarity, best_word = sim, word
    else:
      # fuzzy scores go the other way
      sim = fuzzy_score(query, word)
      if best_similarity is None or sim > best_similarity:
        best_similarity, best_word = sim, word

  if best_similarity is None:
    return None

  if algorithm is SimilarityAlgorithm.LEVENSHTEIN:
    meets_threshold = best_similarity < budget
  else:
    meets_threshold = best_similarity > budget
  logger.debug(
      'closest to "%s" is "%s" (%s %d, budget %d)%s', query, best_word,
      algorithm.value, best_similarity, budget,
      '' if meets_threshold else ', rejected')
  return best_word if meets_threshold else None
