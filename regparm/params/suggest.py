"""
Fuzzy Matching for Parameter Suggestions.

Provides "did you mean?" functionality for typo detection using rapidfuzz.
Used by strict mode when a parameter file assigns a name that is neither a
generic parameter nor a legacy/enumerated one.
"""

from typing import List, Iterable
from functools import lru_cache

from rapidfuzz import process, fuzz

# Minimum similarity score (0-100) to consider a match
MIN_SIMILARITY_SCORE = 75

# Maximum number of suggestions to return
MAX_SUGGESTIONS = 3


def suggest_similar(
    unknown: str,
    valid_options: Iterable[str],
    min_score: int = MIN_SIMILARITY_SCORE,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> List[str]:
    """
    Find similar strings from valid_options that match the unknown string.

    Args:
        unknown: The unknown/misspelled string to match.
        valid_options: Iterable of valid strings to match against.
        min_score: Minimum similarity score (0-100) to include a match.
        max_suggestions: Maximum number of suggestions to return.

    Returns:
        List of similar valid options, sorted by similarity (best first).
    """
    if not unknown:
        return []

    options_list = list(valid_options)
    if not options_list:
        return []

    # process.extract returns list of (match, score, index) tuples
    matches = process.extract(
        unknown,
        options_list,
        scorer=fuzz.WRatio,
        limit=max_suggestions,
        score_cutoff=min_score,
    )

    return [match[0] for match in matches]


def known_parameter_names() -> List[str]:
    """All names a parameter file may assign: generic, legacy and deprecated."""
    # pylint: disable=import-outside-toplevel
    from .registry import REGISTRY
    from .legacy import LEGACY_PARAM_NAMES

    return list(REGISTRY.all_params.keys()) + list(LEGACY_PARAM_NAMES)


@lru_cache(maxsize=128)
def suggest_parameter(unknown_param: str) -> tuple:
    """
    Suggest similar parameter names. Cached, since strict mode tends to
    report the same typo once per file.
    """
    return tuple(suggest_similar(unknown_param, known_parameter_names()))
