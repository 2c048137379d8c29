"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from tutormatch.matching.vocabulary import LEVEL_ALIASES, SUBJECT_ALIASES
from tutormatch.normalization import normalize


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check raw configuration for likely mistakes that are not errors.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    matching = config_dict.get("matching", {})
    if isinstance(matching, dict):
        min_score = matching.get("min_score")
        if isinstance(min_score, int) and 0 <= min_score < 30:
            warning_messages.append(
                f"min_score {min_score} recommends jobs where neither subject nor level matched"
            )

    vocabulary = config_dict.get("vocabulary", {})
    if isinstance(vocabulary, dict):
        for section, built_in in (("subjects", SUBJECT_ALIASES), ("levels", LEVEL_ALIASES)):
            entries = vocabulary.get(section, {})
            if not isinstance(entries, dict):
                continue
            for canonical, aliases in entries.items():
                if not isinstance(canonical, str) or not isinstance(aliases, list):
                    continue
                known = built_in.get(normalize(canonical), ())
                duplicates = sorted(
                    {normalize(alias) for alias in aliases if isinstance(alias, str)} & set(known)
                )
                if duplicates:
                    warning_messages.append(
                        f"vocabulary.{section}.{canonical} repeats built-in aliases: "
                        f"{', '.join(duplicates)}"
                    )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
