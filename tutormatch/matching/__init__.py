"""Job/tutor relevance matching engine.

This module provides:
- fuzzy_match / FuzzyMatcher: free-text comparison of subjects, levels and locations
- parse_rate / rate_compatibility: rate extraction and tiered rate scoring
- score / match_reasons / score_breakdown: per-pair scoring and explanations
- rank / recommend / JobMatcher: ordering and filtering of job collections
- SUBJECT_ALIASES / LEVEL_ALIASES / VocabularyTables: the controlled vocabulary
"""

from .engine import DEFAULT_MIN_SCORE, DEFAULT_RECOMMEND_LIMIT, JobMatcher, rank, recommend
from .fuzzy import FuzzyMatcher, fuzzy_match
from .models import MatchResult, ScoreBreakdown
from .rates import RateTier, parse_rate, rate_compatibility, rate_tier
from .scoring import MatchScorer, match_reasons, score, score_breakdown
from .utils import build_match_payload, build_match_payloads, build_rationale_dict
from .vocabulary import (
    DEFAULT_VOCABULARY,
    LEVEL_ALIASES,
    SUBJECT_ALIASES,
    VocabularyTables,
    shares_vocabulary_group,
)

__all__ = [
    "JobMatcher",
    "rank",
    "recommend",
    "DEFAULT_MIN_SCORE",
    "DEFAULT_RECOMMEND_LIMIT",
    "FuzzyMatcher",
    "fuzzy_match",
    "MatchResult",
    "ScoreBreakdown",
    "RateTier",
    "parse_rate",
    "rate_compatibility",
    "rate_tier",
    "MatchScorer",
    "score",
    "score_breakdown",
    "match_reasons",
    "build_match_payload",
    "build_match_payloads",
    "build_rationale_dict",
    "SUBJECT_ALIASES",
    "LEVEL_ALIASES",
    "DEFAULT_VOCABULARY",
    "VocabularyTables",
    "shares_vocabulary_group",
]
