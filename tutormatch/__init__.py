"""tutormatch: job/tutor relevance matching for a tuition marketplace.

Typical use from a request handler, given a list of open jobs and a tutor:

    from tutormatch import recommend

    results = recommend(jobs, tutor)
    badges = [(r.job.subject, r.score, r.match_reasons) for r in results]
"""

from .domain import HourlyRates, Job, Tutor
from .matching import (
    JobMatcher,
    MatchResult,
    ScoreBreakdown,
    fuzzy_match,
    match_reasons,
    parse_rate,
    rank,
    rate_compatibility,
    recommend,
    score,
    score_breakdown,
)
from .normalization import normalize

__version__ = "0.1.0"

__all__ = [
    "Job",
    "Tutor",
    "HourlyRates",
    "JobMatcher",
    "MatchResult",
    "ScoreBreakdown",
    "normalize",
    "fuzzy_match",
    "parse_rate",
    "rate_compatibility",
    "score",
    "score_breakdown",
    "match_reasons",
    "rank",
    "recommend",
]
