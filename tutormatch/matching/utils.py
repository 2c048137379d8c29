"""Helpers for handing match results to downstream consumers.

The web front-end renders ``match_reasons`` as badges next to each job; these
helpers flatten a MatchResult into JSON-ready dicts for that and for logs.
"""

from typing import Dict, Iterable, List

from .models import MatchResult


def build_match_payload(match_result: MatchResult) -> Dict:
    """Build a JSON-ready payload for one ranked job.

    Args:
        match_result: MatchResult from the matching engine

    Returns:
        Dict with keys:
        - job: The job's fields (datetimes as ISO strings)
        - score: Total score in [0, 100]
        - match_reasons: Reasons to render as badges
        - match_quality: Coarse label (strong, good, weak, none)
        - breakdown: Points per dimension
    """
    job = match_result.job
    if hasattr(job, "model_dump"):
        job_data = job.model_dump(mode="json")
    else:
        job_data = {
            "subject": job.subject,
            "level": job.level,
            "location": job.location,
            "rate": job.rate,
        }

    return {
        "job": job_data,
        "score": match_result.score,
        "match_reasons": list(match_result.match_reasons),
        "match_quality": match_result.match_quality,
        "breakdown": build_breakdown_dict(match_result),
    }


def build_match_payloads(match_results: Iterable[MatchResult]) -> List[Dict]:
    """Payloads for a ranked list, preserving order."""
    return [build_match_payload(result) for result in match_results]


def build_breakdown_dict(match_result: MatchResult) -> Dict[str, int]:
    breakdown = match_result.breakdown
    return {
        "subject": breakdown.subject,
        "level": breakdown.level,
        "location": breakdown.location,
        "rate": breakdown.rate,
    }


def build_rationale_dict(match_result: MatchResult) -> Dict:
    """Build a lightweight rationale dict, suitable for structured logs.

    Returns:
        Dict with the job id, score, matched dimension names and reasons
    """
    breakdown = build_breakdown_dict(match_result)
    return {
        "job_id": getattr(match_result.job, "id", None),
        "score": match_result.score,
        "matched_dimensions": [name for name, points in breakdown.items() if points > 0],
        "reason_count": len(match_result.match_reasons),
        "match_reasons": list(match_result.match_reasons),
    }
