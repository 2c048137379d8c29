"""Unit tests for match scoring and match reasons."""

from types import SimpleNamespace

import pytest

from tutormatch.domain.models import HourlyRates, Job, Tutor
from tutormatch.matching import MatchScorer, match_reasons, score, score_breakdown
from tutormatch.matching.fuzzy import fuzzy_match
from tutormatch.matching.rates import rate_compatibility

SAMPLE_JOBS = [
    Job(subject="E Maths", level="Secondary 3-4", location="Tampines", rate="$45/hr"),
    Job(subject="H2 Chemistry", level="JC 1-2", location="Bishan", rate="$60-80/hr"),
    Job(subject="English", level="Primary 5", location="Jurong West", rate="To be discussed"),
    Job(subject="Piano", level="Grade 5", location="Bedok", rate="S$30/hour"),
    Job(subject="GP", level="JC2", location="Woodlands", rate="$70/hr"),
]

SAMPLE_TUTORS = [
    Tutor(
        subjects=["Mathematics"],
        levels=["Secondary 3-4"],
        locations=["Tampines"],
        hourly_rates=HourlyRates(min=40, max=50),
    ),
    Tutor(
        subjects=["Chemistry", "Physics"],
        levels=["JC1"],
        locations=["Bishan"],
        hourly_rates=HourlyRates(min=60, max=90),
    ),
    Tutor(subjects=["English"], levels=["P5", "P6"], locations=["Jurong"]),
    Tutor(),
]


class TestScenarios:
    """End-to-end scoring of representative job/tutor pairs."""

    def test_full_match_scores_100(self, math_job, math_tutor):
        assert score(math_job, math_tutor) == 100
        assert match_reasons(math_job, math_tutor) == [
            "Matches your subject: Mathematics",
            "Matches your level: Secondary 3-4",
            "Near your location: Tampines",
            "Rate matches your range",
        ]

    def test_level_miss_scores_70(self, math_job, make_tutor):
        tutor = make_tutor(levels=["Primary 1-2"])

        breakdown = score_breakdown(math_job, tutor)

        assert breakdown.level == 0
        assert score(math_job, tutor) == 70
        assert "Matches your level: Primary 1-2" not in match_reasons(math_job, tutor)

    def test_rate_far_above_band_contributes_nothing(self, make_job, math_tutor):
        job = make_job(rate="$100/hr")

        assert score_breakdown(job, math_tutor).rate == 0
        assert score(job, math_tutor) == 80
        assert match_reasons(job, math_tutor)[-1] == "Near your location: Tampines"

    def test_rate_close_to_band(self, make_job, math_tutor):
        job = make_job(rate="$55/hr")

        reasons = match_reasons(job, math_tutor)

        assert score_breakdown(job, math_tutor).rate == 10
        assert "Rate close to your range" in reasons
        assert "Rate matches your range" not in reasons

    def test_partial_rate_has_no_reason(self, make_job, math_tutor):
        job = make_job(rate="$65/hr")

        assert score_breakdown(job, math_tutor).rate == 5
        assert not any(reason.startswith("Rate") for reason in match_reasons(job, math_tutor))

    def test_no_rate_preference_contributes_zero(self, make_job, make_tutor):
        tutor = make_tutor(hourly_rates=None)

        for rate in ("$45/hr", "$100/hr", "To be discussed"):
            job = make_job(rate=rate)
            assert score_breakdown(job, tutor).rate == 0
            assert score(job, tutor) == 80

    def test_unknown_job_rate_contributes_zero(self, make_job, math_tutor):
        job = make_job(rate="To be discussed")
        assert score(job, math_tutor) == 80

    def test_empty_tutor_scores_zero(self, empty_tutor):
        for job in SAMPLE_JOBS:
            assert score(job, empty_tutor) == 0
            assert match_reasons(job, empty_tutor) == []

    def test_reason_names_first_matching_preference(self, math_job, make_tutor):
        tutor = make_tutor(subjects=["Piano", "Maths", "Mathematics"])
        assert match_reasons(math_job, tutor)[0] == "Matches your subject: Maths"

    def test_tutor_preference_order_does_not_change_score(self, math_job, make_tutor):
        forward = make_tutor(subjects=["Piano", "Mathematics"], locations=["Bedok", "Tampines"])
        backward = make_tutor(subjects=["Mathematics", "Piano"], locations=["Tampines", "Bedok"])
        assert score(math_job, forward) == score(math_job, backward) == 100


class TestScoreInvariants:
    """Properties that hold for every job/tutor pair."""

    @pytest.mark.parametrize("job", SAMPLE_JOBS)
    @pytest.mark.parametrize("tutor", SAMPLE_TUTORS)
    def test_score_within_bounds(self, job, tutor):
        assert 0 <= score(job, tutor) <= 100

    @pytest.mark.parametrize("job", SAMPLE_JOBS)
    @pytest.mark.parametrize("tutor", SAMPLE_TUTORS)
    def test_score_is_sum_of_independent_dimensions(self, job, tutor):
        subject = 30 if any(fuzzy_match(job.subject, s) for s in tutor.subjects) else 0
        level = 30 if any(fuzzy_match(job.level, lv) for lv in tutor.levels) else 0
        location = 20 if any(fuzzy_match(job.location, loc) for loc in tutor.locations) else 0
        rate = rate_compatibility(job.rate, tutor.hourly_rates) if tutor.hourly_rates else 0

        breakdown = score_breakdown(job, tutor)

        assert (breakdown.subject, breakdown.level, breakdown.location, breakdown.rate) == (
            subject,
            level,
            location,
            rate,
        )
        assert score(job, tutor) == subject + level + location + rate

    @pytest.mark.parametrize("job", SAMPLE_JOBS)
    @pytest.mark.parametrize("tutor", SAMPLE_TUTORS)
    def test_reasons_agree_with_breakdown(self, job, tutor):
        breakdown = score_breakdown(job, tutor)
        reasons = match_reasons(job, tutor)

        assert any(r.startswith("Matches your subject") for r in reasons) == (breakdown.subject > 0)
        assert any(r.startswith("Matches your level") for r in reasons) == (breakdown.level > 0)
        assert any(r.startswith("Near your location") for r in reasons) == (breakdown.location > 0)
        assert any(r.startswith("Rate") for r in reasons) == (breakdown.rate >= 10)


class TestMatchScorer:
    """Tests for MatchScorer with plain objects."""

    def test_accepts_duck_typed_records(self):
        job = SimpleNamespace(subject="E Maths", level="Sec 3", location="Tampines", rate="$45/hr")
        tutor = SimpleNamespace(
            subjects=["Mathematics"],
            levels=["Secondary 3"],
            locations=["Tampines"],
            hourly_rates=SimpleNamespace(min=40, max=50),
        )

        assert MatchScorer().score(job, tutor) == 100

    def test_does_not_mutate_inputs(self, math_job, math_tutor):
        job_before = math_job.model_dump()
        tutor_before = math_tutor.model_dump()

        MatchScorer().score(math_job, math_tutor)
        MatchScorer().reasons(math_job, math_tutor)

        assert math_job.model_dump() == job_before
        assert math_tutor.model_dump() == tutor_before
