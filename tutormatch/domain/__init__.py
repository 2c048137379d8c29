"""Domain models for tutormatch."""

from .models import HourlyRates, Job, Tutor

__all__ = ["Job", "Tutor", "HourlyRates"]
