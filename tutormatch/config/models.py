"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from tutormatch.matching.vocabulary import DEFAULT_VOCABULARY, VocabularyTables
from tutormatch.normalization import normalize


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class MatchingConfig(BaseModel):
    """Ranking and recommendation settings."""

    min_score: int = Field(
        30, ge=0, le=100, description="Minimum score for a job to be recommended"
    )
    recommend_limit: int = Field(
        4, ge=1, le=100, description="Default number of recommended jobs"
    )


class AlertConfig(BaseModel):
    """New-job alert settings for the notification bot."""

    max_jobs_per_alert: int = Field(
        5, ge=1, le=20, description="Jobs listed in one alert before the overflow note"
    )


class VocabularyConfig(BaseModel):
    """Extra aliases merged into the built-in subject and level tables.

    Example YAML:
        vocabulary:
          subjects:
            mathematics: ["sums", "arithmetic"]
          levels:
            university: ["undergraduate", "degree"]
    """

    subjects: Dict[str, List[str]] = Field(
        default_factory=dict, description="Canonical subject -> extra aliases"
    )
    levels: Dict[str, List[str]] = Field(
        default_factory=dict, description="Canonical level -> extra aliases"
    )

    @field_validator("subjects", "levels")
    @classmethod
    def normalize_aliases(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """Normalize keys and aliases the same way matched text is normalized; drop blanks."""
        normalized: Dict[str, List[str]] = {}
        for canonical, aliases in v.items():
            key = normalize(canonical)
            if not key:
                raise ValueError("Canonical vocabulary terms cannot be empty")
            cleaned = normalized.setdefault(key, [])
            for alias in aliases:
                alias_norm = normalize(alias)
                if alias_norm and alias_norm not in cleaned:
                    cleaned.append(alias_norm)
        return normalized


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for tutormatch."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    alerts: AlertConfig = Field(default_factory=AlertConfig)
    vocabulary: VocabularyConfig = Field(default_factory=VocabularyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def build_vocabulary(self) -> VocabularyTables:
        """Built-in vocabulary extended with any configured aliases."""
        if not self.vocabulary.subjects and not self.vocabulary.levels:
            return DEFAULT_VOCABULARY
        return DEFAULT_VOCABULARY.extend(
            subjects=self.vocabulary.subjects,
            levels=self.vocabulary.levels,
        )
