"""Custom exceptions for configuration management."""

from typing import List, Optional


class ConfigurationError(Exception):
    """Raised when configuration files or environment variables are invalid.

    Attributes:
        message: One-line summary
        sections: Config sections the problems were found in ("matching",
            "vocabulary", "environment", ...), in the order first reported
        errors: Individual validation problems
        suggestions: Hints for fixing them
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        sections: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.sections = list(sections or [])
        super().__init__(str(self))

    def __str__(self) -> str:
        lines = [self.message]
        if self.sections:
            lines.append(f"Affected sections: {', '.join(self.sections)}")
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)
