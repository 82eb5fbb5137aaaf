"""Analysis configuration.

Passed explicitly to the components that need it.
Nothing is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Engine configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        verbose: Log tracebacks of reported faults (DEBUG level)
        max_field_search_lines: Lookahead window of the field position
            fallback search, counted from the marker line
        field_injection_marker: Text that marks a field injection in source
        default_bean_type: Type recorded for @Bean methods without return type
    """

    verbose: bool = False
    max_field_search_lines: int = 5
    field_injection_marker: str = "@Autowired"
    default_bean_type: str = "Object"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_field_search_lines < 1:
            raise ValueError(
                f"max_field_search_lines must be >= 1, got {self.max_field_search_lines}"
            )
        if not self.field_injection_marker:
            raise ValueError("field_injection_marker must not be empty")
        if not self.default_bean_type:
            raise ValueError("default_bean_type must not be empty")
