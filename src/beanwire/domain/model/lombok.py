"""Lombok simulation result objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanwire.domain.model.annotation import Annotation
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.field import FieldFacts
    from beanwire.domain.model.virtual_constructor import VirtualConstructor


@dataclass(frozen=True, slots=True)
class LombokAnnotationInfo:
    """Lombok annotation with its extracted configuration.

    Attributes:
        annotation: Original class-level annotation
        config: Lombok settings (always has "access"; "staticName" when given)
    """

    annotation: Annotation
    config: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.annotation is None:
            raise TypeError("annotation must not be None")
        if not isinstance(self.config, MappingProxyType):
            object.__setattr__(self, "config", MappingProxyType(dict(self.config)))


@dataclass(frozen=True, slots=True)
class LombokFieldAnalysis:
    """Field sets that fed each simulated constructor shape.

    Attributes:
        required_args_fields: final fields then @NonNull fields
        all_args_fields: every non-static field
        class_facts: Analyzed class, None for a failed simulation
    """

    required_args_fields: tuple[FieldFacts, ...] = ()
    all_args_fields: tuple[FieldFacts, ...] = ()
    class_facts: ClassFacts | None = None


@dataclass(frozen=True, slots=True)
class LombokSimulationResult:
    """Outcome of simulating Lombok code generation for one class.

    Never raised, always returned: failures are described by errors.

    Attributes:
        lombok_annotations: Lombok annotations found on the class
        virtual_constructors: Constructors Lombok would generate
        field_analysis: Field sets used for each shape
        is_success: True iff errors is empty
        errors: Diagnostic messages
    """

    lombok_annotations: tuple[LombokAnnotationInfo, ...] = ()
    virtual_constructors: tuple[VirtualConstructor, ...] = ()
    field_analysis: LombokFieldAnalysis = field(default_factory=LombokFieldAnalysis)
    errors: tuple[str, ...] = ()

    @property
    def is_success(self) -> bool:
        """Simulation produced no diagnostics."""
        return not self.errors

    @classmethod
    def failed(cls, *errors: str) -> LombokSimulationResult:
        """Create failed result carrying error messages.

        Raises:
            ValueError: If no error message given (FAIL-FIRST)
        """
        if not errors:
            raise ValueError("failed result requires at least one error")
        return cls(errors=tuple(errors))
