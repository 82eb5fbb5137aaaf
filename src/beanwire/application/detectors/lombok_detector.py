"""Lombok virtual constructor detector.

Lombok generates constructors at compile time; they never appear in
source. This detector reconstructs their parameter lists by rule:

    @RequiredArgsConstructor
        final non-static fields, in declaration order,
        then non-final non-static @NonNull fields, in declaration order
    @AllArgsConstructor
        every non-static field, in declaration order

Both shapes are produced when both annotations are present.
Hand-written constructors are detected separately and the two are
not deduplicated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from beanwire.application.detectors._base import BaseDetector
from beanwire.domain.exceptions import (
    AnnotationParsingError,
    MissingClassFactsError,
    SimulationError,
    user_friendly_message,
)
from beanwire.domain.model.enums import AnnotationKind, InjectionKind, Visibility
from beanwire.domain.model.injection import InjectionInfo
from beanwire.domain.model.lombok import (
    LombokAnnotationInfo,
    LombokFieldAnalysis,
    LombokSimulationResult,
)
from beanwire.domain.model.parameter import Parameter
from beanwire.domain.model.virtual_constructor import VirtualConstructor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from beanwire.domain.exceptions import DetectionError
    from beanwire.domain.model.annotation import Annotation
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.field import FieldFacts

DEFAULT_ACCESS = "public"

# Lombok AccessLevel → Java visibility; anything else is public
_ACCESS_LEVELS: Mapping[str, Visibility] = MappingProxyType(
    {
        "PROTECTED": Visibility.PROTECTED,
        "protected": Visibility.PROTECTED,
        "PRIVATE": Visibility.PRIVATE,
        "private": Visibility.PRIVATE,
        "PACKAGE": Visibility.PACKAGE,
        "package": Visibility.PACKAGE,
    }
)

# Annotation parameters carried into LombokAnnotationInfo.config
_CONFIG_KEYS = ("access", "staticName")


def access_level(annotation: Annotation) -> Visibility:
    """Visibility of the constructor generated for an annotation.

    Args:
        annotation: @RequiredArgsConstructor or @AllArgsConstructor

    Returns:
        Visibility from the access parameter, PUBLIC if absent or unrecognized
    """
    value = annotation.get("access")
    if value is None:
        return Visibility.PUBLIC
    # AccessLevel.PROTECTED → PROTECTED
    value = value.strip().rsplit(".", 1)[-1]
    return _ACCESS_LEVELS.get(value, Visibility.PUBLIC)


def lombok_config(annotation: Annotation) -> dict[str, str]:
    """Extract Lombok settings from annotation parameters.

    "access" is always present (default "public").
    """
    config = {key: annotation.parameters[key] for key in _CONFIG_KEYS if key in annotation.parameters}
    config.setdefault("access", DEFAULT_ACCESS)
    return config


def required_args_fields(class_facts: ClassFacts) -> tuple[FieldFacts, ...]:
    """Fields @RequiredArgsConstructor turns into parameters."""
    fields = [f for f in class_facts.fields if f is not None and not f.is_static]
    final_fields = [f for f in fields if f.is_final]
    non_null_fields = [
        f for f in fields if not f.is_final and f.has_annotation(AnnotationKind.LOMBOK_NON_NULL)
    ]
    return (*final_fields, *non_null_fields)


def all_args_fields(class_facts: ClassFacts) -> tuple[FieldFacts, ...]:
    """Fields @AllArgsConstructor turns into parameters."""
    return tuple(f for f in class_facts.fields if f is not None and not f.is_static)


class LombokInjectionDetector(BaseDetector):
    """Emits CONSTRUCTOR_LOMBOK injections for simulated constructors.

    detect_required_args_constructor and detect_all_args_constructor are
    the only entry points in the package that raise: passing None is a
    programmer error (MissingClassFactsError).
    """

    name = "LombokInjectionDetector"

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Required-args injections, then all-args injections."""
        injections: list[InjectionInfo] = []
        for constructor in (
            self.detect_required_args_constructor(class_facts),
            self.detect_all_args_constructor(class_facts),
        ):
            if constructor is not None:
                injections.extend(self.to_injections(constructor, class_facts))
        return tuple(injections)

    def detect_required_args_constructor(
        self,
        class_facts: ClassFacts | None,
    ) -> VirtualConstructor | None:
        """Simulate @RequiredArgsConstructor.

        Args:
            class_facts: Class to analyze

        Returns:
            Virtual constructor, None if the class lacks the annotation

        Raises:
            MissingClassFactsError: If class_facts is None
        """
        if class_facts is None:
            raise MissingClassFactsError("detect_required_args_constructor")
        return self._simulate(
            class_facts,
            AnnotationKind.LOMBOK_REQUIRED_ARGS_CONSTRUCTOR,
            required_args_fields(class_facts),
        )

    def detect_all_args_constructor(
        self,
        class_facts: ClassFacts | None,
    ) -> VirtualConstructor | None:
        """Simulate @AllArgsConstructor.

        Args:
            class_facts: Class to analyze

        Returns:
            Virtual constructor, None if the class lacks the annotation

        Raises:
            MissingClassFactsError: If class_facts is None
        """
        if class_facts is None:
            raise MissingClassFactsError("detect_all_args_constructor")
        return self._simulate(
            class_facts,
            AnnotationKind.LOMBOK_ALL_ARGS_CONSTRUCTOR,
            all_args_fields(class_facts),
        )

    def to_injections(
        self,
        constructor: VirtualConstructor,
        class_facts: ClassFacts,
    ) -> tuple[InjectionInfo, ...]:
        """Convert virtual constructor parameters to injections.

        Position and range come from the field of the same name and type,
        else the parameter position, else the class.
        """
        injections: list[InjectionInfo] = []

        for param in constructor.parameters:
            field_facts = class_facts.find_field(param.name, param.type)
            position = (
                (field_facts.position if field_facts is not None else None)
                or param.position
                or class_facts.position
            )
            range_ = (
                (field_facts.range if field_facts is not None else None)
                or param.range
                or class_facts.range
            )
            injections.append(
                InjectionInfo(
                    target_type=param.type,
                    target_name=param.name,
                    kind=InjectionKind.CONSTRUCTOR_LOMBOK,
                    position=position,
                    range=range_,
                )
            )

        return tuple(injections)

    def simulate(self, class_facts: ClassFacts | None) -> LombokSimulationResult:
        """Full Lombok simulation with diagnostics. Never raises.

        Faults are reported with their full detail; the result carries
        their user-facing message.

        Args:
            class_facts: Class to analyze

        Returns:
            Annotations found with their config, virtual constructors,
            field sets, and error messages (failed result on any fault)
        """
        if class_facts is None:
            return LombokSimulationResult.failed("class facts were not provided")

        try:
            annotations: list[LombokAnnotationInfo] = []
            errors: list[str] = []

            for annotation in class_facts.annotations:
                if annotation is None:
                    continue
                if annotation.kind.is_lombok:
                    try:
                        annotations.append(
                            LombokAnnotationInfo(annotation, lombok_config(annotation))
                        )
                    except Exception as e:
                        error = AnnotationParsingError(
                            f"annotation processing failed: {annotation.name}",
                            annotation.name,
                            cause=e,
                        )
                        self._report_simulation(error, class_facts)
                        errors.append(user_friendly_message(error))
                elif annotation.kind is AnnotationKind.INVALID:
                    errors.append(f"invalid annotation kind: {annotation.name}")

            constructors = tuple(
                c
                for c in (
                    self.detect_required_args_constructor(class_facts),
                    self.detect_all_args_constructor(class_facts),
                )
                if c is not None
            )

            return LombokSimulationResult(
                lombok_annotations=tuple(annotations),
                virtual_constructors=constructors,
                field_analysis=LombokFieldAnalysis(
                    required_args_fields=required_args_fields(class_facts),
                    all_args_fields=all_args_fields(class_facts),
                    class_facts=class_facts,
                ),
                errors=tuple(errors),
            )
        except Exception as e:
            error = SimulationError(
                f"simulation failed: {str(e) or type(e).__name__}",
                class_facts.name,
                cause=e,
            )
            self._report_simulation(error, class_facts)
            return LombokSimulationResult.failed(user_friendly_message(error))

    def _report_simulation(self, error: DetectionError, class_facts: ClassFacts) -> None:
        self._reporter.report(
            error,
            detector=self.name,
            class_name=class_facts.name,
            file=class_facts.file,
        )

    def _simulate(
        self,
        class_facts: ClassFacts,
        kind: AnnotationKind,
        fields: tuple[FieldFacts, ...],
    ) -> VirtualConstructor | None:
        annotation = class_facts.find_annotation(kind)
        if annotation is None:
            return None

        return VirtualConstructor(
            parameters=tuple(
                Parameter(name=f.name, type=f.type, position=f.position, range=f.range)
                for f in fields
            ),
            annotation_kind=kind,
            visibility=access_level(annotation),
            position=class_facts.position,
            range=class_facts.range,
        )
