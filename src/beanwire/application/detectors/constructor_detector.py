"""Constructor injection detector.

Two rules, mutually exclusive per class:
    1. Implicit: the only declared constructor, when it has parameters
    2. Explicit: first constructor annotated with @Autowired

The explicit rule is consulted only when the implicit rule found nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from beanwire.application.detectors._base import BaseDetector
from beanwire.domain.exceptions import to_detection_error
from beanwire.domain.model.enums import InjectionKind
from beanwire.domain.model.injection import InjectionInfo

if TYPE_CHECKING:
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.constructor import ConstructorFacts


class ConstructorInjectionDetector(BaseDetector):
    """Emits CONSTRUCTOR injections, one per constructor parameter.

    Position is the parameter's own, else the constructor's.
    Range is always the constructor's.
    """

    name = "ConstructorInjectionDetector"

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Apply the implicit rule, then the explicit rule if needed."""
        injections = self.detect_single_constructor_injection(class_facts)
        if injections:
            return injections
        return self.detect_autowired_constructor_injection(class_facts)

    def detect_single_constructor_injection(
        self,
        class_facts: ClassFacts,
    ) -> tuple[InjectionInfo, ...]:
        """Implicit injection through the class's only constructor.

        Args:
            class_facts: Class to analyze

        Returns:
            One injection per parameter, empty unless the class declares
            exactly one constructor and it has parameters
        """
        try:
            if len(class_facts.constructors) != 1:
                return ()
            constructor = class_facts.constructors[0]
            if constructor is None or not constructor.parameters:
                return ()
            return self._injections_for(constructor, class_facts)
        except Exception as e:
            self._report(e, "single constructor", class_facts)
            return ()

    def detect_autowired_constructor_injection(
        self,
        class_facts: ClassFacts,
    ) -> tuple[InjectionInfo, ...]:
        """Explicit injection through the first @Autowired constructor.

        Args:
            class_facts: Class to analyze

        Returns:
            One injection per parameter of the first annotated constructor
        """
        try:
            for constructor in class_facts.constructors:
                if constructor is not None and constructor.has_autowired_annotation:
                    return self._injections_for(constructor, class_facts)
            return ()
        except Exception as e:
            self._report(e, "autowired constructor", class_facts)
            return ()

    def _injections_for(
        self,
        constructor: ConstructorFacts,
        class_facts: ClassFacts,
    ) -> tuple[InjectionInfo, ...]:
        position_fallback = constructor.position or class_facts.position
        range_ = constructor.range or class_facts.range

        return tuple(
            InjectionInfo(
                target_type=param.type,
                target_name=param.name,
                kind=InjectionKind.CONSTRUCTOR,
                position=param.position or position_fallback,
                range=range_,
            )
            for param in constructor.parameters
        )

    def _report(self, error: Exception, rule: str, class_facts: ClassFacts) -> None:
        self._reporter.report(
            to_detection_error(error, f"{self.name} - {rule}"),
            detector=self.name,
            class_name=class_facts.name,
            file=class_facts.file,
        )
