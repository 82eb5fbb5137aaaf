"""Setter injection detector."""

from __future__ import annotations

from typing import TYPE_CHECKING

from beanwire.application.detectors._base import BaseDetector
from beanwire.domain.model.enums import AnnotationKind, InjectionKind
from beanwire.domain.model.injection import InjectionInfo

if TYPE_CHECKING:
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.method import MethodFacts

_AUTOWIRED_NAME = "Autowired"


def is_autowired_setter(method: MethodFacts) -> bool:
    """Check if method is a setter carrying @Autowired.

    The annotation matches by kind or by literal name: the extractor may
    leave the kind unresolved.
    """
    if not method.is_setter_method:
        return False
    return any(
        annotation.kind is AnnotationKind.AUTOWIRED or annotation.name == _AUTOWIRED_NAME
        for annotation in method.annotations
        if annotation is not None
    )


class SetterInjectionDetector(BaseDetector):
    """Emits one SETTER injection per parameter of an @Autowired setter."""

    name = "SetterInjectionDetector"

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Delegate to detect_setter_injection."""
        return self.detect_setter_injection(class_facts)

    def detect_setter_injection(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Detect @Autowired setters of one class.

        Zero-parameter setters produce nothing.

        Args:
            class_facts: Class to analyze

        Returns:
            Injections in method then parameter order
        """
        injections: list[InjectionInfo] = []

        for method in class_facts.methods:
            if method is None or not is_autowired_setter(method):
                continue

            position_fallback = method.position or class_facts.position
            range_ = method.range or class_facts.range
            injections.extend(
                InjectionInfo(
                    target_type=param.type,
                    target_name=param.name,
                    kind=InjectionKind.SETTER,
                    position=param.position or position_fallback,
                    range=range_,
                )
                for param in method.parameters
            )

        return tuple(injections)
