"""Bean method parameter injection detector.

Parameters of @Bean factory methods inside @Configuration classes
are supplied by the container. @Bean methods elsewhere are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanwire.application.detectors._base import BaseDetector
from beanwire.domain.model.enums import AnnotationKind, InjectionKind
from beanwire.domain.model.injection import InjectionInfo

if TYPE_CHECKING:
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.method import MethodFacts


@dataclass(frozen=True, slots=True)
class BeanMethodDebugInfo:
    """Summary of one class as seen by the bean method detector.

    Attributes:
        class_name: Analyzed class
        is_configuration: Class carries @Configuration
        total_methods: Declared method count
        bean_methods: @Bean method count
        bean_method_parameters: "method(Type name, ...)" per @Bean method
    """

    class_name: str
    is_configuration: bool
    total_methods: int
    bean_methods: int
    bean_method_parameters: tuple[str, ...] = ()


def _bean_methods(class_facts: ClassFacts) -> tuple[MethodFacts, ...]:
    return tuple(
        m for m in class_facts.methods if m is not None and m.has_annotation(AnnotationKind.BEAN)
    )


class BeanMethodInjectionDetector(BaseDetector):
    """Emits one BEAN_METHOD injection per @Bean method parameter.

    Range is the parameter's own when available, else the method's.
    """

    name = "BeanMethodInjectionDetector"

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Detect @Bean method parameters of a @Configuration class."""
        if not class_facts.has_annotation(AnnotationKind.CONFIGURATION):
            return ()

        injections: list[InjectionInfo] = []
        for method in _bean_methods(class_facts):
            position_fallback = method.position or class_facts.position
            range_fallback = method.range or class_facts.range
            injections.extend(
                InjectionInfo(
                    target_type=param.type,
                    target_name=param.name,
                    kind=InjectionKind.BEAN_METHOD,
                    position=param.position or position_fallback,
                    range=param.range or range_fallback,
                )
                for param in method.parameters
            )

        return tuple(injections)

    def validate_injection(self, class_facts: ClassFacts | None) -> bool:
        """Check if class can contribute bean method injections at all."""
        if class_facts is None or not class_facts.has_annotation(AnnotationKind.CONFIGURATION):
            return False
        return any(method.parameters for method in _bean_methods(class_facts))

    def debug_info(self, class_facts: ClassFacts) -> BeanMethodDebugInfo:
        """Describe what the detector sees in a class."""
        bean_methods = _bean_methods(class_facts)
        return BeanMethodDebugInfo(
            class_name=class_facts.name,
            is_configuration=class_facts.has_annotation(AnnotationKind.CONFIGURATION),
            total_methods=len(class_facts.methods),
            bean_methods=len(bean_methods),
            bean_method_parameters=tuple(
                f"{m.name}({', '.join(f'{p.type} {p.name}' for p in m.parameters)})"
                for m in bean_methods
            ),
        )
