"""Injection detectors for Java class facts.

Each detector implements one injection pattern:
- FieldInjectionDetector: @Autowired fields
- ConstructorInjectionDetector: single or @Autowired constructors
- SetterInjectionDetector: @Autowired setters
- LombokInjectionDetector: Lombok-generated constructors
- BeanMethodInjectionDetector: @Bean factory method parameters
"""

from beanwire.application.detectors._base import BaseDetector
from beanwire.application.detectors._registry import default_detectors
from beanwire.application.detectors._template import detect_all
from beanwire.application.detectors.bean_method_detector import (
    BeanMethodDebugInfo,
    BeanMethodInjectionDetector,
)
from beanwire.application.detectors.constructor_detector import ConstructorInjectionDetector
from beanwire.application.detectors.field_detector import FieldInjectionDetector
from beanwire.application.detectors.lombok_detector import LombokInjectionDetector
from beanwire.application.detectors.setter_detector import SetterInjectionDetector

__all__ = [
    # Base
    "BaseDetector",
    "detect_all",
    # Detectors
    "BeanMethodDebugInfo",
    "BeanMethodInjectionDetector",
    "ConstructorInjectionDetector",
    "FieldInjectionDetector",
    "LombokInjectionDetector",
    "SetterInjectionDetector",
    # Factory functions
    "default_detectors",
]
