"""Application layer for injection analysis.

Components:
- detectors: Injection detection strategies and the shared driver
- services: Bean resolution orchestrator (BeanResolutionService)
- reporters: Output formatting (rich console)
"""

from beanwire.application.detectors import (
    BaseDetector,
    BeanMethodInjectionDetector,
    ConstructorInjectionDetector,
    FieldInjectionDetector,
    LombokInjectionDetector,
    SetterInjectionDetector,
    default_detectors,
    detect_all,
)
from beanwire.application.reporters import (
    ByKindStrategy,
    ByTargetStrategy,
    ConsoleConfig,
    ConsoleReporter,
)
from beanwire.application.services import BeanResolutionService

__all__ = [
    # Detectors
    "BaseDetector",
    "BeanMethodInjectionDetector",
    "ConstructorInjectionDetector",
    "FieldInjectionDetector",
    "LombokInjectionDetector",
    "SetterInjectionDetector",
    "default_detectors",
    "detect_all",
    # Reporters
    "ByKindStrategy",
    "ByTargetStrategy",
    "ConsoleConfig",
    "ConsoleReporter",
    # Services
    "BeanResolutionService",
]
