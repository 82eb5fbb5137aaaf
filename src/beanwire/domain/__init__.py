"""beanwire domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

from beanwire.domain.exceptions import (
    BeanwireError,
    DetectionError,
    MissingClassFactsError,
)
from beanwire.domain.model import (
    AnalysisConfig,
    Annotation,
    AnnotationKind,
    BeanDefinition,
    ClassFacts,
    ConstructorFacts,
    DefinitionKind,
    FieldFacts,
    FileAnalysis,
    InjectionInfo,
    InjectionKind,
    MethodFacts,
    Parameter,
    Position,
    Range,
    VirtualConstructor,
)
from beanwire.domain.ports import (
    DetectorProtocol,
    DocumentSourceProtocol,
    ErrorReporterProtocol,
    FieldPositionFinderProtocol,
)

__all__ = [
    # Exceptions
    "BeanwireError",
    "DetectionError",
    "MissingClassFactsError",
    # Model
    "AnalysisConfig",
    "Annotation",
    "AnnotationKind",
    "BeanDefinition",
    "ClassFacts",
    "ConstructorFacts",
    "DefinitionKind",
    "FieldFacts",
    "FileAnalysis",
    "InjectionInfo",
    "InjectionKind",
    "MethodFacts",
    "Parameter",
    "Position",
    "Range",
    "VirtualConstructor",
    # Ports
    "DetectorProtocol",
    "DocumentSourceProtocol",
    "ErrorReporterProtocol",
    "FieldPositionFinderProtocol",
]
