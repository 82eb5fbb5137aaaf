"""Domain model entities."""

from beanwire.domain.model.annotation import Annotation, find_annotation
from beanwire.domain.model.bean_definition import BeanDefinition
from beanwire.domain.model.class_ import ClassFacts
from beanwire.domain.model.configuration import AnalysisConfig
from beanwire.domain.model.constructor import ConstructorFacts
from beanwire.domain.model.enums import AnnotationKind, DefinitionKind, InjectionKind, Visibility
from beanwire.domain.model.field import FieldFacts
from beanwire.domain.model.file_analysis import FileAnalysis
from beanwire.domain.model.injection import InjectionInfo
from beanwire.domain.model.lombok import (
    LombokAnnotationInfo,
    LombokFieldAnalysis,
    LombokSimulationResult,
)
from beanwire.domain.model.method import MethodFacts
from beanwire.domain.model.parameter import Parameter
from beanwire.domain.model.position import Position, Range
from beanwire.domain.model.virtual_constructor import LOMBOK_CONSTRUCTOR_KINDS, VirtualConstructor

__all__ = [
    # Source facts
    "Annotation",
    "ClassFacts",
    "ConstructorFacts",
    "FieldFacts",
    "MethodFacts",
    "Parameter",
    "Position",
    "Range",
    "find_annotation",
    # Enums
    "AnnotationKind",
    "DefinitionKind",
    "InjectionKind",
    "Visibility",
    # Results
    "BeanDefinition",
    "FileAnalysis",
    "InjectionInfo",
    # Lombok
    "LOMBOK_CONSTRUCTOR_KINDS",
    "LombokAnnotationInfo",
    "LombokFieldAnalysis",
    "LombokSimulationResult",
    "VirtualConstructor",
    # Configuration
    "AnalysisConfig",
]
