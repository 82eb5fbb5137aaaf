"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class AnnotationKind(Enum):
    """Closed set of annotation kinds recognized by the detectors.

    Value is the Java simple name of the annotation.
    UNKNOWN tags annotations outside the set, INVALID tags annotations
    the upstream extractor could not resolve structurally.
    """

    # Spring stereotypes
    COMPONENT = "Component"
    SERVICE = "Service"
    REPOSITORY = "Repository"
    CONTROLLER = "Controller"
    REST_CONTROLLER = "RestController"
    CONFIGURATION = "Configuration"
    BEAN = "Bean"
    AUTOWIRED = "Autowired"

    # Lombok
    LOMBOK_REQUIRED_ARGS_CONSTRUCTOR = "RequiredArgsConstructor"
    LOMBOK_ALL_ARGS_CONSTRUCTOR = "AllArgsConstructor"
    LOMBOK_NO_ARGS_CONSTRUCTOR = "NoArgsConstructor"
    LOMBOK_DATA = "Data"
    LOMBOK_VALUE = "Value"
    LOMBOK_SLF4J = "Slf4j"
    LOMBOK_NON_NULL = "NonNull"

    UNKNOWN = "<unknown>"
    INVALID = "<invalid>"

    @classmethod
    def from_name(cls, simple_name: str) -> AnnotationKind:
        """Map Java annotation simple name to kind.

        Accepts qualified names (lombok.NonNull) and the JSR-305 spelling
        javax.annotation.Nonnull.

        Args:
            simple_name: Annotation name as written, without '@'

        Returns:
            Matching kind, UNKNOWN if not recognized
        """
        if not simple_name:
            return cls.UNKNOWN
        name = simple_name.removeprefix("@").rsplit(".", 1)[-1]
        if name == "Nonnull":
            return cls.LOMBOK_NON_NULL
        for kind in cls:
            if kind.value == name:
                return kind
        return cls.UNKNOWN

    @property
    def is_lombok(self) -> bool:
        """Check if kind is one of the Lombok annotations."""
        return self in _LOMBOK_KINDS

    @property
    def is_bean_defining(self) -> bool:
        """Check if kind marks a class as a bean definition."""
        return self in _BEAN_DEFINING_KINDS


_LOMBOK_KINDS = frozenset(
    {
        AnnotationKind.LOMBOK_REQUIRED_ARGS_CONSTRUCTOR,
        AnnotationKind.LOMBOK_ALL_ARGS_CONSTRUCTOR,
        AnnotationKind.LOMBOK_NO_ARGS_CONSTRUCTOR,
        AnnotationKind.LOMBOK_DATA,
        AnnotationKind.LOMBOK_VALUE,
        AnnotationKind.LOMBOK_SLF4J,
        AnnotationKind.LOMBOK_NON_NULL,
    }
)

_BEAN_DEFINING_KINDS = frozenset(
    {
        AnnotationKind.COMPONENT,
        AnnotationKind.SERVICE,
        AnnotationKind.REPOSITORY,
        AnnotationKind.CONTROLLER,
        AnnotationKind.REST_CONTROLLER,
        AnnotationKind.CONFIGURATION,
        AnnotationKind.BEAN,
    }
)


class InjectionKind(Enum):
    """How the framework supplies a collaborator."""

    FIELD = "field"  # @Autowired field
    CONSTRUCTOR = "constructor"  # single or @Autowired constructor
    SETTER = "setter"  # @Autowired setter
    CONSTRUCTOR_LOMBOK = "constructor_lombok"  # Lombok-generated constructor
    BEAN_METHOD = "bean_method"  # @Bean factory method parameter


class DefinitionKind(Enum):
    """Declaration that produces a bean."""

    CLASS = "class"
    METHOD = "method"


class Visibility(Enum):
    """Java access level."""

    PUBLIC = auto()
    PROTECTED = auto()
    PACKAGE = auto()  # no modifier
    PRIVATE = auto()

    @property
    def keyword(self) -> str:
        """Java modifier keyword, empty for package-private."""
        if self is Visibility.PACKAGE:
            return ""
        return self.name.lower()
