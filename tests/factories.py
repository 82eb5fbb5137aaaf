"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from beanwire.domain.model.annotation import Annotation
from beanwire.domain.model.class_ import ClassFacts
from beanwire.domain.model.constructor import ConstructorFacts
from beanwire.domain.model.field import FieldFacts
from beanwire.domain.model.method import MethodFacts
from beanwire.domain.model.parameter import Parameter
from beanwire.domain.model.position import Position, Range

# Default test file identity - consistent across all tests
DEFAULT_TEST_FILE = "/test/UserService.java"

CLASS_POSITION = Position(2, 13)
CLASS_RANGE = Range(Position(2, 0), Position(40, 1))


def make_range(line: int, start: int = 0, end: int = 10) -> Range:
    """Create a single-line Range for tests."""
    return Range(Position(line, start), Position(line, end))


def make_annotation(name: str, /, **parameters: str) -> Annotation:
    """Create an Annotation with kind derived from its name.

    Args:
        name: Java simple name (e.g., "Autowired", "RequiredArgsConstructor")
        **parameters: Raw annotation parameters

    Returns:
        Annotation instance
    """
    return Annotation.of(name, **parameters)


def make_param(
    name: str,
    type_: str,
    line: int | None = None,
) -> Parameter:
    """Create a Parameter, positioned on given line if any."""
    if line is None:
        return Parameter(name=name, type=type_)
    return Parameter(
        name=name,
        type=type_,
        position=Position(line, 4),
        range=make_range(line, 4, 4 + len(type_) + 1 + len(name)),
    )


def make_field(
    name: str,
    type_: str,
    *annotations: str,
    is_final: bool = False,
    is_static: bool = False,
    line: int | None = None,
) -> FieldFacts:
    """Create a FieldFacts.

    Args:
        name: Field name
        type_: Declared type
        *annotations: Annotation simple names (e.g., "Autowired", "NonNull")
        is_final: Declared final
        is_static: Declared static
        line: Declaration line, no position if None

    Returns:
        FieldFacts instance
    """
    position = Position(line, 4) if line is not None else None
    return FieldFacts(
        name=name,
        type=type_,
        annotations=tuple(make_annotation(a) for a in annotations),
        is_final=is_final,
        is_static=is_static,
        position=position,
        range=make_range(line, 4, 40) if line is not None else None,
    )


def make_method(
    name: str,
    *params: Parameter,
    annotations: tuple[Annotation, ...] = (),
    return_type: str | None = None,
    is_setter: bool = False,
    line: int = 10,
) -> MethodFacts:
    """Create a MethodFacts declared on given line."""
    return MethodFacts(
        name=name,
        return_type=return_type,
        parameters=params,
        annotations=annotations,
        is_setter_method=is_setter,
        position=Position(line, 4),
        range=make_range(line, 4, 60),
    )


def make_constructor(
    *params: Parameter,
    autowired: bool = False,
    line: int = 6,
) -> ConstructorFacts:
    """Create a ConstructorFacts declared on given line."""
    return ConstructorFacts(
        parameters=params,
        has_autowired_annotation=autowired,
        position=Position(line, 4),
        range=make_range(line, 4, 80),
    )


def make_class(
    name: str = "UserService",
    *,
    package: str | None = "com.example",
    annotations: tuple[Annotation, ...] = (),
    fields: tuple[FieldFacts, ...] = (),
    methods: tuple[MethodFacts, ...] = (),
    constructors: tuple[ConstructorFacts, ...] = (),
    interfaces: tuple[str, ...] = (),
    file: str = DEFAULT_TEST_FILE,
) -> ClassFacts:
    """Create a ClassFacts.

    Args:
        name: Simple class name
        package: Package, None for the default package
        annotations: Class-level annotations
        fields: Declared fields
        methods: Declared methods
        constructors: Hand-written constructors
        interfaces: Implemented interfaces
        file: Source file identity

    Returns:
        ClassFacts instance
    """
    return ClassFacts(
        name=name,
        fully_qualified_name=f"{package}.{name}" if package else name,
        file=file,
        position=CLASS_POSITION,
        range=CLASS_RANGE,
        package=package,
        annotations=annotations,
        fields=fields,
        methods=methods,
        constructors=constructors,
        interfaces=interfaces,
    )
