"""Detection exceptions.

Raised inside detectors, caught at the isolation boundaries and handed
to the error reporter. Never escape a public detection entry point.
"""

from __future__ import annotations

from beanwire.domain.exceptions.base import BeanwireError


class DetectionError(BeanwireError):
    """Fault while detecting injections or beans.

    Attributes:
        context: Where the fault happened (e.g., "FieldInjectionDetector - class processing")
        cause: Original exception, None if raised directly
    """

    def __init__(
        self,
        message: str,
        *,
        context: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if not message:
            raise ValueError("message must be non-empty string")

        self.context = context
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class PositionCalculationError(DetectionError):
    """Fault while locating a declaration in source text.

    Attributes:
        target: Text being located (e.g., "UserRepository userRepository")
    """

    def __init__(
        self,
        message: str,
        target: str | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.target = target
        super().__init__(message, context="position calculation", cause=cause)


class AnnotationParsingError(DetectionError):
    """Fault while interpreting annotation data.

    Attributes:
        annotation_name: Annotation being processed
    """

    def __init__(
        self,
        message: str,
        annotation_name: str | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.annotation_name = annotation_name
        super().__init__(message, context="annotation parsing", cause=cause)


class SimulationError(DetectionError):
    """Fault while reconstructing a Lombok constructor shape.

    Attributes:
        class_name: Class being simulated
    """

    def __init__(
        self,
        message: str,
        class_name: str | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.class_name = class_name
        super().__init__(message, context="lombok simulation", cause=cause)


def to_detection_error(error: BaseException, context: str) -> DetectionError:
    """Convert arbitrary exception to DetectionError.

    DetectionError instances pass through unchanged.

    Args:
        error: Caught exception
        context: Where it was caught

    Returns:
        DetectionError chained to the original exception
    """
    if isinstance(error, DetectionError):
        return error

    detail = str(error) or type(error).__name__
    return DetectionError(f"{context} failed: {detail}", context=context, cause=error)


def user_friendly_message(error: DetectionError) -> str:
    """Short message suitable for a status line.

    Args:
        error: Reported error

    Returns:
        Human readable description
    """
    match error:
        case PositionCalculationError(target=str() as target):
            return f"Could not locate '{target}' in source."
        case AnnotationParsingError(annotation_name=str() as name):
            return f"Could not interpret annotation @{name}."
        case SimulationError(class_name=str() as name):
            return f"Could not simulate Lombok constructors for '{name}'."
    return str(error) or "Error while analyzing Java sources."
