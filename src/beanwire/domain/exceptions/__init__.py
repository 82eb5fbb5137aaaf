"""Domain exceptions."""

from beanwire.domain.exceptions.base import BeanwireError, MissingClassFactsError
from beanwire.domain.exceptions.detection import (
    AnnotationParsingError,
    DetectionError,
    PositionCalculationError,
    SimulationError,
    to_detection_error,
    user_friendly_message,
)

__all__ = [
    "BeanwireError",
    "MissingClassFactsError",
    "DetectionError",
    "PositionCalculationError",
    "AnnotationParsingError",
    "SimulationError",
    "to_detection_error",
    "user_friendly_message",
]
