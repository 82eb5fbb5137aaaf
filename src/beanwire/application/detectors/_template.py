"""Shared detection driver.

Every strategy runs through detect_all:
    1. Validate batch (None / wrong container / empty → no work)
    2. Skip entries that are not ClassFacts
    3. Delegate each class to the strategy
    4. Isolate per-class faults (report, continue)
    5. Isolate batch faults (report once, return partial results)

The strategy never sees a None class and never handles its own errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from beanwire.domain.exceptions import to_detection_error
from beanwire.domain.model.class_ import ClassFacts

if TYPE_CHECKING:
    from beanwire.domain.model.injection import InjectionInfo
    from beanwire.domain.ports.detector import DetectorProtocol
    from beanwire.domain.ports.error_reporter import ErrorReporterProtocol


def detect_all(
    detector: DetectorProtocol,
    classes: object,
    reporter: ErrorReporterProtocol,
) -> tuple[InjectionInfo, ...]:
    """Run one strategy over a batch of classes.

    Args:
        detector: Strategy with name and detect_for_class
        classes: Batch of ClassFacts (list or tuple); anything else is ignored
        reporter: Receives every caught fault

    Returns:
        Injections of all classes, batch order then strategy order
    """
    if not isinstance(classes, (list, tuple)) or not classes:
        return ()

    injections: list[InjectionInfo] = []

    try:
        for class_facts in classes:
            if not isinstance(class_facts, ClassFacts):
                continue

            try:
                injections.extend(detector.detect_for_class(class_facts))
            except Exception as e:
                reporter.report(
                    to_detection_error(e, f"{detector.name} - class processing"),
                    detector=detector.name,
                    class_name=class_facts.name,
                    file=class_facts.file,
                )
    except Exception as e:
        reporter.report(
            to_detection_error(e, f"{detector.name} - batch processing"),
            detector=detector.name,
            total_classes=len(classes),
            processed_injections=len(injections),
            error_location="overall processing",
        )

    return tuple(injections)
