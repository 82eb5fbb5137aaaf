"""Tests for detectors/_template.py (detect_all driver)."""

from dataclasses import dataclass, field

from beanwire.application.detectors._template import detect_all
from beanwire.domain.exceptions import DetectionError
from beanwire.domain.model.class_ import ClassFacts
from beanwire.domain.model.enums import InjectionKind
from beanwire.domain.model.injection import InjectionInfo
from beanwire.infrastructure.error_reporting import CollectingErrorReporter
from tests.factories import CLASS_POSITION, CLASS_RANGE, make_class


@dataclass
class _OneInjectionPerClass:
    """Strategy emitting one injection named after each class."""

    name: str = "StubDetector"
    failing: frozenset[str] = frozenset()
    seen: list[str] = field(default_factory=list)

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        self.seen.append(class_facts.name)
        if class_facts.name in self.failing:
            raise RuntimeError(f"cannot process {class_facts.name}")
        return (
            InjectionInfo(
                target_type="Dep",
                target_name=class_facts.name.lower(),
                kind=InjectionKind.FIELD,
                position=CLASS_POSITION,
                range=CLASS_RANGE,
            ),
        )


class _ExplodingList(list):
    """List whose iteration fails after the first element."""

    def __iter__(self):  # type: ignore[no-untyped-def]
        it = super().__iter__()
        yield next(it)
        raise RuntimeError("iteration corrupted")


class TestDetectAllInputValidation:
    """Tests for batch validation."""

    def test_none_returns_empty(self) -> None:
        reporter = CollectingErrorReporter()
        assert detect_all(_OneInjectionPerClass(), None, reporter) == ()
        assert reporter.count == 0

    def test_non_sequence_returns_empty(self) -> None:
        reporter = CollectingErrorReporter()
        assert detect_all(_OneInjectionPerClass(), "not a list", reporter) == ()
        assert detect_all(_OneInjectionPerClass(), {"A": make_class()}, reporter) == ()
        assert reporter.count == 0

    def test_empty_returns_empty(self) -> None:
        detector = _OneInjectionPerClass()
        assert detect_all(detector, [], CollectingErrorReporter()) == ()
        assert detector.seen == []

    def test_skips_non_class_entries(self) -> None:
        detector = _OneInjectionPerClass()
        result = detect_all(detector, [None, make_class("A"), "junk", make_class("B")], CollectingErrorReporter())

        assert [i.target_name for i in result] == ["a", "b"]
        assert detector.seen == ["A", "B"]


class TestDetectAllIsolation:
    """Tests for per-class and batch fault isolation."""

    def test_failing_class_is_skipped(self) -> None:
        reporter = CollectingErrorReporter()
        detector = _OneInjectionPerClass(failing=frozenset({"B"}))

        result = detect_all(detector, (make_class("A"), make_class("B"), make_class("C")), reporter)

        assert [i.target_name for i in result] == ["a", "c"]
        assert reporter.count == 1
        report = reporter.reports[0]
        assert isinstance(report.error, DetectionError)
        assert isinstance(report.error.cause, RuntimeError)
        assert report.context == {
            "detector": "StubDetector",
            "class_name": "B",
            "file": make_class("B").file,
        }

    def test_batch_fault_returns_partial_results(self) -> None:
        reporter = CollectingErrorReporter()
        classes = _ExplodingList([make_class("A"), make_class("B")])

        result = detect_all(_OneInjectionPerClass(), classes, reporter)

        assert [i.target_name for i in result] == ["a"]
        assert reporter.count == 1
        assert reporter.reports[0].context == {
            "detector": "StubDetector",
            "total_classes": 2,
            "processed_injections": 1,
            "error_location": "overall processing",
        }

    def test_result_is_tuple(self) -> None:
        result = detect_all(_OneInjectionPerClass(), [make_class()], CollectingErrorReporter())
        assert isinstance(result, tuple)
