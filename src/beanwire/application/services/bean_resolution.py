"""Bean resolution orchestrator.

BeanResolutionService is the primary entry point: it classifies bean
definitions and drives every injection detector over classes.

Per-class injection stages run in registry order:
    field → constructor → setter → lombok → bean method
Each stage is isolated: a fault is reported and the next stage still runs.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Self

from beanwire.application.detectors import default_detectors
from beanwire.domain.exceptions import to_detection_error
from beanwire.domain.model.bean_definition import BeanDefinition
from beanwire.domain.model.class_ import ClassFacts
from beanwire.domain.model.configuration import AnalysisConfig
from beanwire.domain.model.enums import AnnotationKind, DefinitionKind
from beanwire.domain.model.file_analysis import FileAnalysis
from beanwire.infrastructure.error_reporting import CollectingErrorReporter, LoggingErrorReporter

if TYPE_CHECKING:
    from beanwire.domain.model.annotation import Annotation
    from beanwire.domain.model.injection import InjectionInfo
    from beanwire.domain.model.method import MethodFacts
    from beanwire.domain.ports.detector import DetectorProtocol
    from beanwire.domain.ports.error_reporter import ErrorReporterProtocol
    from beanwire.domain.ports.source_text import DocumentSourceProtocol


_BEAN_ANNOTATIONS = frozenset(
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


class BeanResolutionService:
    """Bean definitions and injection points for Java classes.

    Composition-based: accepts detectors and an error reporter.
    Every fault reported by the service or its detectors goes through one
    collecting reporter, so analyze_file can attach messages to its result.

    Factory methods:
    - with_defaults(): All five detectors, logging reporter
    - from_config(): Same, honoring AnalysisConfig

    Example:
        service = BeanResolutionService.with_defaults()
        analysis = service.analyze_file("UserService.java", classes)
        for injection in analysis.injections:
            print(injection)
    """

    def __init__(
        self,
        *,
        detectors: Sequence[DetectorProtocol] | None = None,
        reporter: ErrorReporterProtocol | None = None,
        config: AnalysisConfig | None = None,
        documents: DocumentSourceProtocol | None = None,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            detectors: Detectors in stage order, registry defaults if None
            reporter: Receives every fault, logging reporter if None
            config: Engine configuration, defaults if None
            documents: Open document text for the field position fallback
        """
        self._config = config if config is not None else AnalysisConfig()
        delegate = reporter if reporter is not None else LoggingErrorReporter.from_config(self._config)
        self._errors = CollectingErrorReporter(delegate)
        self._detectors = tuple(
            detectors
            if detectors is not None
            else default_detectors(self._config, self._errors, documents)
        )

    @classmethod
    def with_defaults(cls, *, reporter: ErrorReporterProtocol | None = None) -> Self:
        """Create service with default detectors and configuration."""
        return cls(reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: AnalysisConfig,
        *,
        reporter: ErrorReporterProtocol | None = None,
        documents: DocumentSourceProtocol | None = None,
    ) -> Self:
        """Create service with detectors built from config.

        Args:
            config: Engine configuration
            reporter: Receives every fault, logging reporter if None
            documents: Open document text for the field position fallback

        Returns:
            Configured service
        """
        return cls(config=config, reporter=reporter, documents=documents)

    @property
    def detectors(self) -> tuple[DetectorProtocol, ...]:
        """Detectors in stage order."""
        return self._detectors

    @property
    def errors(self) -> CollectingErrorReporter:
        """Faults reported outside analyze_file, kept until cleared."""
        return self._errors

    # =========================================================================
    # Bean definitions
    # =========================================================================

    @staticmethod
    def is_bean_annotation(kind: AnnotationKind) -> bool:
        """Check if annotation kind marks a class as a bean."""
        return kind in _BEAN_ANNOTATIONS

    @staticmethod
    def generate_bean_name(name: str) -> str:
        """Default bean name: first character lowercased.

        Examples:
            UserService → userService
            X → x
            URLParser → uRLParser
        """
        if not name:
            return ""
        if len(name) == 1:
            return name.lower()
        return name[0].lower() + name[1:]

    @staticmethod
    def custom_bean_name(annotation: Annotation | None) -> str | None:
        """Name declared through the value or name parameter, quotes stripped."""
        if annotation is None:
            return None
        value = annotation.get("value") or annotation.get("name")
        if not value:
            return None
        return value.replace('"', "").replace("'", "") or None

    def extract_beans_from_class(
        self,
        class_facts: ClassFacts,
        file: str | None = None,
    ) -> tuple[BeanDefinition, ...]:
        """Bean definitions declared by one class.

        One CLASS definition per bean annotation on the class; for
        @Configuration classes, one METHOD definition per @Bean method.

        Args:
            class_facts: Class to classify
            file: Source file identity, class_facts.file if None

        Returns:
            Bean definitions in annotation order, then method order
        """
        file = file or class_facts.file
        beans: list[BeanDefinition] = []

        for annotation in class_facts.annotations:
            if annotation is None or not self.is_bean_annotation(annotation.kind):
                continue
            name = self.custom_bean_name(
                class_facts.find_annotation(annotation.kind)
            ) or self.generate_bean_name(class_facts.name)
            beans.append(
                BeanDefinition(
                    name=name,
                    type=class_facts.name,
                    implementation_class=class_facts.fully_qualified_name,
                    annotation=annotation.kind,
                    kind=DefinitionKind.CLASS,
                    file=file,
                    position=class_facts.position,
                    interfaces=tuple(class_facts.interfaces),
                )
            )

        if class_facts.has_annotation(AnnotationKind.CONFIGURATION):
            for method in class_facts.methods:
                if method is not None and method.has_annotation(AnnotationKind.BEAN):
                    beans.append(self._bean_from_method(method, file))

        return tuple(beans)

    def detect_beans(self, classes: Sequence[ClassFacts], file: str) -> tuple[BeanDefinition, ...]:
        """Bean definitions declared in one file.

        A fault stops the traversal; beans collected so far are returned.

        Args:
            classes: Classes of the file
            file: Source file identity

        Returns:
            Bean definitions, class order
        """
        beans: list[BeanDefinition] = []

        try:
            for class_facts in classes:
                if isinstance(class_facts, ClassFacts):
                    beans.extend(self.extract_beans_from_class(class_facts, file))
        except Exception as e:
            self._errors.report(
                to_detection_error(e, "bean detection"),
                file=file,
                class_count=len(classes) if isinstance(classes, Sequence) else 0,
            )

        return tuple(beans)

    def _bean_from_method(self, method: MethodFacts, file: str) -> BeanDefinition:
        bean_type = method.return_type or self._config.default_bean_type
        name = self.custom_bean_name(
            next((a for a in method.annotations if a is not None and a.kind is AnnotationKind.BEAN), None)
        ) or self.generate_bean_name(method.name)
        return BeanDefinition(
            name=name,
            type=bean_type,
            implementation_class=bean_type,
            annotation=AnnotationKind.BEAN,
            kind=DefinitionKind.METHOD,
            file=file,
            position=method.position,
        )

    # =========================================================================
    # Injections
    # =========================================================================

    def detect_injections_for_class(self, class_facts: ClassFacts | None) -> tuple[InjectionInfo, ...]:
        """All injection points of one class, stage order.

        Args:
            class_facts: Class to analyze (None → no injections)

        Returns:
            Concatenated results of every stage that did not fail
        """
        if class_facts is None:
            return ()

        injections: list[InjectionInfo] = []

        for detector in self._detectors:
            try:
                injections.extend(detector.detect_for_class(class_facts))
            except Exception as e:
                self._errors.report(
                    to_detection_error(e, f"{detector.name} - injection detection"),
                    detector=detector.name,
                    class_name=class_facts.name,
                    fully_qualified_name=class_facts.fully_qualified_name,
                )

        return tuple(injections)

    def detect_injections(self, classes: Sequence[ClassFacts] | None) -> tuple[InjectionInfo, ...]:
        """All injection points of a batch, class order.

        Args:
            classes: List or tuple of ClassFacts; anything else yields ()

        Returns:
            Per-class results, concatenated
        """
        if not isinstance(classes, (list, tuple)):
            return ()

        injections: list[InjectionInfo] = []
        for class_facts in classes:
            if isinstance(class_facts, ClassFacts):
                injections.extend(self.detect_injections_for_class(class_facts))
        return tuple(injections)

    def analyze_file(self, file: str, classes: Sequence[ClassFacts]) -> FileAnalysis:
        """Beans and injections of one file.

        Args:
            file: Source file identity
            classes: Classes extracted from the file

        Faults reported during this call move into the result and are
        dropped from `errors`.

        Returns:
            FileAnalysis with messages of faults reported during this call
        """
        already_reported = self._errors.count
        try:
            kept = (
                tuple(c for c in classes if isinstance(c, ClassFacts))
                if isinstance(classes, (list, tuple))
                else ()
            )
            beans = self.detect_beans(kept, file)
            injections = self.detect_injections(kept)
        finally:
            reported = self._errors.drain(already_reported)

        return FileAnalysis(
            file=file,
            classes=kept,
            bean_definitions=beans,
            injections=injections,
            errors=tuple(r.message for r in reported),
        )
