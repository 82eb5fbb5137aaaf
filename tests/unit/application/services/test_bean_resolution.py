"""Tests for services/bean_resolution.py."""

from unittest.mock import patch

import pytest

from beanwire.application.detectors.field_detector import FieldInjectionDetector
from beanwire.application.services.bean_resolution import BeanResolutionService
from beanwire.domain.model.class_ import ClassFacts
from beanwire.domain.model.configuration import AnalysisConfig
from beanwire.domain.model.enums import AnnotationKind, DefinitionKind, InjectionKind
from beanwire.domain.model.injection import InjectionInfo
from beanwire.infrastructure.error_reporting import CollectingErrorReporter
from beanwire.infrastructure.source_text import InMemoryDocumentSource
from tests.factories import (
    CLASS_POSITION,
    DEFAULT_TEST_FILE,
    make_annotation,
    make_class,
    make_constructor,
    make_field,
    make_method,
    make_param,
)


@pytest.fixture
def reporter() -> CollectingErrorReporter:
    return CollectingErrorReporter()


@pytest.fixture
def service(reporter: CollectingErrorReporter) -> BeanResolutionService:
    return BeanResolutionService(reporter=reporter)


def _user_service() -> ClassFacts:
    return make_class(
        "UserService",
        annotations=(make_annotation("Service"), make_annotation("RequiredArgsConstructor")),
        fields=(
            make_field("userRepository", "UserRepository", is_final=True, line=8),
            make_field("auditLog", "AuditLog", "Autowired", line=10),
        ),
        methods=(
            make_method(
                "setMailer",
                make_param("mailer", "Mailer"),
                annotations=(make_annotation("Autowired"),),
                is_setter=True,
                line=14,
            ),
        ),
        constructors=(make_constructor(make_param("userRepository", "UserRepository")),),
        interfaces=("UserApi",),
    )


def _app_config() -> ClassFacts:
    return make_class(
        "AppConfig",
        annotations=(make_annotation("Configuration"),),
        methods=(
            make_method(
                "dataSource",
                make_param("props", "DataSourceProperties"),
                annotations=(make_annotation("Bean"),),
                return_type="DataSource",
            ),
            make_method(
                "clock",
                annotations=(make_annotation("Bean", name="'systemClock'"),),
            ),
        ),
        file="/test/AppConfig.java",
    )


class TestBeanNaming:
    """Tests for generate_bean_name and custom names."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("UserService", "userService"),
            ("X", "x"),
            ("", ""),
            ("URLParser", "uRLParser"),
            ("userService", "userService"),
        ],
    )
    def test_generate_bean_name(self, name: str, expected: str) -> None:
        assert BeanResolutionService.generate_bean_name(name) == expected

    def test_custom_name_from_value(self, service: BeanResolutionService) -> None:
        cls = make_class("Foo", annotations=(make_annotation("Component", value='"custom"'),))

        (bean,) = service.extract_beans_from_class(cls)

        assert bean.name == "custom"

    def test_custom_name_from_name_parameter(self) -> None:
        annotation = make_annotation("Service", name="'billing'")
        assert BeanResolutionService.custom_bean_name(annotation) == "billing"

    def test_value_preferred_over_name(self) -> None:
        annotation = make_annotation("Service", value='"a"', name='"b"')
        assert BeanResolutionService.custom_bean_name(annotation) == "a"

    def test_empty_custom_name_ignored(self, service: BeanResolutionService) -> None:
        cls = make_class("Foo", annotations=(make_annotation("Component", value='""'),))

        (bean,) = service.extract_beans_from_class(cls)

        assert bean.name == "foo"


class TestBeanDefinitions:
    """Tests for class and method bean extraction."""

    def test_is_bean_annotation(self) -> None:
        assert BeanResolutionService.is_bean_annotation(AnnotationKind.REST_CONTROLLER)
        assert BeanResolutionService.is_bean_annotation(AnnotationKind.BEAN)
        assert not BeanResolutionService.is_bean_annotation(AnnotationKind.AUTOWIRED)
        assert not BeanResolutionService.is_bean_annotation(AnnotationKind.LOMBOK_DATA)

    def test_class_bean(self, service: BeanResolutionService) -> None:
        (bean,) = service.extract_beans_from_class(_user_service())

        assert bean.name == "userService"
        assert bean.type == "UserService"
        assert bean.implementation_class == "com.example.UserService"
        assert bean.annotation is AnnotationKind.SERVICE
        assert bean.kind is DefinitionKind.CLASS
        assert bean.file == DEFAULT_TEST_FILE
        assert bean.position == CLASS_POSITION
        assert bean.interfaces == ("UserApi",)

    def test_one_definition_per_bean_annotation(self, service: BeanResolutionService) -> None:
        cls = make_class(
            "Foo", annotations=(make_annotation("Component"), make_annotation("Service"))
        )

        beans = service.extract_beans_from_class(cls)

        assert [b.annotation for b in beans] == [AnnotationKind.COMPONENT, AnnotationKind.SERVICE]

    def test_configuration_methods(self, service: BeanResolutionService) -> None:
        config_bean, data_source, clock = service.extract_beans_from_class(_app_config())

        assert config_bean.name == "appConfig"
        assert config_bean.kind is DefinitionKind.CLASS

        assert data_source.name == "dataSource"
        assert data_source.type == "DataSource"
        assert data_source.implementation_class == "DataSource"
        assert data_source.annotation is AnnotationKind.BEAN
        assert data_source.kind is DefinitionKind.METHOD

        assert clock.name == "systemClock"
        assert clock.type == "Object"

    def test_bean_methods_outside_configuration_ignored(self, service: BeanResolutionService) -> None:
        cls = make_class(
            "Helper",
            annotations=(make_annotation("Component"),),
            methods=(make_method("clock", annotations=(make_annotation("Bean"),)),),
        )

        beans = service.extract_beans_from_class(cls)

        assert [b.kind for b in beans] == [DefinitionKind.CLASS]

    def test_default_bean_type_from_config(self) -> None:
        service = BeanResolutionService(
            config=AnalysisConfig(default_bean_type="java.lang.Object"),
            reporter=CollectingErrorReporter(),
        )

        beans = service.extract_beans_from_class(_app_config())

        assert beans[-1].type == "java.lang.Object"

    def test_detect_beans_uses_given_file(self, service: BeanResolutionService) -> None:
        beans = service.detect_beans([_user_service(), make_class("Plain")], "/other/File.java")

        assert [b.name for b in beans] == ["userService"]
        assert beans[0].file == "/other/File.java"

    def test_detect_beans_fault_returns_collected(
        self,
        service: BeanResolutionService,
        reporter: CollectingErrorReporter,
    ) -> None:
        classes = [_user_service(), make_class("Broken", annotations=(make_annotation("Service"),))]
        original = service.extract_beans_from_class

        def flaky(class_facts: ClassFacts, file: str | None = None):  # type: ignore[no-untyped-def]
            if class_facts.name == "Broken":
                raise RuntimeError("bad class")
            return original(class_facts, file)

        with patch.object(service, "extract_beans_from_class", side_effect=flaky):
            beans = service.detect_beans(classes, DEFAULT_TEST_FILE)

        assert [b.name for b in beans] == ["userService"]
        assert reporter.count == 1
        assert reporter.reports[0].context == {"file": DEFAULT_TEST_FILE, "class_count": 2}


class TestInjections:
    """Tests for per-class and batch injection detection."""

    def test_stage_order(self, service: BeanResolutionService) -> None:
        result = service.detect_injections_for_class(_user_service())

        assert [(i.kind, i.target_name) for i in result] == [
            (InjectionKind.FIELD, "auditLog"),
            (InjectionKind.CONSTRUCTOR, "userRepository"),
            (InjectionKind.SETTER, "mailer"),
            (InjectionKind.CONSTRUCTOR_LOMBOK, "userRepository"),
        ]

    def test_bean_method_stage(self, service: BeanResolutionService) -> None:
        result = service.detect_injections_for_class(_app_config())

        assert [(i.kind, i.target_name) for i in result] == [(InjectionKind.BEAN_METHOD, "props")]

    def test_none_class(self, service: BeanResolutionService) -> None:
        assert service.detect_injections_for_class(None) == ()

    def test_stage_fault_isolated(
        self,
        service: BeanResolutionService,
        reporter: CollectingErrorReporter,
    ) -> None:
        with patch.object(
            FieldInjectionDetector, "detect_for_class", side_effect=RuntimeError("boom")
        ):
            result = service.detect_injections_for_class(_user_service())

        assert InjectionKind.FIELD not in {i.kind for i in result}
        assert [i.kind for i in result] == [
            InjectionKind.CONSTRUCTOR,
            InjectionKind.SETTER,
            InjectionKind.CONSTRUCTOR_LOMBOK,
        ]
        assert reporter.count == 1
        assert reporter.reports[0].context == {
            "detector": "FieldInjectionDetector",
            "class_name": "UserService",
            "fully_qualified_name": "com.example.UserService",
        }

    def test_fault_in_second_class_reported_once(
        self,
        service: BeanResolutionService,
        reporter: CollectingErrorReporter,
    ) -> None:
        classes = [
            make_class("First", fields=(make_field("a", "A", "Autowired", line=3),)),
            make_class("Second", fields=(make_field("b", "B", "Autowired", line=3),)),
            make_class("Third", fields=(make_field("c", "C", "Autowired", line=3),)),
        ]
        original = FieldInjectionDetector.detect_for_class

        def failing_on_second(
            self: FieldInjectionDetector, class_facts: ClassFacts
        ) -> tuple[InjectionInfo, ...]:
            if class_facts.name == "Second":
                raise RuntimeError("corrupt field facts")
            return original(self, class_facts)

        with patch.object(FieldInjectionDetector, "detect_for_class", failing_on_second):
            result = service.detect_injections(classes)

        assert [i.target_name for i in result] == ["a", "c"]
        assert reporter.count == 1
        assert reporter.reports[0].context["class_name"] == "Second"

    def test_invalid_batch(self, service: BeanResolutionService) -> None:
        assert service.detect_injections(None) == ()
        assert service.detect_injections("junk") == ()  # type: ignore[arg-type]

    def test_idempotent(self, service: BeanResolutionService) -> None:
        classes = (_user_service(), _app_config())

        first = service.detect_injections(classes)
        second = service.detect_injections(classes)

        assert first == second
        assert service.analyze_file(DEFAULT_TEST_FILE, classes) == service.analyze_file(
            DEFAULT_TEST_FILE, classes
        )

    def test_configuration_scoping(self, service: BeanResolutionService) -> None:
        method = make_method(
            "dataSource",
            make_param("a", "A"),
            make_param("b", "B"),
            annotations=(make_annotation("Bean"),),
        )
        plain = make_class("Plain", methods=(method,))
        config = make_class("Config", annotations=(make_annotation("Configuration"),), methods=(method,))

        plain_result = service.detect_injections_for_class(plain)
        config_result = service.detect_injections_for_class(config)

        assert not [i for i in plain_result if i.kind is InjectionKind.BEAN_METHOD]
        assert len([i for i in config_result if i.kind is InjectionKind.BEAN_METHOD]) == 2


class TestAnalyzeFile:
    """Tests for analyze_file."""

    def test_collects_beans_and_injections(self, service: BeanResolutionService) -> None:
        analysis = service.analyze_file(DEFAULT_TEST_FILE, [_user_service(), None])

        assert analysis.file == DEFAULT_TEST_FILE
        assert [c.name for c in analysis.classes] == ["UserService"]
        assert [b.name for b in analysis.bean_definitions] == ["userService"]
        assert len(analysis.injections) == 4
        assert analysis.errors == ()

    def test_attaches_errors_of_this_call_only(self, service: BeanResolutionService) -> None:
        with patch.object(
            FieldInjectionDetector, "detect_for_class", side_effect=RuntimeError("boom")
        ):
            failed = service.analyze_file(DEFAULT_TEST_FILE, [_user_service()])

        clean = service.analyze_file(DEFAULT_TEST_FILE, [_user_service()])

        assert failed.has_errors
        assert "boom" in failed.errors[0]
        assert clean.errors == ()

    def test_reports_do_not_accumulate(self, service: BeanResolutionService) -> None:
        with patch.object(
            FieldInjectionDetector, "detect_for_class", side_effect=RuntimeError("boom")
        ):
            first = service.analyze_file(DEFAULT_TEST_FILE, [_user_service()])
            second = service.analyze_file(DEFAULT_TEST_FILE, [_user_service()])

        assert first.errors == second.errors
        assert len(second.errors) == 1
        assert service.errors.count == 0

    def test_reports_outside_analyze_file_kept(self, service: BeanResolutionService) -> None:
        with patch.object(
            FieldInjectionDetector, "detect_for_class", side_effect=RuntimeError("boom")
        ):
            service.detect_injections_for_class(_user_service())
            analysis = service.analyze_file(DEFAULT_TEST_FILE, [_user_service()])

        assert len(analysis.errors) == 1
        assert service.errors.count == 1

    def test_field_fallback_uses_documents(self) -> None:
        source = "class A {\n    @Autowired\n    private Repo repo;\n}\n"
        service = BeanResolutionService.from_config(
            AnalysisConfig(),
            reporter=CollectingErrorReporter(),
            documents=InMemoryDocumentSource({DEFAULT_TEST_FILE: source}),
        )
        cls = make_class("A", fields=(make_field("repo", "Repo", "Autowired"),))

        (injection,) = service.analyze_file(DEFAULT_TEST_FILE, [cls]).injections

        assert injection.position.line == 2
        assert injection.position.character == 17


class TestFactories:
    """Tests for service construction."""

    def test_with_defaults(self) -> None:
        service = BeanResolutionService.with_defaults(reporter=CollectingErrorReporter())
        assert len(service.detectors) == 5

    def test_custom_detectors(self, reporter: CollectingErrorReporter) -> None:
        service = BeanResolutionService(
            detectors=(FieldInjectionDetector(reporter),), reporter=reporter
        )

        result = service.detect_injections_for_class(_user_service())

        assert [i.kind for i in result] == [InjectionKind.FIELD]
