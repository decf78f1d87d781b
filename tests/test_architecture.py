"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters don't depend on application services
- The CLI runs without the web adapter
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("train_timetable.domain.models*")
        .should_not_import("train_timetable.adapters*")
        .should_not_import("train_timetable.application*")
        .should_not_import("train_timetable.domain.contracts*")
        .should_not_import("train_timetable.domain.ports*")
        .should_not_import("train_timetable.domain.errors")
        .may_import("train_timetable.domain.models*")
        .check("train_timetable")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("train_timetable.domain.ports*")
        .should_not_import("train_timetable.adapters*")
        .should_not_import("train_timetable.application*")
        .may_import("train_timetable.domain*")
        .check("train_timetable")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("train_timetable.domain.contracts*")
        .should_not_import("train_timetable.adapters*")
        .should_not_import("train_timetable.application*")
        .may_import("train_timetable.domain*")
        .check("train_timetable")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("train_timetable.application*")
        .should_not_import("train_timetable.adapters*")
        .may_import("train_timetable.domain*")
        .may_import("train_timetable.application*")
        .check("train_timetable")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("train_timetable.adapters*")
        .should_not_import("train_timetable.application*")
        .may_import("train_timetable.domain*")
        .may_import("train_timetable.adapters*")
        .check("train_timetable", only_direct_imports=True)
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters to allow running CLI without web server."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("train_timetable.cli")
        .should_not_import("train_timetable.adapters.web*")
        .may_import("train_timetable.domain*")
        .may_import("train_timetable.application*")
        .may_import("train_timetable.adapters*")
        .check("train_timetable")
    )
