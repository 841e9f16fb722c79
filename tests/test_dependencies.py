"""Tests for version-gated dependency and task planning."""

import logging

import pytest

from dependencies import BELOW_FLOOR_MESSAGE, has_task, plan_dependencies, plan_tasks
from extension import GwtExtension
from versioning.parser import GwtVersionParseError


def _coordinates(plan):
    return [(d.configuration, d.coordinate) for d in plan.dependencies]


class TestPlanDependencies:
    """Artifacts requested per version."""

    def test_absent_version_adds_nothing(self, caplog):
        with caplog.at_level(logging.WARNING):
            plan = plan_dependencies(GwtExtension())
        assert plan.dependencies == []
        assert plan.version is None
        assert plan.version_error is None
        assert caplog.text == ""

    def test_modern_version_with_codeserver(self):
        plan = plan_dependencies(GwtExtension(gwt_version="2.8.2"))
        assert _coordinates(plan) == [
            ("gwtSdk", "com.google.gwt:gwt-dev:2.8.2"),
            ("gwtSdk", "com.google.gwt:gwt-user:2.8.2"),
            ("runtime", "com.google.gwt:gwt-servlet:2.8.2"),
            ("gwt", "com.google.gwt:gwt-codeserver:2.8.2"),
        ]

    def test_elemental_requested(self):
        plan = plan_dependencies(GwtExtension(gwt_version="2.5.0", elemental=True))
        assert ("gwt", "com.google.gwt:gwt-elemental:2.5.0") in _coordinates(plan)

    def test_codeserver_disabled(self):
        plan = plan_dependencies(GwtExtension(gwt_version="2.8.2", codeserver=False))
        assert [d.artifact for d in plan.for_configuration("gwt")] == []

    def test_old_version_skips_optional(self, caplog):
        with caplog.at_level(logging.WARNING):
            plan = plan_dependencies(GwtExtension(gwt_version="2.4.0", elemental=True))
        assert [d.artifact for d in plan.dependencies] == ["gwt-dev", "gwt-user", "gwt-servlet"]
        assert BELOW_FLOOR_MESSAGE in caplog.text

    def test_raw_version_string_is_used(self):
        plan = plan_dependencies(GwtExtension(gwt_version="2.8"))
        assert plan.dependencies[0].version == "2.8"
        assert str(plan.version) == "2.8.0"

    def test_malformed_version_warns_and_skips(self, caplog):
        with caplog.at_level(logging.WARNING):
            plan = plan_dependencies(GwtExtension(gwt_version="two.eight"))
        assert plan.dependencies == []
        assert plan.version_error is not None
        assert "GWT version two.eight can not be parsed" in caplog.text

    def test_malformed_version_strict_raises(self):
        with pytest.raises(GwtVersionParseError):
            plan_dependencies(GwtExtension(gwt_version="2"), strict=True)

    def test_to_dict(self):
        data = plan_dependencies(GwtExtension(gwt_version="2.8.2", codeserver=False)).to_dict()
        assert data["version"] == "2.8.2"
        assert data["dependencies"][0] == {
            "configuration": "gwtSdk",
            "coordinate": "com.google.gwt:gwt-dev:2.8.2",
        }


class TestPlanTasks:
    """Super Dev task gating."""

    def test_compile_tasks_always_present(self, tmp_path):
        tasks = plan_tasks(GwtExtension.defaults(tmp_path))
        by_name = {t.name: t for t in tasks}
        assert by_name["compileGwt"].war == tmp_path / "build" / "gwt" / "out"
        assert by_name["draftCompileGwt"].war == tmp_path / "build" / "gwt" / "draftOut"

    def test_super_dev_without_version(self):
        tasks = plan_tasks(GwtExtension())
        assert has_task(tasks, "gwtSuperDev")

    def test_super_dev_depends_on_java_tasks(self):
        task = [t for t in plan_tasks(GwtExtension(gwt_version="2.8.2")) if t.name == "gwtSuperDev"][0]
        assert task.depends_on == ["compileJava", "processResources"]

    def test_super_dev_with_malformed_version(self):
        assert has_task(plan_tasks(GwtExtension(gwt_version="bogus")), "gwtSuperDev")

    def test_no_super_dev_below_floor(self):
        assert not has_task(plan_tasks(GwtExtension(gwt_version="2.4.0")), "gwtSuperDev")

    def test_no_super_dev_without_codeserver(self):
        assert not has_task(plan_tasks(GwtExtension(gwt_version="2.8.2", codeserver=False)), "gwtSuperDev")
