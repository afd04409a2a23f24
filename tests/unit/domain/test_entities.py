import pytest

from checkstyle_exporter.domain.constants import FILTERS_KEY
from checkstyle_exporter.domain.entities import (
    ActiveRule,
    ExportSettings,
    RulePriority,
    profile_from_rules,
)
from checkstyle_exporter.domain.errors import UnmappedSeverityError
from checkstyle_exporter.domain.severity import SEVERITY_MAP, CheckstyleSeverity
from tests.unit.profile_test_utils import make_rule


class TestActiveRule:
    def test_module_name_is_last_segment(self) -> None:
        assert make_rule("Checker/TreeWalker/MagicNumber").module_name == "MagicNumber"

    def test_module_name_without_slash(self) -> None:
        assert make_rule("JavadocPackage").module_name == "JavadocPackage"

    def test_empty_config_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="no config key"):
            ActiveRule(config_key="", rule_key="x", severity=RulePriority.MAJOR)

    def test_get_parameter(self) -> None:
        rule = make_rule("Checker/A", parameters={"max": "10"})
        assert rule.get_parameter("max") == "10"
        assert rule.get_parameter("min") is None


class TestRulesProfile:
    def test_active_rules_by_repository_keeps_order(self) -> None:
        a = make_rule("Checker/A")
        b = make_rule("Checker/B", repository_key="pmd")
        c = make_rule("Checker/C")
        profile = profile_from_rules("p", [a, b, c])
        assert profile.active_rules_by_repository("checkstyle") == [a, c]
        assert profile.active_rules_by_repository("pmd") == [b]
        assert profile.active_rules_by_repository("findbugs") == []

    def test_str_names_profile(self) -> None:
        assert str(profile_from_rules("Sonar way", [])) == "[name=Sonar way,language=java]"


class TestRulePriority:
    @pytest.mark.parametrize("raw", ["major", "MAJOR", " Major "])
    def test_parse(self, raw: str) -> None:
        assert RulePriority.parse(raw) is RulePriority.MAJOR

    def test_parse_unknown(self) -> None:
        with pytest.raises(KeyError):
            RulePriority.parse("TRIVIAL")


class TestExportSettings:
    def test_exact_marker_enables_suppression(self) -> None:
        settings = ExportSettings('<module name="SuppressionCommentFilter"/><module name="SuppressWarningsFilter" />')
        assert settings.suppress_warnings_enabled
        assert settings.has_custom_filters

    def test_defaults(self) -> None:
        settings = ExportSettings.from_filters(None)
        assert settings.filters_xml == ""
        assert not settings.suppress_warnings_enabled
        assert not settings.has_custom_filters

    def test_whitespace_only_filters(self) -> None:
        assert not ExportSettings(" \n").has_custom_filters

    def test_get_string(self) -> None:
        settings = ExportSettings("<x/>")
        assert settings.get_string(FILTERS_KEY) == "<x/>"
        assert settings.get_string("sonar.other") is None


class TestCheckstyleSeverity:
    def test_mapping_is_total(self) -> None:
        assert set(SEVERITY_MAP) == set(RulePriority)
        for priority in RulePriority:
            assert CheckstyleSeverity.to_severity(priority) in {"info", "warning", "error"}

    def test_unmapped_value_raises(self) -> None:
        with pytest.raises(UnmappedSeverityError, match="TRIVIAL"):
            CheckstyleSeverity.to_severity("TRIVIAL")  # type: ignore[arg-type]

    def test_unhashable_value_raises(self) -> None:
        with pytest.raises(UnmappedSeverityError):
            CheckstyleSeverity.to_severity(["MAJOR"])  # type: ignore[arg-type]


class TestActiveRuleParameters:
    def test_parameters_are_read_only(self) -> None:
        rule = make_rule("Checker/A", parameters={"max": "10"})
        with pytest.raises(TypeError):
            rule.parameters["max"] = "20"  # type: ignore[index]

    def test_parameters_are_copied(self) -> None:
        overrides = {"max": "10"}
        rule = make_rule("Checker/A", parameters=overrides)
        overrides["max"] = "20"
        assert rule.get_parameter("max") == "10"
        assert rule.parameters == {"max": "10"}
