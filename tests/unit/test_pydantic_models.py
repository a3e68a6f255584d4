"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from fuzzy_match_utils.models.pydantic_models import Option, SubstitutionConfig


class TestOption:
    """Tests for Option model."""

    def test_minimal_option(self):
        option = Option(label="Wallenberg High", value=42)
        assert option.label == "Wallenberg High"
        assert option.value == 42

    def test_value_is_opaque(self):
        assert Option(label="A", value="a-id").value == "a-id"
        assert Option(label="A", value=("school", 7)).value == ("school", 7)

    def test_parametrized_value_type(self):
        option = Option[int](label="A", value="7")
        assert option.value == 7

        with pytest.raises(ValidationError):
            Option[int](label="A", value="not a number")

    def test_label_required(self):
        with pytest.raises(ValidationError):
            Option(value=1)

        with pytest.raises(ValidationError):
            Option(label=None, value=1)

    def test_value_required(self):
        with pytest.raises(ValidationError):
            Option(label="A")

    def test_option_immutable(self):
        option = Option(label="A", value=1)
        with pytest.raises(ValidationError):
            option.label = "B"

    def test_options_compare_by_content(self):
        assert Option(label="A", value=1) == Option(label="A", value=1)
        assert Option(label="A", value=1) != Option(label="A", value=2)


class TestSubstitutionConfig:
    """Tests for SubstitutionConfig model."""

    def test_empty_by_default(self):
        assert SubstitutionConfig().substitutions == {}

    def test_preserves_order(self):
        config = SubstitutionConfig(substitutions={"B": "C", "A": "B", "SAINT": "ST"})
        assert list(config.substitutions) == ["B", "A", "SAINT"]

    def test_accepts_regex_patterns(self):
        config = SubstitutionConfig(substitutions={"COLOU?R": "COLOR", "^MOUNT": "MT"})
        assert config.substitutions["COLOU?R"] == "COLOR"

    def test_rejects_invalid_pattern(self):
        with pytest.raises(ValidationError, match="Invalid substitution pattern"):
            SubstitutionConfig(substitutions={"(": "X"})

    def test_rejects_non_string_replacement(self):
        with pytest.raises(ValidationError):
            SubstitutionConfig(substitutions={"NO": None})

    def test_config_immutable(self):
        config = SubstitutionConfig(substitutions={"A": "B"})
        with pytest.raises(ValidationError):
            config.substitutions = {}
