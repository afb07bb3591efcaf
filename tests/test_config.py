"""
Tests for matcher configuration and environment loading.
"""
import pytest

from phonetic_matching import (
    ConfigurationError,
    ContactMatcherConfig,
    InvalidArgumentError,
    MatcherConfig,
    PlaceMatcherConfig,
    load_contact_config_from_env,
    load_matcher_config_from_env,
    load_place_config_from_env,
)
from phonetic_matching.config_validator import get_optional_env, parse_float, parse_int

SUFFIXES = [
    "PHONETIC_WEIGHT_PERCENTAGE",
    "MAX_RETURNS",
    "FIND_THRESHOLD",
    "MAX_DISTANCE_MARGIN_RETURNS",
    "BEST_DISTANCE_MULTIPLIER",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove matcher variables inherited from the environment."""
    for prefix in ("CONTACT_MATCHER", "PLACE_MATCHER", "TEST_MATCHER"):
        for suffix in SUFFIXES:
            monkeypatch.delenv(f"{prefix}_{suffix}", raising=False)


class TestMatcherConfig:
    """Tests for the config dataclasses."""

    def test_contact_defaults(self):
        """Test the contact matcher defaults."""
        config = ContactMatcherConfig()

        assert config.phonetic_weight_percentage == 0.7
        assert config.max_returns == 4
        assert config.find_threshold == 0.35
        assert config.max_distance_margin_returns == 0.02
        assert config.best_distance_multiplier == 1.1

    def test_place_defaults(self):
        """Test the place matcher defaults."""
        config = PlaceMatcherConfig()

        assert config.max_returns == 8
        assert config.find_threshold == 0.35

    @pytest.mark.parametrize("weight", [-0.5, 1.5])
    def test_weight_out_of_range_raises(self, weight):
        """Test that the phonetic weight must be within [0, 1]."""
        with pytest.raises(InvalidArgumentError, match="phonetic_weight_percentage"):
            MatcherConfig(weight, 4, 0.35, 0.02, 1.1)

    @pytest.mark.parametrize("weight", [0.0, 1.0])
    def test_weight_bounds_are_valid(self, weight):
        """Test that 0 and 1 are accepted."""
        assert MatcherConfig(weight, 4, 0.35, 0.02, 1.1).phonetic_weight_percentage == weight


class TestLoadConfigFromEnv:
    """Tests for environment-driven configuration."""

    def test_no_variables_gives_defaults(self):
        """Test that defaults are used when nothing is set."""
        assert load_contact_config_from_env() == ContactMatcherConfig()
        assert load_place_config_from_env() == PlaceMatcherConfig()

    def test_overrides(self, monkeypatch):
        """Test that set variables override the defaults."""
        monkeypatch.setenv("CONTACT_MATCHER_MAX_RETURNS", "2")
        monkeypatch.setenv("CONTACT_MATCHER_FIND_THRESHOLD", "0.5")
        monkeypatch.setenv("CONTACT_MATCHER_PHONETIC_WEIGHT_PERCENTAGE", " 0.25 ")

        config = load_contact_config_from_env()

        assert isinstance(config, ContactMatcherConfig)
        assert config.max_returns == 2
        assert config.find_threshold == 0.5
        assert config.phonetic_weight_percentage == 0.25
        assert config.best_distance_multiplier == 1.1

    def test_defaults_are_not_mutated(self, monkeypatch):
        """Test that the given defaults object is left untouched."""
        monkeypatch.setenv("TEST_MATCHER_MAX_RETURNS", "9")
        defaults = PlaceMatcherConfig()

        config = load_matcher_config_from_env("TEST_MATCHER", defaults)

        assert config.max_returns == 9
        assert defaults.max_returns == 8

    def test_prefixes_are_independent(self, monkeypatch):
        """Test that place variables do not affect contacts."""
        monkeypatch.setenv("PLACE_MATCHER_MAX_RETURNS", "3")

        assert load_place_config_from_env().max_returns == 3
        assert load_contact_config_from_env().max_returns == 4

    def test_blank_value_is_unset(self, monkeypatch):
        """Test that blank variables fall back to defaults."""
        monkeypatch.setenv("PLACE_MATCHER_FIND_THRESHOLD", "   ")

        assert load_place_config_from_env().find_threshold == 0.35

    def test_malformed_float_raises(self, monkeypatch):
        """Test that non-numeric values are reported."""
        monkeypatch.setenv("CONTACT_MATCHER_FIND_THRESHOLD", "close")

        with pytest.raises(ConfigurationError, match="CONTACT_MATCHER_FIND_THRESHOLD must be a number"):
            load_contact_config_from_env()

    def test_negative_max_returns_raises(self, monkeypatch):
        """Test that max_returns below 0 is rejected."""
        monkeypatch.setenv("CONTACT_MATCHER_MAX_RETURNS", "-1")

        with pytest.raises(ConfigurationError, match="at least 0"):
            load_contact_config_from_env()

    def test_weight_out_of_range_raises_configuration_error(self, monkeypatch):
        """Test that an invalid weight surfaces as a configuration error."""
        monkeypatch.setenv("PLACE_MATCHER_PHONETIC_WEIGHT_PERCENTAGE", "1.5")

        with pytest.raises(ConfigurationError, match="PLACE_MATCHER"):
            load_place_config_from_env()


class TestConfigValidator:
    """Tests for the parsing helpers."""

    def test_get_optional_env(self, monkeypatch):
        """Test default and stripping behavior."""
        monkeypatch.setenv("TEST_MATCHER_VALUE", "  x ")
        monkeypatch.delenv("TEST_MATCHER_MISSING", raising=False)

        assert get_optional_env("TEST_MATCHER_VALUE") == "x"
        assert get_optional_env("TEST_MATCHER_MISSING", "fallback") == "fallback"

    def test_parse_int_rejects_floats(self):
        """Test that integers must be written as integers."""
        with pytest.raises(ConfigurationError, match="must be an integer"):
            parse_int("2.5", "KEY")

    def test_parse_float(self):
        """Test float parsing."""
        assert parse_float("1e-2", "KEY") == 0.01
