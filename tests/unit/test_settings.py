"""Test Settings loading from TOML, overrides and environment."""

import pytest

from selector_headers.core.config import Settings, load_settings
from selector_headers.core.errors import ConfigError
from selector_headers.core.naming import transform


class TestSettingsDefaults:
    def test_default_settings(self):
        settings = Settings()
        assert settings.identifiers.eligibility_marker == "."
        assert settings.identifiers.extra_start_chars == "_$"
        assert settings.identifiers.unicode_letters is False
        assert settings.messaging.destination == "fedora"
        assert settings.observability.log_level == "INFO"
        assert settings.observability.max_recorded_failures == 1000

    def test_default_rules_match_ascii_identifiers(self):
        rules = Settings().identifiers.rules()
        assert transform(".$12$34", rules) == "$12$34"
        assert transform("café.menu", rules) == "cafMenu"

    def test_unicode_rules_from_config(self):
        rules = Settings(identifiers={"unicode_letters": True}).identifiers.rules()
        assert transform("café.menu", rules) == "caféMenu"


class TestLoadSettings:
    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(config_path=tmp_path / "absent.toml")
        assert settings.messaging.destination == "fedora"

    def test_load_from_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[messaging]\n'
            'base_url = "http://repo/rest"\n'
            'destination = "repository.events"\n'
            '\n'
            '[identifiers]\n'
            'extra_start_chars = "_"\n'
        )
        settings = load_settings(config_path=path)

        assert settings.messaging.base_url == "http://repo/rest"
        assert settings.messaging.destination == "repository.events"
        assert settings.identifiers.extra_start_chars == "_"

    def test_overrides_merge_into_file_section(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[messaging]\ndestination = "a"\nbase_url = "http://x"\n')

        settings = load_settings(path, overrides={"messaging": {"destination": "b"}})

        assert settings.messaging.destination == "b"
        assert settings.messaging.base_url == "http://x"

    def test_invalid_toml_raises_config_error(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[messaging\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_settings(path)

    def test_empty_marker_rejected(self):
        with pytest.raises(ConfigError, match="eligibility_marker"):
            load_settings(overrides={"identifiers": {"eligibility_marker": ""}})

    def test_wrong_type_rejected(self):
        with pytest.raises(ConfigError):
            load_settings(overrides={"messaging": {"destination": 5}})

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SELECTOR_HEADERS_MESSAGING__DESTINATION", "from-env")
        assert load_settings().messaging.destination == "from-env"
