"""
Tests for EditorSettings validation and JSON persistence.
"""
import json

import pytest

from reelsync.application.settings import EditorSettings, SettingsManager


class TestEditorSettings:

    def test_defaults_are_valid(self):
        result = EditorSettings().validate()
        assert result.valid is True
        assert result.errors == []

    def test_default_rate_must_be_allowed(self):
        settings = EditorSettings(allowed_rates=(0.5, 2.0), default_rate=1.0)
        result = settings.validate()
        assert not result
        assert any("default_rate" in e for e in result.errors)

    @pytest.mark.parametrize("field,value", [
        ("default_volume", 1.5),
        ("echo_epsilon_seconds", -0.1),
        ("pixels_per_second", 0),
        ("log_level", "LOUD"),
        ("allowed_rates", ()),
    ])
    def test_invalid_values(self, field, value):
        settings = EditorSettings(**{field: value})
        assert settings.validate().valid is False

    def test_large_epsilon_is_a_warning(self):
        result = EditorSettings(echo_epsilon_seconds=2.0).validate()
        assert result.valid is True
        assert result.warnings

    def test_dict_round_trip_ignores_unknown_keys(self):
        data = EditorSettings(default_volume=0.5).to_dict()
        data["removed_option"] = True

        loaded = EditorSettings.from_dict(data)

        assert loaded == EditorSettings(default_volume=0.5)


class TestSettingsManager:

    def test_missing_file_gives_defaults(self, tmp_path):
        manager = SettingsManager(str(tmp_path / "settings.json"))
        assert manager.load_settings() == EditorSettings()

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        manager = SettingsManager(str(path))
        manager.set("echo_epsilon_seconds", 0.1)
        manager.set("allowed_rates", (1.0, 2.0))
        manager.save_settings()

        reloaded = SettingsManager(str(path)).load_settings()

        assert reloaded.echo_epsilon_seconds == 0.1
        assert reloaded.allowed_rates == (1.0, 2.0)
        assert json.loads(path.read_text())["allowed_rates"] == [1.0, 2.0]

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert SettingsManager(str(path)).load_settings() == EditorSettings()

    def test_invalid_values_give_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"default_volume": 7}))
        assert SettingsManager(str(path)).load_settings() == EditorSettings()

    def test_unknown_key_rejected(self, tmp_path):
        manager = SettingsManager(str(tmp_path / "settings.json"))
        with pytest.raises(KeyError):
            manager.set("nope", 1)
