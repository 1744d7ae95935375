"""Tests for Quick Actions configuration."""

import json
import stat
from pathlib import Path

import pytest

from quick_actions.models.command import ActionRef
from quick_actions.models.exceptions import ConfigValidationError
from quick_actions.services.config import ConfigManager, QuickActionsConfig


class TestQuickActionsConfig:
    """Tests for the config dataclass."""

    def test_defaults(self):
        config = QuickActionsConfig()
        assert config.excluded_action_refs == frozenset({ActionRef("show_quick_actions")})
        assert config.script_action_ref == ActionRef("run_script")
        assert config.outline_action_ref == ActionRef("select_outline_item")
        assert config.include_outline is True
        assert config.max_results == 50

    def test_from_dict_empty(self):
        assert QuickActionsConfig.from_dict({}) == QuickActionsConfig()

    def test_from_dict_with_values(self):
        config = QuickActionsConfig.from_dict({
            "excluded_actions": ["show_quick_actions", "quit"],
            "script_action": "launch_script",
            "include_outline": False,
            "max_results": 10,
        })
        assert ActionRef("quit") in config.excluded_action_refs
        assert config.script_action_ref == ActionRef("launch_script")
        assert config.include_outline is False
        assert config.max_results == 10

    def test_to_dict_round_trip(self):
        config = QuickActionsConfig(excluded_actions=[], max_results=5)
        assert QuickActionsConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("data", [
        {"max_results": 0},
        {"offload_threshold": -1},
        {"script_action": ""},
        {"excluded_actions": "show_quick_actions"},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ConfigValidationError):
            QuickActionsConfig.from_dict(data)

    def test_error_message_includes_suggestion(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            QuickActionsConfig(max_results=-3)
        assert "use at least 1" in str(exc_info.value)


class TestConfigManager:
    """Tests for loading and saving config files."""

    def test_missing_file_gives_defaults(self, config_manager: ConfigManager):
        assert config_manager.config == QuickActionsConfig()

    def test_save_and_load(self, config_manager: ConfigManager, tmp_path: Path):
        config_manager.save_config(QuickActionsConfig(max_results=7))

        reloaded = ConfigManager(config_dir=tmp_path / "config")
        assert reloaded.config.max_results == 7

    def test_saved_with_owner_only_permissions(self, config_manager: ConfigManager):
        config_manager.save_config(QuickActionsConfig())
        mode = stat.S_IMODE(config_manager.config_file.stat().st_mode)
        assert mode == 0o600

    def test_malformed_json_falls_back(self, config_manager: ConfigManager):
        config_manager.config_file.write_text("{not json")
        assert config_manager.config == QuickActionsConfig()

    def test_invalid_values_fall_back(self, config_manager: ConfigManager):
        config_manager.config_file.write_text(json.dumps({"max_results": -1}))
        assert config_manager.config == QuickActionsConfig()

    def test_reload_reads_file_again(self, config_manager: ConfigManager):
        assert config_manager.config.max_results == 50
        config_manager.config_file.write_text(json.dumps({"max_results": 3}))
        assert config_manager.reload().max_results == 3
