"""Configuration management for Quick Actions.

Stored in ~/.config/quick-actions/config.json. Every key is optional;
missing keys fall back to the defaults below.

The search core never reads configuration itself. The app resolves these
settings and passes plain values to the index builder and search session.
"""

from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path

from ..models.command import ActionRef
from ..models.exceptions import ConfigError, ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_ACTIONS = ["show_quick_actions"]


def _secure_write_json(path: Path, data: dict) -> None:
    """Write JSON to file with restricted permissions (0600)."""
    content = json.dumps(data, indent=2)
    # Write to temp file first, then rename for atomicity
    temp_path = path.with_suffix(".tmp")
    try:
        fd = os.open(str(temp_path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, content.encode())
        finally:
            os.close(fd)
        temp_path.rename(path)
    except OSError:
        # Fallback: write normally then chmod
        path.write_text(content)
        try:
            path.chmod(stat.S_IRUSR | stat.S_IWUSR)
        except OSError:
            pass  # Best effort on systems that don't support chmod


@dataclass
class QuickActionsConfig:
    """Settings for indexing and searching commands."""

    excluded_actions: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_ACTIONS))
    script_action: str = "run_script"
    outline_action: str = "select_outline_item"
    include_outline: bool = True
    max_results: int = 50
    offload_threshold: int = 1000

    def __post_init__(self) -> None:
        if self.max_results < 1:
            raise ConfigValidationError(
                f"max_results must be positive, got {self.max_results}",
                "use at least 1",
            )
        if self.offload_threshold < 0:
            raise ConfigValidationError(
                f"offload_threshold must not be negative, got {self.offload_threshold}",
                "use 0 to always search in a worker thread",
            )
        if not self.script_action or not self.outline_action:
            raise ConfigValidationError("script_action and outline_action must not be empty")

    @property
    def excluded_action_refs(self) -> frozenset[ActionRef]:
        return frozenset(ActionRef(name) for name in self.excluded_actions)

    @property
    def script_action_ref(self) -> ActionRef:
        return ActionRef(self.script_action)

    @property
    def outline_action_ref(self) -> ActionRef:
        return ActionRef(self.outline_action)

    def to_dict(self) -> dict:
        return {
            "excluded_actions": list(self.excluded_actions),
            "script_action": self.script_action,
            "outline_action": self.outline_action,
            "include_outline": self.include_outline,
            "max_results": self.max_results,
            "offload_threshold": self.offload_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuickActionsConfig":
        excluded = data.get("excluded_actions", DEFAULT_EXCLUDED_ACTIONS)
        if not isinstance(excluded, list) or not all(isinstance(a, str) for a in excluded):
            raise ConfigValidationError("excluded_actions must be a list of action names")

        return cls(
            excluded_actions=list(excluded),
            script_action=data.get("script_action", "run_script"),
            outline_action=data.get("outline_action", "select_outline_item"),
            include_outline=bool(data.get("include_outline", True)),
            max_results=int(data.get("max_results", 50)),
            offload_threshold=int(data.get("offload_threshold", 1000)),
        )


class ConfigManager:
    """Loads and saves the Quick Actions configuration file."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "quick-actions"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: QuickActionsConfig | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def config(self) -> QuickActionsConfig:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> QuickActionsConfig:
        """Load config from disk, falling back to defaults if unreadable."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                return QuickActionsConfig.from_dict(data)
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError, ConfigError) as e:
                logger.warning("Ignoring invalid config %s: %s", self._config_file, e)
        return QuickActionsConfig()

    def save_config(self, config: QuickActionsConfig) -> None:
        """Save config to disk with secure permissions."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _secure_write_json(self._config_file, config.to_dict())
        self._config = config

    def reload(self) -> QuickActionsConfig:
        """Drop the cached config and read it again."""
        self._config = None
        return self.config
