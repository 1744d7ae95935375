"""Shared test fixtures for Quick Actions."""

import pytest
from pathlib import Path

from quick_actions.models.menu import MenuItem
from quick_actions.services.config import ConfigManager
from quick_actions.services.index_builder import build_index


class FakeHost:
    """Validates menu items from a table of states.

    Only actions listed in `handled` have a validator; everything else is
    unresolved. `states` maps an action name to keyword overrides applied
    during validation, e.g. {"save": {"enabled": False}}.
    """

    def __init__(self, handled=(), states=None):
        self.handled = set(handled)
        self.states = states or {}
        self.validated: list[str] = []

    def resolve_validator(self, item: MenuItem):
        if item.target is not None:
            return item.target
        if item.action is not None and item.action.name in self.handled:
            return self
        return None

    def validate_menu_item(self, item: MenuItem) -> None:
        self.validated.append(item.title)
        for key, value in self.states.get(item.action.name, {}).items():
            setattr(item, key, value)


def make_scenario_menu() -> MenuItem:
    """File > New, File > Save As…, Edit > Find > Find Next."""
    leaf = MenuItem.leaf
    group = MenuItem.group
    return group("Main Menu", [
        group("File", [
            leaf("New", "new_document"),
            leaf("Save As…", "save_document_as"),
        ]),
        group("Edit", [
            group("Find", [
                leaf("Find Next", "find_next"),
            ]),
        ]),
    ])


@pytest.fixture
def scenario_menu() -> MenuItem:
    return make_scenario_menu()


@pytest.fixture
def host() -> FakeHost:
    """Host handling every action of the scenario menu."""
    return FakeHost(handled={"new_document", "save_document_as", "find_next"})


@pytest.fixture
def scenario_index(scenario_menu, host):
    return build_index(scenario_menu, host.resolve_validator)


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def make_host():
    """Factory for hosts with custom handled actions and states."""
    return FakeHost
