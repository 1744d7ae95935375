"""Tests for the responder chain and command invocation."""

import asyncio

from quick_actions.models.command import ActionCommand, ActionRef, CommandKind
from quick_actions.models.menu import MenuItem
from quick_actions.services.dispatch import ActionSender, perform
from quick_actions.services.responder import CheckActionValidator, ResponderChain


class Editor:
    """Responder with its own menu validation."""

    def __init__(self):
        self.wrapped = True
        self.calls = []

    def validate_menu_item(self, item):
        item.title = "Disable Word Wrap" if self.wrapped else "Enable Word Wrap"

    def action_toggle_word_wrap(self):
        self.wrapped = not self.wrapped
        self.calls.append("toggle_word_wrap")


class Application:
    """Responder validating through Textual-style check_action."""

    def __init__(self, modified=False):
        self.modified = modified
        self.calls = []

    def check_action(self, action, parameters):
        if action == "revert":
            return True if self.modified else None
        if action == "debug":
            return False
        return True

    def action_revert(self):
        self.calls.append("revert")

    def action_debug(self):
        pass

    def action_run_script(self, name):
        self.calls.append(("run_script", name))

    async def action_quit(self):
        self.calls.append("quit")


def command(title, action, payload=None, tag=0):
    return ActionCommand(
        kind=CommandKind.COMMAND,
        title=title,
        action=ActionRef(action),
        tag=tag,
        payload=payload,
    )


class TestResolveValidator:
    """Finding what validates a menu item."""

    def test_first_responder_wins(self):
        editor, app = Editor(), Application()
        chain = ResponderChain([editor, app])

        item = MenuItem.leaf("Enable Word Wrap", "toggle_word_wrap")
        validator = chain.resolve_validator(item)
        validator.validate_menu_item(item)

        assert validator is editor
        assert item.title == "Disable Word Wrap"

    def test_check_action_maps_to_states(self):
        chain = ResponderChain([Application(modified=False)])

        revert = MenuItem.leaf("Revert", "revert")
        debug = MenuItem.leaf("Debug", "debug")
        for item in (revert, debug):
            chain.resolve_validator(item).validate_menu_item(item)

        assert (revert.enabled, revert.hidden) == (False, False)
        assert (debug.enabled, debug.hidden) == (False, True)

    def test_check_action_enabled(self):
        item = MenuItem.leaf("Revert", "revert")
        CheckActionValidator(Application(modified=True)).validate_menu_item(item)
        assert item.enabled and not item.hidden

    def test_unhandled_action_has_no_validator(self):
        chain = ResponderChain([Editor(), Application()])
        assert chain.resolve_validator(MenuItem.leaf("Print", "print")) is None

    def test_groups_have_no_validator(self):
        chain = ResponderChain([Application()])
        assert chain.resolve_validator(MenuItem.group("File", [])) is None

    def test_explicit_target_takes_precedence(self):
        editor = Editor()
        chain = ResponderChain([Application()])
        item = MenuItem.leaf("Revert", "revert", target=editor)
        assert chain.resolve_validator(item) is editor

    def test_responders_can_be_computed(self):
        responders = []
        chain = ResponderChain(lambda: responders)
        assert chain.target_for_action(ActionRef("revert")) is None

        app = Application()
        responders.append(app)
        assert chain.target_for_action(ActionRef("revert")) is app


class TestPerform:
    """Invoking commands through the chain."""

    def test_perform_calls_handler(self):
        editor = Editor()
        chain = ResponderChain([editor, Application()])

        assert perform(command("Disable Word Wrap", "toggle_word_wrap"), chain) is True
        assert editor.calls == ["toggle_word_wrap"]

    def test_payload_is_passed(self):
        app = Application()
        chain = ResponderChain([app])

        perform(command("Sort Lines", "run_script", payload="sort.py"), chain)

        assert app.calls == [("run_script", "sort.py")]

    def test_no_handler_returns_false(self):
        chain = ResponderChain([Editor()])
        assert perform(command("Print", "print"), chain) is False

    def test_async_handler_is_scheduled(self):
        app = Application()
        chain = ResponderChain([app])

        async def scenario():
            assert chain.send_action(ActionRef("quit"), ActionSender("Quit")) is True
            await asyncio.sleep(0)

        asyncio.run(scenario())
        assert app.calls == ["quit"]

    def test_async_handler_runs_without_event_loop(self):
        app = Application()
        chain = ResponderChain([app])

        assert chain.send_action(ActionRef("quit"), ActionSender("Quit")) is True
        assert app.calls == ["quit"]

    def test_sender_mirrors_command(self):
        received = []

        class Recorder:
            def send_action(self, action, sender):
                received.append((action, sender))
                return True

        cmd = command("Make Lower Case", "change_case", payload="lower", tag=1)
        assert perform(cmd, Recorder()) is True
        assert received == [
            (ActionRef("change_case"), ActionSender("Make Lower Case", tag=1, payload="lower")),
        ]
