from __future__ import annotations

import asyncio
from pathlib import Path

from textual.widgets.text_area import Selection

from onewriter_actions.actions import ActionRef, ActionRegistry, move_line_down
from onewriter_actions.adapters.textual.app import ActionsApp


def run(scenario) -> None:
    asyncio.run(scenario())


def test_run_action_moves_line_up() -> None:
    async def scenario() -> None:
        app = ActionsApp("a\nb\nc")
        async with app.run_test() as pilot:
            assert app.editor is not None
            app.editor.set_selected_range(2)

            app.action_run_action("lines.move_up")
            await pilot.pause()

            assert app.editor.get_text() == "b\na\nc"
            assert app.editor.get_selected_range() == (0, 0)
            assert app.last_result is not None and app.last_result.applied

    run(scenario)


def test_shortcut_runs_move_down() -> None:
    async def scenario() -> None:
        app = ActionsApp("a\nb\nc")
        async with app.run_test() as pilot:
            assert app.editor is not None
            app.editor.set_selected_range(0)

            await pilot.press("alt+down")
            await pilot.pause()

            assert app.editor.get_text() == "b\na\nc"
            assert app.editor.get_selected_range() == (2, 2)

    run(scenario)


def test_shortcuts_come_from_the_injected_registry() -> None:
    registry = ActionRegistry()
    registry.register(
        ActionRef(id="custom.swap", handler=move_line_down, title="Swap", shortcut="f5")
    )

    async def scenario() -> None:
        app = ActionsApp("a\nb\nc", registry=registry)
        async with app.run_test() as pilot:
            assert app.editor is not None
            app.editor.set_selected_range(0)

            await pilot.press("alt+up")
            await pilot.pause()
            assert app.editor.get_text() == "a\nb\nc"
            assert app.last_result is None

            await pilot.press("f5")
            await pilot.pause()
            assert app.editor.get_text() == "b\na\nc"
            assert app.last_result is not None and app.last_result.applied

    run(scenario)


def test_crlf_document_uses_newline_offsets() -> None:
    async def scenario() -> None:
        app = ActionsApp("a\r\nb\r\nc")
        async with app.run_test() as pilot:
            editor = app.editor
            assert editor is not None
            editor.set_selected_range(2)
            assert editor.get_selected_line_range() == (2, 3)

            app.action_run_action("lines.move_up")
            await pilot.pause()

            assert editor.get_text() == "b\na\nc"
            assert editor.get_selected_range() == (0, 0)

    run(scenario)


def test_noop_leaves_text_alone() -> None:
    async def scenario() -> None:
        app = ActionsApp("only line")
        async with app.run_test() as pilot:
            app.action_run_action("lines.move_down")
            await pilot.pause()

            assert app.editor is not None
            assert app.editor.get_text() == "only line"
            assert app.last_result is not None
            assert app.last_result.status == "noop"

    run(scenario)


def test_editor_orders_reversed_widget_selection() -> None:
    async def scenario() -> None:
        app = ActionsApp("a\nbee\nc")
        async with app.run_test():
            editor = app.editor
            assert editor is not None
            editor.text_area.selection = Selection((1, 2), (0, 1))

            assert editor.get_selected_range() == (1, 4)
            assert editor.get_selected_text() == "\nbe"
            assert editor.get_selected_line_range() == (0, 5)

    run(scenario)


def test_select_line_and_save(tmp_path: Path) -> None:
    path = tmp_path / "notes.md"

    async def scenario() -> None:
        app = ActionsApp("- [ ] one\n- [x] two", path=path)
        async with app.run_test() as pilot:
            editor = app.editor
            assert editor is not None
            editor.set_selected_range(12)

            app.action_run_action("lines.select")
            app.action_save()
            await pilot.pause()

            assert editor.get_selected_range() == (10, 19)
            assert editor.get_todos("completed") == [("two", "completed")]
            assert editor.get_file_name() == "notes.md"

    run(scenario)
    assert path.read_text(encoding="utf-8") == "- [ ] one\n- [x] two"
