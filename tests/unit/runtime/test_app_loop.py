"""Tests for the event loop and runtime bootstrap.

The loop is driven with scripted key tokens and a recording draw callback.
"""

from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from statpane.app import BrowserSettings, resolve_settings, run_browser, run_main_loop
from statpane.browser import MAX_ENTRIES, NavigationState
from statpane.ui_theme import DEFAULT_THEME, OCEAN_THEME


def _scripted_keys(*keys: str):
    pending = list(keys)

    def read(_fd: int) -> str:
        return pending.pop(0) if pending else ""

    return read


def _fixed_size(columns: int = 80, lines: int = 24):
    return lambda _fallback: os.terminal_size((columns, lines))


class RunMainLoopTests(unittest.TestCase):
    def test_redraws_only_after_state_changes(self) -> None:
        state = NavigationState("/virtual", ["a", "b"])
        frames = []

        with mock.patch.object(NavigationState, "metadata", return_value="Size: 1 bytes\n"):
            run_main_loop(
                state,
                0,
                BrowserSettings(),
                read_key_fn=_scripted_keys("DOWN", "x", "DOWN", "q"),
                draw=frames.append,
                get_terminal_size=_fixed_size(),
            )

        self.assertEqual([frame.selected for frame in frames], [0, 1])
        self.assertEqual(state.selected, 1)

    def test_end_of_input_exits_loop(self) -> None:
        state = NavigationState("/virtual", [])
        frames = []

        run_main_loop(
            state,
            0,
            BrowserSettings(),
            read_key_fn=_scripted_keys(),
            draw=frames.append,
            get_terminal_size=_fixed_size(),
        )

        self.assertEqual(len(frames), 1)
        self.assertIsNone(frames[0].metadata_text)

    def test_resize_triggers_redraw_with_new_geometry(self) -> None:
        state = NavigationState("/virtual", [])
        sizes = iter([(80, 24), (120, 40), (120, 40)])
        frames = []

        run_main_loop(
            state,
            0,
            BrowserSettings(left_pane_percent=25.0),
            read_key_fn=_scripted_keys("x", "x", "q"),
            draw=frames.append,
            get_terminal_size=lambda _fallback: os.terminal_size(next(sizes)),
        )

        self.assertEqual([(frame.width, frame.height) for frame in frames], [(80, 24), (120, 40)])
        self.assertEqual(frames[1].left_width, 30)


class ResolveSettingsTests(unittest.TestCase):
    def test_cli_overrides_take_precedence_over_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({"max_entries": 50, "theme": "mono", "left_pane_percent": 30}),
                encoding="utf-8",
            )
            with mock.patch("statpane.config.CONFIG_PATH", config_path):
                from_config = resolve_settings()
                overridden = resolve_settings(max_entries=7, theme_name="ocean")

        self.assertEqual(from_config.max_entries, 50)
        self.assertEqual(from_config.theme.name, "mono")
        self.assertEqual(from_config.left_pane_percent, 30.0)
        self.assertEqual(overridden.max_entries, 7)
        self.assertIs(overridden.theme, OCEAN_THEME)

    def test_defaults_without_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("statpane.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                settings = resolve_settings()

        self.assertEqual(settings, BrowserSettings(MAX_ENTRIES, None, DEFAULT_THEME))


class RunBrowserTests(unittest.TestCase):
    def _run_without_tty(self, directory: str) -> bytes:
        previous_cwd = os.getcwd()
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        try:
            os.chdir(directory)
            with mock.patch("statpane.app.os.isatty", return_value=False), mock.patch(
                "statpane.app.sys.stdin"
            ) as stdin_mock, mock.patch("statpane.app.sys.stdout", stdout):
                stdin_mock.fileno.return_value = 0
                run_browser(BrowserSettings())
        finally:
            os.chdir(previous_cwd)
        return stdout.buffer.getvalue()

    def test_non_tty_prints_entry_list(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "only.txt").write_text("", encoding="utf-8")
            output = self._run_without_tty(tmp)

        self.assertEqual(output, b"only.txt\n")

    def test_non_tty_prints_undecodable_names_as_raw_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            try:
                os.mkdir(os.path.join(os.fsencode(tmp), b"bad\xff"))
            except OSError as exc:
                self.skipTest(f"filesystem rejects non-UTF-8 names: {exc}")
            output = self._run_without_tty(tmp)

        self.assertEqual(output, b"bad\xff\n")

    def test_non_tty_replaces_control_characters(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "line\nbreak").write_text("", encoding="utf-8")
            output = self._run_without_tty(tmp)

        self.assertEqual(output, b"line?break\n")

    def test_tty_runs_loop_inside_raw_mode(self) -> None:
        with mock.patch("statpane.app.os.isatty", return_value=True), mock.patch(
            "statpane.app.sys"
        ) as sys_mock, mock.patch("statpane.app.NavigationState.from_cwd") as from_cwd, mock.patch(
            "statpane.app.TerminalController"
        ) as controller_cls, mock.patch("statpane.app.run_main_loop") as loop_mock:
            sys_mock.stdin.fileno.return_value = 0
            sys_mock.stdout.fileno.return_value = 1
            settings = BrowserSettings(max_entries=9)
            run_browser(settings)

        from_cwd.assert_called_once_with(max_entries=9)
        controller_cls.assert_called_once_with(stdin_fd=0, stdout_fd=1)
        controller_cls.return_value.raw_mode.assert_called_once_with()
        loop_mock.assert_called_once_with(from_cwd.return_value, 0, settings)


if __name__ == "__main__":
    unittest.main()
