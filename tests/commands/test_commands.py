"""CLI tests for the focuscard Typer app."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from focuscard import __version__
from focuscard.main import app
from focuscard.models.focus.state import TimerState
from focuscard.utils.exit_codes import ERROR_CONFIG, ERROR_INTERRUPTED, ERROR_INVALID_ARGS

runner = CliRunner()


@pytest.fixture
def config_service(tmp_config):
    """Route every command to the temporary ConfigService."""
    with (
        patch("focuscard.main.get_config_service", return_value=tmp_config),
        patch("focuscard.commands.config.get_config_service", return_value=tmp_config),
        patch("focuscard.commands.labels.get_config_service", return_value=tmp_config),
        patch("focuscard.commands.timer.get_config_service", return_value=tmp_config),
    ):
        yield tmp_config


class TestVersion:
    def test_version(self, config_service):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestConfigCommands:
    def test_show(self, config_service):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "focus_minutes" in result.output

    def test_show_key(self, config_service):
        result = runner.invoke(app, ["config", "show", "timer.focus_minutes"])
        assert result.exit_code == 0
        assert "25" in result.output

    def test_show_unknown_key(self, config_service):
        result = runner.invoke(app, ["config", "show", "nope"])
        assert result.exit_code == ERROR_INVALID_ARGS

    def test_set(self, config_service):
        result = runner.invoke(app, ["config", "set", "timer.focus_minutes", "50"])
        assert result.exit_code == 0
        saved = json.loads(config_service.config_path.read_text(encoding="utf-8"))
        assert saved["timer"]["focus_minutes"] == 50

    def test_set_invalid(self, config_service):
        result = runner.invoke(app, ["config", "set", "timer.focus_minutes", "zero"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Error" in result.output

    def test_reset_confirmed(self, config_service):
        config_service.set_value("timer.focus_minutes", "10")
        result = runner.invoke(app, ["config", "reset", "--yes"])
        assert result.exit_code == 0
        assert config_service.config.timer.focus_minutes == 25

    def test_reset_declined(self, config_service):
        config_service.set_value("timer.focus_minutes", "10")
        result = runner.invoke(app, ["config", "reset"], input="n\n")
        assert result.exit_code == 0
        assert "Reset cancelled" in result.output
        assert config_service.config.timer.focus_minutes == 10


class TestLabelCommands:
    def test_list(self, config_service):
        result = runner.invoke(app, ["labels", "list"])
        assert result.exit_code == 0
        for name in ("Work", "Study", "Life"):
            assert name in result.output

    def test_rename(self, config_service):
        result = runner.invoke(app, ["labels", "rename", "1", "Reading"])
        assert result.exit_code == 0
        assert config_service.config.board.labels[1] == "Reading"

    def test_rename_blank_shows_uncategorized(self, config_service):
        result = runner.invoke(app, ["labels", "rename", "1", ""])
        assert result.exit_code == 0
        assert "uncategorized" in result.output
        assert "Warning" in result.output
        listing = runner.invoke(app, ["labels", "list"])
        assert "uncategorized" in listing.output

    def test_rename_out_of_range(self, config_service):
        result = runner.invoke(app, ["labels", "rename", "9", "x"])
        assert result.exit_code == ERROR_INVALID_ARGS


class TestTimerCommand:
    def test_start_completed(self, config_service):
        finished = TimerState(total_seconds=60, remaining_seconds=0)
        with patch(
            "focuscard.commands.timer.run_focus_session",
            return_value=("completed", finished),
        ) as run:
            result = runner.invoke(
                app, ["timer", "start", "--minutes", "1", "--task", "Write", "--no-screen"]
            )
        assert result.exit_code == 0
        run.assert_called_once()
        assert run.call_args.args[0] == 60
        assert run.call_args.kwargs["task_title"] == "Write"
        assert "Complete" in result.output

    def test_start_uses_config_minutes(self, config_service):
        config_service.set_value("timer.focus_minutes", "2")
        stopped = TimerState(total_seconds=120, remaining_seconds=100)
        with patch(
            "focuscard.commands.timer.run_focus_session",
            return_value=("stopped", stopped),
        ) as run:
            result = runner.invoke(app, ["timer", "start", "--no-screen"])
        assert result.exit_code == ERROR_INTERRUPTED
        assert run.call_args.args[0] == 120
        assert "Stopped" in result.output
        assert "00:20" in result.output

    def test_start_rejects_non_positive(self, config_service):
        result = runner.invoke(app, ["timer", "start", "--minutes", "0"])
        assert result.exit_code == ERROR_INVALID_ARGS


class TestAppCommand:
    def test_app_builds_state_and_closes_it(self, config_service):
        with patch("focuscard.utils.ui.focus_app.FocusCardApp.run") as run:
            result = runner.invoke(app, ["app", "--minutes", "5"])
        assert result.exit_code == 0
        run.assert_called_once()

    def test_app_rejects_non_positive(self, config_service):
        result = runner.invoke(app, ["app", "--minutes", "-1"])
        assert result.exit_code == ERROR_INVALID_ARGS


class TestCommandWrapper:
    def test_unexpected_error_exits_with_general_code(self, config_service):
        with patch.object(config_service, "get_value", side_effect=RuntimeError("boom")):
            result = runner.invoke(app, ["config", "show", "timer.focus_minutes"])
        assert result.exit_code == 1
        assert "unexpected error" in result.output


class TestBrokenConfig:
    """Commands run against an unreadable config.json (no service patching)."""

    @pytest.fixture
    def broken_config(self, tmp_config):
        tmp_config.config_path.write_text("{not json", encoding="utf-8")
        return tmp_config.config_path

    @pytest.mark.parametrize(
        "args",
        [
            ["labels", "list"],
            ["config", "show"],
            ["timer", "start", "--no-screen"],
            ["app"],
        ],
    )
    def test_commands_exit_with_config_code(self, broken_config, args):
        result = runner.invoke(app, args)
        assert result.exit_code == ERROR_CONFIG
        assert "config reset" in result.output

    def test_reset_restores_defaults(self, broken_config):
        result = runner.invoke(app, ["config", "reset", "--yes"])
        assert result.exit_code == 0
        saved = json.loads(broken_config.read_text(encoding="utf-8"))
        assert saved["timer"]["focus_minutes"] == 25

        listing = runner.invoke(app, ["labels", "list"])
        assert listing.exit_code == 0
        assert "Work" in listing.output

    def test_callback_logs_unreadable_config(self, broken_config, tmp_path):
        runner.invoke(app, ["labels", "list"])
        log_text = (tmp_path / "logs" / "focuscard.log").read_text(encoding="utf-8")
        assert "log level left at default" in log_text
