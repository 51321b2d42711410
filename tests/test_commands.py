"""
Tests for monitoring script command plans
"""

import pytest

from dashboard.commands import (
    DOCUMENT_NAME,
    build_script_commands,
    plan_script_command,
)
from dashboard.errors import ValidationError
from dashboard.models import Action


def test_start_commands():
    """Test the start plan checks node before starting the monitor."""
    commands = build_script_commands(Action.START)
    assert commands == [
        "cd C:\\monitoring",
        "dir",
        "where node",
        "node --version",
        "node monitor.js start",
    ]


def test_stop_commands():
    """Test the stop plan."""
    assert build_script_commands(Action.STOP) == [
        "cd C:\\monitoring",
        "node monitor.js stop",
    ]


def test_custom_script_dir():
    assert build_script_commands(Action.STOP, "D:\\tools")[0] == "cd D:\\tools"


def test_send_command_kwargs():
    """Test plans translate to SSM send_command arguments."""
    plan = plan_script_command("i-0123demo1", Action.STOP)
    assert DOCUMENT_NAME == "AWS-RunPowerShellScript"
    assert plan.to_send_command_kwargs() == {
        "InstanceIds": ["i-0123demo1"],
        "DocumentName": "AWS-RunPowerShellScript",
        "Parameters": {"commands": ["cd C:\\monitoring", "node monitor.js stop"]},
    }


@pytest.mark.parametrize("value", ["restart", "", None, "START"])
def test_action_parse_rejects(value):
    """Test only exact start/stop parse."""
    with pytest.raises(ValidationError, match="Invalid action"):
        Action.parse(value)


def test_action_parse():
    assert Action.parse("start") is Action.START
    assert Action.parse("stop").past_tense == "stopped"
