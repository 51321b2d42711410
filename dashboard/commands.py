"""
Remote command plans for the monitoring script.

A non-demo deployment sends these lines to the instance through SSM
``send_command``. In demo mode the plan is only logged.
"""

from typing import Any, Dict, List

from pydantic import BaseModel

from dashboard.models import Action

DOCUMENT_NAME = "AWS-RunPowerShellScript"
DEFAULT_SCRIPT_DIR = "C:\\monitoring"
DEMO_COMMAND_ID = "demo-command"


class ScriptCommandPlan(BaseModel):
    instance_id: str
    document_name: str = DOCUMENT_NAME
    commands: List[str]

    def to_send_command_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``ssm.send_command``."""
        return {
            "InstanceIds": [self.instance_id],
            "DocumentName": self.document_name,
            "Parameters": {"commands": list(self.commands)},
        }


def build_script_commands(action: Action, script_dir: str = DEFAULT_SCRIPT_DIR) -> List[str]:
    """PowerShell lines that start or stop monitor.js in script_dir."""
    if action is Action.START:
        return [
            f"cd {script_dir}",
            "dir",
            "where node",
            "node --version",
            "node monitor.js start",
        ]
    return [f"cd {script_dir}", "node monitor.js stop"]


def plan_script_command(
    instance_id: str,
    action: Action,
    script_dir: str = DEFAULT_SCRIPT_DIR,
) -> ScriptCommandPlan:
    return ScriptCommandPlan(
        instance_id=instance_id,
        commands=build_script_commands(action, script_dir),
    )
