"""
EC2 Demo Dashboard
Pydantic models for the instance and script endpoints
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dashboard.errors import ValidationError

INVALID_ACTION = "Invalid action. Use 'start' or 'stop'"


# Enums
class InstanceState(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"
    PENDING = "pending"  # Seed data only, never written by a request
    STOPPING = "stopping"  # Seed data only, never written by a request
    SHUTTING_DOWN = "shutting-down"  # EC2 only
    TERMINATED = "terminated"  # EC2 only
    UNKNOWN = ""  # EC2 description without a usable state


class ScriptStatus(str, Enum):
    ON = "on"
    OFF = "off"


class Action(str, Enum):
    """Start/stop action requested by the dashboard."""

    START = "start"
    STOP = "stop"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Action":
        """Parse a raw action string, rejecting anything but start/stop."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(INVALID_ACTION) from None

    @property
    def past_tense(self) -> str:
        return "started" if self is Action.START else "stopped"

    @property
    def instance_state(self) -> InstanceState:
        return InstanceState.RUNNING if self is Action.START else InstanceState.STOPPED

    @property
    def script_status(self) -> ScriptStatus:
        return ScriptStatus.ON if self is Action.START else ScriptStatus.OFF


# Instance Models
class Instance(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    state: InstanceState
    public_dns: str = Field(alias="publicDns")
    os: str


class InstanceListResponse(BaseModel):
    instances: List[Instance]


# Request Models
class InstanceActionRequest(BaseModel):
    """Body of a start/stop request. Fields are optional so that missing
    values are reported with the endpoint's own message."""

    model_config = ConfigDict(populate_by_name=True)

    instance_id: Optional[str] = Field(default=None, alias="instanceId")
    action: Optional[str] = None

    def require(self, message: str) -> None:
        """Raise ValidationError unless both instanceId and action are non-empty."""
        if not self.instance_id or not self.action:
            raise ValidationError(message)


class ScriptActionRequest(InstanceActionRequest):
    # Accepted for compatibility, ignored in demo mode
    script_path: Optional[str] = Field(default=None, alias="scriptPath")


# Response Models
class ActionResponse(BaseModel):
    success: bool = True
    message: str


class ScriptActionResponse(ActionResponse):
    model_config = ConfigDict(populate_by_name=True)

    command_id: str = Field(alias="commandId")


class ErrorResponse(BaseModel):
    error: str
