"""
Script routes - monitoring script started/stopped on demo instances
"""

import logging
import os

from fastapi import APIRouter, Depends, Request

from dashboard.commands import DEFAULT_SCRIPT_DIR, DEMO_COMMAND_ID, plan_script_command
from dashboard.dependencies import get_script_store
from dashboard.errors import DashboardError, UnexpectedError
from dashboard.models import (
    Action,
    ErrorResponse,
    ScriptActionRequest,
    ScriptActionResponse,
)
from dashboard.store import ScriptStatusStore

router = APIRouter(prefix="/api/scriptRunners", tags=["Scripts"])
logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required parameters"


def _get_script_dir() -> str:
    """Get the monitoring script directory from environment."""
    return os.getenv("SCRIPT_DIR", DEFAULT_SCRIPT_DIR)


@router.post(
    "",
    response_model=ScriptActionResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def control_script(
    request: Request,
    store: ScriptStatusStore = Depends(get_script_store),
) -> ScriptActionResponse:
    """
    Start or stop the monitoring script on an instance.

    Demo mode: the script status is tracked in memory and the remote
    command plan is only logged. The instance is not looked up, so any
    instance ID is accepted.
    """
    try:
        payload = ScriptActionRequest.model_validate(await request.json())
        payload.require(MISSING_FIELDS)
        action = Action.parse(payload.action)

        plan = plan_script_command(payload.instance_id, action, _get_script_dir())
        logger.debug(
            f"Demo mode, not sending {plan.document_name} to {payload.instance_id}: "
            f"{plan.commands} (scriptPath={payload.script_path!r})"
        )

        store.set(payload.instance_id, action.script_status)
    except DashboardError:
        raise
    except Exception as e:
        logger.error(f"Error controlling script: {e}")
        raise UnexpectedError(f"Unexpected error: {e}") from e

    return ScriptActionResponse(
        command_id=DEMO_COMMAND_ID,
        message=f"Script {action.past_tense} successfully (demo)",
    )
