"""
Instance routes - mock EC2 instances listed and started/stopped by the dashboard
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from dashboard.dependencies import get_instance_store
from dashboard.errors import NotFoundError, ValidationError
from dashboard.models import (
    Action,
    ActionResponse,
    ErrorResponse,
    InstanceActionRequest,
    InstanceListResponse,
)
from dashboard.store import INSTANCE_NOT_FOUND, InstanceStore

router = APIRouter(prefix="/api/ec2-instances", tags=["Instances"])
logger = logging.getLogger(__name__)

MISSING_FIELDS = "Instance ID and action are required"
NOT_AN_OBJECT = "Request body must be a JSON object"


@router.get("", response_model=InstanceListResponse)
async def list_instances(
    store: InstanceStore = Depends(get_instance_store),
) -> InstanceListResponse:
    """
    List demo instances.

    Returns every instance in the store, in seed order.
    """
    return InstanceListResponse(instances=store.list())


@router.post(
    "",
    response_model=ActionResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def control_instance(
    request: Request,
    store: InstanceStore = Depends(get_instance_store),
) -> ActionResponse:
    """
    Start or stop a demo instance.

    "start" sets the instance to running, "stop" sets it to stopped.
    All checks run before the store is touched.
    """
    try:
        payload = InstanceActionRequest.model_validate(await request.json())
    except PydanticValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
        if not fields:
            raise ValidationError(NOT_AN_OBJECT) from e
        raise ValidationError(
            f"Invalid request body: {', '.join(fields)} must be a string"
        ) from e
    except ValueError as e:
        logger.warning(f"Rejected malformed instance request: {e}")
        raise ValidationError(NOT_AN_OBJECT) from e

    payload.require(MISSING_FIELDS)

    if payload.instance_id not in store:
        raise NotFoundError(INSTANCE_NOT_FOUND)

    action = Action.parse(payload.action)
    store.set_state(payload.instance_id, action.instance_state)

    return ActionResponse(message=f"Instance {action.past_tense} (demo)")
