"""
Mapping between the EC2 DescribeInstances shape and the API Instance shape.

EC2 returns instances nested under reservations:

    {"Reservations": [{"Instances": [{"InstanceId": ..., "State": {"Name": ...}}]}]}

A missing or unrecognised state maps to an empty state; only a missing
InstanceId is rejected.
"""

from typing import Any, Dict, List

from dashboard.errors import ValidationError
from dashboard.models import Instance, InstanceState


def instance_from_ec2(raw: Dict[str, Any]) -> Instance:
    """
    Convert a single EC2 instance description into an API Instance.

    Missing type, state, DNS name and platform fields become empty strings.
    The OS label prefers PlatformDetails over Platform.
    """
    instance_id = raw.get("InstanceId")
    if not instance_id:
        raise ValidationError("EC2 instance is missing InstanceId")

    state_name = (raw.get("State") or {}).get("Name") or ""
    try:
        state = InstanceState(state_name)
    except ValueError:
        state = InstanceState.UNKNOWN

    return Instance(
        id=instance_id,
        type=raw.get("InstanceType") or "",
        state=state,
        public_dns=raw.get("PublicDnsName") or "",
        os=raw.get("PlatformDetails") or raw.get("Platform") or "",
    )


def instance_to_ec2(instance: Instance) -> Dict[str, Any]:
    """Convert an API Instance back into the EC2 description shape."""
    return {
        "InstanceId": instance.id,
        "InstanceType": instance.type,
        "State": {"Name": instance.state.value},
        "PublicDnsName": instance.public_dns,
        "PlatformDetails": instance.os,
    }


def instances_from_reservations(response: Dict[str, Any]) -> List[Instance]:
    """Flatten a DescribeInstances response, keeping reservation order."""
    instances: List[Instance] = []
    for reservation in response.get("Reservations", []):
        for raw in reservation.get("Instances", []):
            instances.append(instance_from_ec2(raw))
    return instances
