"""
In-memory storage for the demo dashboard.

Both stores live for the lifetime of the application object that owns them.
A real deployment would read instances from EC2 instead of the seed list.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from dashboard.errors import NotFoundError
from dashboard.models import Instance, InstanceState, ScriptStatus
from dashboard.transform import instances_from_reservations

logger = logging.getLogger(__name__)

INSTANCE_NOT_FOUND = "Instance not found in demo data"

# Fixed demo instances, listed in this order
SEED_INSTANCES: List[Dict[str, Any]] = [
    {
        "id": "i-0123demo1",
        "type": "t3.micro",
        "state": "running",
        "publicDns": "ec2-3-120-45-10.compute-1.amazonaws.com",
        "os": "Windows 11",
    },
    {
        "id": "i-0456demo2",
        "type": "t3.medium",
        "state": "stopped",
        "publicDns": "ec2-18-204-11-22.compute-1.amazonaws.com",
        "os": "Windows 8",
    },
    {
        "id": "i-0789demo3",
        "type": "t3.large",
        "state": "running",
        "publicDns": "ec2-54-91-32-98.compute-1.amazonaws.com",
        "os": "macOS 14",
    },
    {
        "id": "i-1011demo4",
        "type": "t3.small",
        "state": "running",
        "publicDns": "ec2-35-174-210-5.compute-1.amazonaws.com",
        "os": "Ubuntu 22.04",
    },
    {
        "id": "i-1213demo5",
        "type": "t3.medium",
        "state": "stopped",
        "publicDns": "ec2-44-201-77-89.compute-1.amazonaws.com",
        "os": "Linux (Amazon Linux 2)",
    },
    {
        "id": "i-1415demo6",
        "type": "t3.large",
        "state": "pending",
        "publicDns": "ec2-52-70-143-200.compute-1.amazonaws.com",
        "os": "Windows 11",
    },
    {
        "id": "i-1617demo7",
        "type": "t3.micro",
        "state": "stopping",
        "publicDns": "ec2-3-91-204-33.compute-1.amazonaws.com",
        "os": "Ubuntu 20.04",
    },
]


class InstanceStore:
    """Ordered mapping of instance_id -> Instance."""

    def __init__(self, instances: Optional[Iterable[Instance]] = None):
        self._instances: Dict[str, Instance] = {}
        for instance in instances or []:
            self._instances[instance.id] = instance

    @classmethod
    def seeded(cls) -> "InstanceStore":
        """Create a store holding fresh copies of the demo instances."""
        return cls(Instance.model_validate(data) for data in SEED_INSTANCES)

    @classmethod
    def from_ec2(cls, response: Dict[str, Any]) -> "InstanceStore":
        """Create a store from an EC2 DescribeInstances response."""
        return cls(instances_from_reservations(response))

    def list(self) -> List[Instance]:
        return list(self._instances.values())

    def get(self, instance_id: str) -> Optional[Instance]:
        return self._instances.get(instance_id)

    def set_state(self, instance_id: str, state: InstanceState) -> Instance:
        """Set the state of an existing instance in place."""
        instance = self._instances.get(instance_id)
        if instance is None:
            raise NotFoundError(INSTANCE_NOT_FOUND)

        previous = instance.state
        instance.state = state
        logger.info(
            f"Instance {instance_id} state changed: {previous.value} -> {state.value}"
        )
        return instance

    def __contains__(self, instance_id: object) -> bool:
        return instance_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)


class ScriptStatusStore:
    """Mapping of instance_id -> ScriptStatus. Unknown ids are off."""

    def __init__(self):
        self._statuses: Dict[str, ScriptStatus] = {}

    def get(self, instance_id: str) -> ScriptStatus:
        return self._statuses.get(instance_id, ScriptStatus.OFF)

    def set(self, instance_id: str, status: ScriptStatus) -> None:
        self._statuses[instance_id] = status
        logger.info(f"Script on instance {instance_id} is now {status.value}")

    def snapshot(self) -> Dict[str, ScriptStatus]:
        return dict(self._statuses)

    def __len__(self) -> int:
        return len(self._statuses)
