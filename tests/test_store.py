"""
Tests for the in-memory stores
"""

import pytest

from dashboard.errors import NotFoundError
from dashboard.models import InstanceState, ScriptStatus
from dashboard.store import SEED_INSTANCES, InstanceStore, ScriptStatusStore


def test_seeded_store_copies_seed_data():
    """Test mutating a seeded store never touches the seed list."""
    store = InstanceStore.seeded()
    assert len(store) == len(SEED_INSTANCES)

    store.set_state("i-0123demo1", InstanceState.STOPPED)
    assert SEED_INSTANCES[0]["state"] == "running"
    assert InstanceStore.seeded().get("i-0123demo1").state is InstanceState.RUNNING


def test_set_state_unknown_instance():
    """Test unknown instances raise NotFoundError."""
    store = InstanceStore.seeded()
    with pytest.raises(NotFoundError):
        store.set_state("i-missing", InstanceState.RUNNING)
    assert "i-missing" not in store


def test_from_ec2():
    """Test building a store from a DescribeInstances response."""
    store = InstanceStore.from_ec2(
        {
            "Reservations": [
                {
                    "Instances": [
                        {
                            "InstanceId": "i-1234567890abcdef0",
                            "InstanceType": "t3.micro",
                            "State": {"Name": "running"},
                        },
                        {"InstanceId": "i-gone", "State": {"Name": "terminated"}},
                        {"InstanceId": "i-partial"},
                    ]
                }
            ]
        }
    )
    assert [i.id for i in store.list()] == [
        "i-1234567890abcdef0",
        "i-gone",
        "i-partial",
    ]
    assert store.get("i-gone").state is InstanceState.TERMINATED
    assert store.get("i-partial").state is InstanceState.UNKNOWN


def test_script_status_defaults_off():
    """Test absent script entries are implicitly off."""
    store = ScriptStatusStore()
    assert store.get("i-anything") is ScriptStatus.OFF
    assert len(store) == 0


def test_script_status_set():
    """Test setting script status."""
    store = ScriptStatusStore()
    store.set("i-0123demo1", ScriptStatus.ON)
    assert store.get("i-0123demo1") is ScriptStatus.ON
    assert store.snapshot() == {"i-0123demo1": ScriptStatus.ON}
