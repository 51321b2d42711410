"""
Store dependencies

The stores are created by the application factory and kept on ``app.state``,
so each application (and each test client) owns its own state.
"""

from fastapi import Request

from dashboard.store import InstanceStore, ScriptStatusStore


async def get_instance_store(request: Request) -> InstanceStore:
    """
    Return the instance store owned by the running application.

    Usage:
        @router.get("/example")
        async def example(store: InstanceStore = Depends(get_instance_store)):
            ...
    """
    return request.app.state.instance_store


async def get_script_store(request: Request) -> ScriptStatusStore:
    """Return the script status store owned by the running application."""
    return request.app.state.script_store
