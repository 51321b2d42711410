"""
Routers Package
"""

from dashboard.routers.instances import router as instances_router
from dashboard.routers.scripts import router as scripts_router

__all__ = [
    "instances_router",
    "scripts_router",
]
