# Role: Shared FlowController for the routers. Built lazily on first use so the app imports without
# credentials; tests swap it out through app.dependency_overrides[get_flow_controller].

from __future__ import annotations

from functools import lru_cache

from profsync.core.flow_controller import FlowController


@lru_cache(maxsize=1)
def get_flow_controller() -> FlowController:
    return FlowController()
