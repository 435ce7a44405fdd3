# Role: Error taxonomy shared by the clients, the orchestrator and the HTTP layer.
# UpstreamError is absorbed by FlowController; ValidationError maps to HTTP 400.


class UpstreamError(RuntimeError):
    """A generation, embedding or search call failed or returned nothing usable."""


class ValidationError(ValueError):
    """The inbound request is missing required data."""
