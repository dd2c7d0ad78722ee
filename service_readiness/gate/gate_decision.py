from enum import Enum

import msgspec


SERVICE_UNAVAILABLE_STATUS = 502


class GateDecision(Enum):
    """Outcome of consulting the gate for one request."""

    PROCEED = "proceed"  # Ready, pass the request through
    BYPASS = "bypass"  # Not ready, but the path is whitelisted
    REJECT = "reject"  # Not ready, respond with SERVICE_UNAVAILABLE_STATUS


class GateRejection(msgspec.Struct, frozen=True):
    status_code: int = SERVICE_UNAVAILABLE_STATUS
