from .create_readiness import create_readiness as create_readiness
from .gate_decision import (
    GateDecision as GateDecision,
    GateRejection as GateRejection,
    SERVICE_UNAVAILABLE_STATUS as SERVICE_UNAVAILABLE_STATUS,
)
from .middleware import ReadinessMiddleware as ReadinessMiddleware
from .request_gate import (
    RequestGate as RequestGate,
    normalize_path as normalize_path,
)
