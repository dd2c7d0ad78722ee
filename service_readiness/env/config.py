from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)


DEFAULT_RETRY_INTERVAL_MS = 2000
DEFAULT_MAX_WAIT_MS = 30000


class ReadinessConfig(BaseModel):
    """
    Tunables for the readiness state machine and request gate.

    Missing or non-positive intervals fall back to their defaults
    rather than failing construction.
    """

    model_config = ConfigDict(frozen=True)

    retry_interval_ms: StrictInt = DEFAULT_RETRY_INTERVAL_MS
    max_wait_ms: StrictInt = DEFAULT_MAX_WAIT_MS
    whitelisted_paths: list[StrictStr] = []
    log_dependency_data_on_failure: StrictBool = False
    probe_timeout_ms: StrictInt | None = None

    @field_validator("retry_interval_ms", mode="before")
    @classmethod
    def _default_retry_interval(cls, value: Any):
        return _positive_or_default(value, DEFAULT_RETRY_INTERVAL_MS)

    @field_validator("max_wait_ms", mode="before")
    @classmethod
    def _default_max_wait(cls, value: Any):
        return _positive_or_default(value, DEFAULT_MAX_WAIT_MS)

    @field_validator("whitelisted_paths", mode="before")
    @classmethod
    def _default_whitelisted_paths(cls, value: Any):
        if value is None:
            return []

        return value

    @field_validator("probe_timeout_ms", mode="before")
    @classmethod
    def _disable_non_positive_probe_timeout(cls, value: Any):
        return _positive_or_default(value, None)


def _positive_or_default(value: Any, default: int | None):
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)) and value <= 0:
        return default

    return value
