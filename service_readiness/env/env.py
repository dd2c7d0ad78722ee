from __future__ import annotations
from pydantic import BaseModel, StrictBool, StrictInt, StrictStr
from typing import Callable, Dict, Union

from service_readiness.logging.config import LoggingConfig

from .config import (
    DEFAULT_MAX_WAIT_MS,
    DEFAULT_RETRY_INTERVAL_MS,
    ReadinessConfig,
)

PrimaryType = Union[str, int, float, bytes, bool]


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Env(BaseModel):
    SERVICE_READINESS_RETRY_INTERVAL_MS: StrictInt = DEFAULT_RETRY_INTERVAL_MS
    SERVICE_READINESS_MAX_WAIT_MS: StrictInt = DEFAULT_MAX_WAIT_MS
    SERVICE_READINESS_WHITELISTED_PATHS: StrictStr = ""
    SERVICE_READINESS_LOG_DEPENDENCY_DATA_ON_FAILURE: StrictBool = False
    SERVICE_READINESS_PROBE_TIMEOUT_MS: StrictInt | None = None
    SERVICE_READINESS_LOG_LEVEL: StrictStr = "info"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "SERVICE_READINESS_RETRY_INTERVAL_MS": int,
            "SERVICE_READINESS_MAX_WAIT_MS": int,
            "SERVICE_READINESS_WHITELISTED_PATHS": str,
            "SERVICE_READINESS_LOG_DEPENDENCY_DATA_ON_FAILURE": _parse_bool,
            "SERVICE_READINESS_PROBE_TIMEOUT_MS": int,
            "SERVICE_READINESS_LOG_LEVEL": str,
        }

    def configure_logging(self) -> LoggingConfig:
        config = LoggingConfig()
        config.update(log_level=self.SERVICE_READINESS_LOG_LEVEL)

        return config

    def get_readiness_config(self) -> ReadinessConfig:
        whitelisted_paths = [
            path.strip()
            for path in self.SERVICE_READINESS_WHITELISTED_PATHS.split(",")
            if path.strip()
        ]

        return ReadinessConfig(
            retry_interval_ms=self.SERVICE_READINESS_RETRY_INTERVAL_MS,
            max_wait_ms=self.SERVICE_READINESS_MAX_WAIT_MS,
            whitelisted_paths=whitelisted_paths,
            log_dependency_data_on_failure=self.SERVICE_READINESS_LOG_DEPENDENCY_DATA_ON_FAILURE,
            probe_timeout_ms=self.SERVICE_READINESS_PROBE_TIMEOUT_MS,
        )
