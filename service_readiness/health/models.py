from typing import Any

import msgspec


class DependencyHealth(msgspec.Struct, kw_only=True):
    name: str
    metadata: dict[str, str] = msgspec.field(default_factory=dict)
    healthy: bool
    critical: bool


class DependenciesHealth(msgspec.Struct, kw_only=True):
    all_dependencies_healthy: bool
    all_critical_dependencies_healthy: bool
    dependencies: list[DependencyHealth] = msgspec.field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return msgspec.to_builtins(self)

    def to_json(self) -> bytes:
        return msgspec.json.encode(self)
