from typing import Any

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """Base log entry. Subclasses add structured fields and a default level."""

    message: str = ""
    level: LogLevel

    def fields(self) -> dict[str, Any]:
        values = {name: getattr(self, name) for name in self.__struct_fields__}
        values["level"] = self.level.value

        return values

    def to_template(
        self,
        template: str,
        context: dict[str, Any] | None = None,
    ) -> str:
        values = self.fields()

        if context:
            values.update(context)

        return template.format(**values)
