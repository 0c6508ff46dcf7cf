from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LEVELS = ("debug", "info", "warning", "error")

_SCALARS = (str, int, float, bool, type(None))


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One record per contract invocation; fields are coerced to JSON scalars at construction.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"LogMessage level must be one of {LEVELS}, got {self.level!r}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")
        # Operands arrive unvalidated; a sink must never fail on what the caller passed in.
        object.__setattr__(self, "fields", {str(k): _scalar(v) for k, v in self.fields.items()})

    def to_dict(self) -> dict[str, object]:
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "fields": self.fields,
        }


def _scalar(value: object) -> object:
    if isinstance(value, _SCALARS):
        return value
    return repr(value)
