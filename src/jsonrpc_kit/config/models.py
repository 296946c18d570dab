from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


def _as_path(v: Any, default: Path) -> Path:
    if v is None:
        return default
    if isinstance(v, Path):
        return v
    if isinstance(v, str):
        return Path(v)
    raise TypeError(f"expected path-like value, got {type(v).__name__}")


def _as_bool(v: Any, default: bool) -> bool:
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    raise TypeError(f"expected bool, got {type(v).__name__}")


def _as_mapping(raw: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    v = raw.get(key)
    if v is not None and not isinstance(v, Mapping):
        raise TypeError(f"{key} must be mapping, got {type(v).__name__}")
    return v


@dataclass
class PathsSettings:
    logs_dir: Path = Path("logs")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "PathsSettings":
        d = d or {}
        return cls(logs_dir=_as_path(d.get("logs_dir"), cls.logs_dir))


@dataclass
class ObservabilitySettings:
    enabled: bool = False
    trace_type: str = "rpc"

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "ObservabilitySettings":
        d = d or {}
        trace_type = d.get("trace_type", cls.trace_type)
        if not isinstance(trace_type, str) or not trace_type:
            raise TypeError(f"trace_type must be non-empty str, got {type(trace_type).__name__}")
        return cls(enabled=_as_bool(d.get("enabled"), cls.enabled), trace_type=trace_type)


@dataclass
class Settings:
    paths: PathsSettings = field(default_factory=PathsSettings)
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)

    # Keep the raw mapping for debugging; must be JSON-serializable.
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> "Settings":
        raw = dict(raw or {})
        return cls(
            paths=PathsSettings.from_dict(_as_mapping(raw, "paths")),
            observability=ObservabilitySettings.from_dict(_as_mapping(raw, "observability")),
            raw=raw,
        )
