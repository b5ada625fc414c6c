"""Configuration for leetlocal, loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

KNOWN_SHORTCUTS = ("submit", "test", "star", "solution", "description", "runlocal")


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_bool(value: str) -> bool:
    return value.lower() not in ("0", "false", "no", "")


@dataclass
class Config:
    python_commands: list[str] = field(default_factory=lambda: ["python3", "python"])
    node_command: str = "node"
    javac_command: str = "javac"
    java_command: str = "java"
    cxx_command: str = "g++"
    go_command: str = "go"
    shortcuts: list[str] = field(default_factory=lambda: ["submit", "test", "runlocal"])
    verbose: bool = False
    host: str = "127.0.0.1"
    port: int = 5057

    def __post_init__(self) -> None:
        unknown = [s for s in self.shortcuts if s not in KNOWN_SHORTCUTS]
        if unknown:
            raise ValueError(
                f"Unknown editor shortcut(s): {', '.join(unknown)}. "
                f"Valid values: {', '.join(KNOWN_SHORTCUTS)}"
            )
        if not self.python_commands:
            raise ValueError("At least one Python interpreter command is required")

    @classmethod
    def from_env(cls, **overrides) -> Config:
        kwargs: dict = {}
        env_map: dict[str, tuple[str, type]] = {
            "LEETLOCAL_PYTHON": ("python_commands", _split_list),
            "LEETLOCAL_NODE": ("node_command", str),
            "LEETLOCAL_JAVAC": ("javac_command", str),
            "LEETLOCAL_JAVA": ("java_command", str),
            "LEETLOCAL_CXX": ("cxx_command", str),
            "LEETLOCAL_GO": ("go_command", str),
            "LEETLOCAL_SHORTCUTS": ("shortcuts", _split_list),
            "LEETLOCAL_VERBOSE": ("verbose", _parse_bool),
            "LEETLOCAL_HOST": ("host", str),
            "LEETLOCAL_PORT": ("port", int),
        }
        for env_var, (field_name, conv) in env_map.items():
            val = os.environ.get(env_var)
            if val is not None:
                kwargs[field_name] = conv(val)
        kwargs.update(overrides)
        return cls(**kwargs)
