"""Project configuration stored as YAML."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import yaml

CONFIG_FILE_NAME = "config.yaml"

_API_SECTION = "api_keys"
_GITHUB_FIELD = "github"


def _as_string(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"{key}: expected a string, got {type(value).__name__}")


def _as_string_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected a list, got {type(value).__name__}")
    return [_as_string(item, key) for item in value]


def _as_int(value: Any, key: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _as_mapping(value: Any, key: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key}: expected a mapping, got {type(value).__name__}")
    return value


@dataclass
class ApiKeys:
    """Keys for external services."""

    github: str = ""


@dataclass
class ReconSettings:
    """Settings for the reconnaissance module."""

    threads: int = 0


@dataclass
class Config:
    """Workspace name, scope and module settings."""

    workspace: str = ""
    targets: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    api_keys: ApiKeys = field(default_factory=ApiKeys)
    recon: ReconSettings = field(default_factory=ReconSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as it is written to YAML; empty optional parts are left out."""
        data: dict[str, Any] = {
            "workspace": self.workspace,
            "targets": list(self.targets),
        }
        if self.exclude:
            data["exclude"] = list(self.exclude)
        if self.api_keys.github:
            data[_API_SECTION] = {_GITHUB_FIELD: self.api_keys.github}
        data["recon"] = {"threads": self.recon.threads}
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a configuration from parsed YAML; unknown keys are ignored."""
        root = _as_mapping(data, "config")
        api = _as_mapping(root.get(_API_SECTION), _API_SECTION)
        recon = _as_mapping(root.get("recon"), "recon")
        github = _as_string(api.get(_GITHUB_FIELD), f"{_API_SECTION}.{_GITHUB_FIELD}")
        return cls(
            workspace=_as_string(root.get("workspace"), "workspace"),
            targets=_as_string_list(root.get("targets"), "targets"),
            exclude=_as_string_list(root.get("exclude"), "exclude"),
            api_keys=ApiKeys(github=github),
            recon=ReconSettings(threads=_as_int(recon.get("threads"), "recon.threads")),
        )


def _dump(cfg: Config) -> str:
    return yaml.safe_dump(cfg.to_dict(), sort_keys=False, default_flow_style=False)


def save_config(cfg: Config, path: str | os.PathLike = CONFIG_FILE_NAME) -> None:
    """Write the configuration to a YAML file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(_dump(cfg))


def create_default_config(path: str | os.PathLike = CONFIG_FILE_NAME) -> Config:
    """Write a starter configuration file and return it."""
    cfg = Config(
        workspace="my-first-project",
        targets=["example.com"],
        exclude=["docs.example.com"],
        recon=ReconSettings(threads=50),
    )
    save_config(cfg, path)
    return cfg


def load_config(path: str | os.PathLike = CONFIG_FILE_NAME) -> Config:
    """Read a configuration file; raises FileNotFoundError if it is missing, ValueError if malformed."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML in {os.fspath(path)}: {exc}") from exc
    return Config.from_dict(data)