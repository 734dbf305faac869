"""Config loading and path resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from prdcheck.core.contracts.config import PrdCheckConfig, PrdPaths
from prdcheck.core.contracts.exceptions import ConfigError


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def resolve_config(config: PrdCheckConfig, *, base_dir: Path) -> PrdCheckConfig:
    """Return a copy of ``config`` with every relative path anchored at ``base_dir``."""
    resolved_paths = PrdPaths(
        prd=_resolve_path(config.paths.prd, base_dir=base_dir),
        progress=_resolve_path(config.paths.progress, base_dir=base_dir),
        original_prd=_resolve_path(config.paths.original_prd, base_dir=base_dir),
    )
    return config.model_copy(update={"paths": resolved_paths})


def default_config(base_dir: Path | None = None) -> PrdCheckConfig:
    """Default ``.wile/`` layout resolved against ``base_dir`` (the current directory if omitted)."""
    return resolve_config(PrdCheckConfig(), base_dir=base_dir or Path.cwd())


def load_config(path: str | Path) -> PrdCheckConfig:
    """Load and validate config from JSON, resolving relative paths against the config directory."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = PrdCheckConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return resolve_config(parsed, base_dir=config_path.parent)
