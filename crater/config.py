#!/usr/bin/env python3
# crater/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, config.ini, config.toml
  3) Environment variables prefixed with CRATER_ (CRATER_PROMPT, ...)

Validation:
  - PROMPT: non-empty str
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
  - SHOW_BANNER / SHOW_BOOT / ENABLE_COMPLETION / STRICT_ERRORS: bool
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import configparser
import os
import re
import tomllib

from crater.errors import ConfigError

ENV_PREFIX = "CRATER_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "PROMPT": ">> ",
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
    "SHOW_BANNER": True,
    "SHOW_BOOT": False,
    "ENABLE_COMPLETION": True,
    # Fatal errors (bad quoting, bare `cd`) end the shell when true.
    "STRICT_ERRORS": True,
}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    prompt: str
    log_level: str
    log_file_path: Path | None

    show_banner: bool
    show_boot: bool
    enable_completion: bool
    strict_errors: bool

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    try:
        cfg.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigError(f"Cannot parse {path.name}: {exc}") from exc
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Cannot parse {path.name}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'debug'}} -> {'LOG_LEVEL': 'debug'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path | None = None) -> list[Path]:
    cwd = base or Path.cwd()
    return [
        cwd / ".env",
        cwd / "config.ini",
        cwd / "config.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _as_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigError(f"{key}: expected boolean, got {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val) or DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    if up not in _LOG_LEVELS:
        raise ConfigError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    # expand both ~ and env vars
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


def _as_prompt(val: Any) -> str:
    # Keep surrounding spaces: '>> ' is the usual value.
    if val is None or str(val) == "":
        raise ConfigError("PROMPT must not be empty")
    return str(val)


# ---------- merge & load ----------

def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


def _merge_sources(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if file.name == ".env":
            merged.update(_normalize_keys(_load_env_file(file)))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only CRATER_-prefixed keys
    env = os.environ if environ is None else environ
    for k, v in env.items():
        if k.startswith(ENV_PREFIX) and re.fullmatch(r"[A-Z0-9_]+", k):
            merged[k[len(ENV_PREFIX):]] = v
    return merged


def _validate_and_build(config: Mapping[str, Any]) -> AppConfig:
    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        prompt=_as_prompt(config.get("PROMPT", DEFAULTS["PROMPT"])),
        log_level=_as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"])),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH", DEFAULTS["LOG_FILE_PATH"])),
        show_banner=_as_bool("SHOW_BANNER", config.get("SHOW_BANNER", DEFAULTS["SHOW_BANNER"])),
        show_boot=_as_bool("SHOW_BOOT", config.get("SHOW_BOOT", DEFAULTS["SHOW_BOOT"])),
        enable_completion=_as_bool(
            "ENABLE_COMPLETION", config.get("ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"])),
        strict_errors=_as_bool(
            "STRICT_ERRORS", config.get("STRICT_ERRORS", DEFAULTS["STRICT_ERRORS"])),
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects.

    Raises:
        ConfigError: a file cannot be parsed or a value is invalid.
    """
    return _validate_and_build(_merge_sources(base, environ))
