# src/spellcheck_core/utils/load_config.py

"""Load JSON settings files from a <data/> directory with caching and typed coercions.

Modes:
- "validated_dict"  -> return the object produced by a validator from a JSON object
- "words"           -> return frozenset[str] (ignored word and keyword list files)

Used by configuration.load_splitter_configuration() for the settings file and
the word-list files it names.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

# --- optional json5 support for commented settings files ---------------------
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["validated_dict", "words"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_DATA_DIR_VARS = ("SPELLCHECK_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested settings file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a settings file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory settings cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    for var in _DATA_DIR_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map a settings name onto <data>/<name>.json, refusing paths outside the data dir."""
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = base_dir.resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except ConfigParseError:
        raise
    except ValueError as e:
        # json.JSONDecodeError and json5's parse errors
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _as_words(path: Path, data: Any) -> frozenset[str]:
    if not isinstance(data, list):
        raise ConfigTypeError(
            f"{path.name}: expected list for mode 'words', got {type(data).__name__}"
        )
    bad = [x for x in data if not isinstance(x, str)]
    if bad:
        preview = ", ".join(type(x).__name__ for x in bad[:3])
        raise ConfigTypeError(
            f"{path.name}: word lists must contain only strings (first bad types: {preview})"
        )
    return frozenset(w.strip() for w in data if w.strip())


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "validated_dict",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results.

    Results produced by a validator are not cached since the validator may be
    stateful; everything else is cached by file mtime.
    """
    path = _resolve_path(file, base_dir)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments)
    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    data = _read_json(path, encoding, allow_comments)

    if mode == "words":
        result: Any = _as_words(path, data)
    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        result = data
        if validator is not None:
            try:
                result = validator(data)
            except (ConfigTypeError, ConfigParseError):
                raise
            except (TypeError, ValueError, KeyError) as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
            log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s", path.name)

    return result
