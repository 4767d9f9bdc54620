"""Environment-driven application settings."""
from __future__ import annotations

from dataclasses import dataclass
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # カレントディレクトリの .env を読み込む

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class BuildSettings:
    input_path: Path | None = None
    output_dir: Path | None = None
    encoding: str = "utf-8"
    index_title: str = "Glossary"
    strict: bool = False


@dataclass(slots=True)
class AppSettings:
    build: BuildSettings


def _env(key: str, default: str | None = None) -> str | None:
    value = os.getenv(key)
    if value is None:
        return default
    return value


def _env_path(key: str) -> Path | None:
    value = _env(key)
    if not value:
        return None
    return Path(value)


def _env_bool(key: str, default: bool = False) -> bool:
    value = _env(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    build = BuildSettings(
        input_path=_env_path("GLOSSGEN_INPUT"),
        output_dir=_env_path("GLOSSGEN_OUTPUT_DIR"),
        encoding=_env("GLOSSGEN_ENCODING", "utf-8"),
        index_title=_env("GLOSSGEN_INDEX_TITLE", "Glossary"),
        strict=_env_bool("GLOSSGEN_STRICT"),
    )
    return AppSettings(build=build)


def reload_settings() -> None:
    get_settings.cache_clear()


__all__ = ["AppSettings", "BuildSettings", "get_settings", "reload_settings"]
