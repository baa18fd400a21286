# casemark/config.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from casemark.normalizers.casing_prefix import CasingPrefixNormalizer
from casemark.pre_tokenizers.casing_prefix import CasingPrefixPreTokenizer

# Components are tagged by "type"; both casing components carry the same tag,
# the section they are declared under decides which one is built.
NORMALIZERS: dict[str, type[BaseModel]] = {
    "CasingPrefix": CasingPrefixNormalizer,
}
PRE_TOKENIZERS: dict[str, type[BaseModel]] = {
    "CasingPrefix": CasingPrefixPreTokenizer,
}

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _level_name(v: str) -> str:
    v = str(v).strip().upper()
    if v not in _LEVELS:
        raise ValueError(f"level must be one of {sorted(_LEVELS)}")
    return v


class LoggingCfg(BaseModel):
    level: str = "WARNING"
    trace_path: Optional[Path] = None  # JSONL run traces; None disables tracing

    model_config = ConfigDict(extra="ignore")

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        return _level_name(v)


def build_component(kind: str, data: dict[str, Any]) -> BaseModel:
    """
    Rebuild a component from its serialized form, e.g. build_component("normalizer", {"type": "CasingPrefix"}).
    Always returns a fresh instance.
    """
    registry = {"normalizer": NORMALIZERS, "pre_tokenizer": PRE_TOKENIZERS}.get(kind)
    if registry is None:
        raise ValueError(f"unknown component kind: {kind!r}")
    tag = (data or {}).get("type")
    cls = registry.get(tag)
    if cls is None:
        raise ValueError(f"unknown {kind} type: {tag!r} (known: {sorted(registry)})")
    return cls.model_validate(data)


class PipelineCfg(BaseModel):
    normalizer: Optional[CasingPrefixNormalizer] = None
    pre_tokenizer: Optional[CasingPrefixPreTokenizer] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("normalizer", "pre_tokenizer", mode="before")
    @classmethod
    def _from_registry(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, dict):
            return build_component(info.field_name, v)
        return v


class Config(BaseModel):
    pipeline: PipelineCfg = Field(default_factory=PipelineCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)

    model_config = ConfigDict(extra="ignore")


def load_config(path: str | None = "configs/default.yaml") -> Config:
    data: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            try:
                with p.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise RuntimeError(f"Failed to parse YAML at {path}: {e}") from e
    return Config(**data)


def apply_env_overrides(cfg: Config) -> None:
    """
    Override knobs from environment variables.
    Supported:
      CASEMARK_LOG_LEVEL    logging level name (DEBUG, INFO, ...)
      CASEMARK_TRACE_PATH   JSONL trace file; empty string disables tracing
    """
    level = os.getenv("CASEMARK_LOG_LEVEL")
    if level is not None:
        cfg.logging.level = _level_name(level)
    trace = os.getenv("CASEMARK_TRACE_PATH")
    if trace is not None:
        cfg.logging.trace_path = Path(trace) if trace.strip() else None


def configure_logging(cfg: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, cfg.logging.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
