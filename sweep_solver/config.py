from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .solver_core import box_side

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


class SolverSettings(BaseModel):
    """Board format and reporting options for a solve run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    size: int = 9
    separators: str = "|-+"
    blank: str = " "
    show_unsolved: bool = True
    verbose: bool = False

    @field_validator("size")
    @classmethod
    def _square_size(cls, v: int) -> int:
        box_side(v)
        return v

    @field_validator("blank")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("blank must be exactly one character")
        if v.isdigit():
            raise ValueError("blank cannot be a digit")
        return v

    @model_validator(mode="after")
    def _blank_not_separator(self) -> SolverSettings:
        if self.blank in self.separators:
            raise ValueError(f"blank {self.blank!r} is also listed as a separator")
        return self


def load_settings(path: str | Path | None = None, **overrides) -> SolverSettings:
    """Settings from `path` (or configs/default.yaml when present), with non-None overrides on top."""
    cfg: Dict[str, Any] = {}
    if path is not None:
        cfg = load_yaml(path)
    elif DEFAULT_CONFIG.is_file():
        cfg = load_yaml(DEFAULT_CONFIG)
    return SolverSettings(**merge_overrides(dict(cfg), **overrides))
