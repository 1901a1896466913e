"""
Configuration for a bigram histogram run.

A run processes exactly one file. The settings here choose how the window
behaves at line breaks and which of the two console formats is printed.
"""

from __future__ import annotations

import codecs
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict


OUTPUT_FORMATS = ("histogram", "ordered")
_ASCII_PROBE = "\n\t az09AZ"


@dataclass(frozen=True)
class HistogramConfig:
    """
    Attributes:
        track_order: Record the order in which each distinct bigram first appears
        output_format: "histogram" (map order plus a total line) or
            "ordered" (first-seen order, requires track_order)
        reset_per_line: Empty the window at each new line so no bigram spans
            a line break
        encoding: Text encoding of the input file
    """

    track_order: bool = False
    output_format: str = "histogram"
    reset_per_line: bool = False
    encoding: str = "utf-8"

    def __post_init__(self):
        for name in ("track_order", "reset_per_line"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        for name in ("output_format", "encoding"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}"
            )
        if self.output_format == "ordered" and not self.track_order:
            raise ValueError("ordered output needs track_order=True")
        codecs.lookup(self.encoding)
        # lines are split on b"\n" before decoding
        if _ASCII_PROBE.encode(self.encoding) != _ASCII_PROBE.encode("ascii"):
            raise ValueError(f"encoding {self.encoding!r} is not ASCII-compatible")

    @classmethod
    def ordered(cls, **kwargs) -> "HistogramConfig":
        """Config for first-seen ordered output."""
        return cls(track_order=True, output_format="ordered", **kwargs)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "HistogramConfig":
        """Create a config from a dictionary, ignoring unknown keys."""
        if not isinstance(config_dict, dict):
            raise ValueError(f"configuration must be a JSON object, got {type(config_dict).__name__}")
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    @classmethod
    def from_json(cls, path: str | Path) -> "HistogramConfig":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict:
        return asdict(self)
