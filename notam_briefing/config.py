"""
Tunable thresholds for the NOTAM text pipeline.

The defaults are empirically tuned against real briefing documents and should
only be changed deliberately. Overrides can be loaded from a JSON object whose
keys match the ``ParserSettings`` field names.
"""

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from notam_briefing.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserSettings:
    """
    Thresholds used by block validation, date parsing and section detection.

    Attributes:
        min_block_length: Blocks shorter than this are rejected as too short
        procedure_indicator_threshold: Procedure indicators needed to reject a block
        waypoint_line_ratio: Share of tabular lines above which a block is waypoint data
        numeric_tokens_per_line: Numeric tokens that make a line "tabular"
        fuel_table_min_lines: Tabular lines needed alongside a fuel keyword
        century_window_years: Two-digit years further than this from now shift a century
        permanent_validity_years: Sentinel validity used for PERM end dates
        heading_max_length: Longest line considered as a heading
    """
    min_block_length: int = 20
    procedure_indicator_threshold: int = 2
    waypoint_line_ratio: float = 0.5
    numeric_tokens_per_line: int = 3
    fuel_table_min_lines: int = 3
    century_window_years: int = 50
    permanent_validity_years: int = 10
    heading_max_length: int = 100

    def __post_init__(self):
        for name in ('min_block_length', 'procedure_indicator_threshold',
                     'numeric_tokens_per_line', 'fuel_table_min_lines',
                     'century_window_years', 'permanent_validity_years',
                     'heading_max_length'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer", details=value)
        if not 0.0 <= self.waypoint_line_ratio <= 1.0:
            raise ConfigurationError("waypoint_line_ratio must be between 0 and 1",
                                     details=self.waypoint_line_ratio)

    def with_overrides(self, **overrides: Any) -> 'ParserSettings':
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParserSettings':
        """
        Create settings from a dictionary, ignoring unknown keys.

        Args:
            data: Mapping of field name to value

        Returns:
            ParserSettings with defaults for missing keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown parser settings: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'ParserSettings':
        """
        Load settings overrides from a JSON file.

        A missing or malformed file is logged and the defaults are returned.

        Args:
            path: Path to a JSON object of overrides

        Returns:
            ParserSettings instance
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Parser settings file not found: {path}")
            return cls()
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in parser settings file {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Parser settings file {path} does not contain a JSON object")
            return cls()

        settings = cls.from_dict(data)
        logger.debug(f"Loaded parser settings from {path}")
        return settings


DEFAULT_SETTINGS = ParserSettings()


def resolve_settings(settings: Optional[ParserSettings]) -> ParserSettings:
    """Return ``settings`` or the module defaults."""
    return settings if settings is not None else DEFAULT_SETTINGS
