"""
Configuration management for PanelNet.

Contains the PanelNetConfig class for managing model ceilings, reporting
options and the panel nameplate catalog.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
import yaml
import json

from .constants import (
    VOLTAGE_CEILING, CURRENT_CEILING, PANEL_CATALOG,
    DEFAULT_REPORT_PRECISION, LOG_LEVELS
)
from .helpers import validate_positive, validate_range


@dataclass
class PanelConfig:
    """Nameplate ratings for one panel model."""
    current: float
    voltage: float
    description: str = ''

    @property
    def rated_power(self) -> float:
        """Rated power in W."""
        return self.current * self.voltage


def _as_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass
class ModelConfig:
    """Configuration for composite aggregation."""
    current_ceiling: float = CURRENT_CEILING  # A, empty series current
    voltage_ceiling: float = VOLTAGE_CEILING  # V, empty parallel voltage

    def __post_init__(self):
        """Validate ceilings."""
        # PyYAML reads exponent literals such as 1e6 as strings
        self.current_ceiling = _as_float(self.current_ceiling, "Current ceiling")
        self.voltage_ceiling = _as_float(self.voltage_ceiling, "Voltage ceiling")
        validate_positive(self.current_ceiling, "Current ceiling")
        validate_positive(self.voltage_ceiling, "Voltage ceiling")


@dataclass
class ReportConfig:
    """Configuration for report rendering and logging."""
    precision: int = DEFAULT_REPORT_PRECISION
    log_level: str = 'INFO'

    def __post_init__(self):
        """Validate reporting parameters."""
        validate_range(self.precision, 0, 12, "Report precision")

        if not isinstance(self.log_level, str):
            raise ValueError(f"Log level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")


def _default_panels() -> Dict[str, PanelConfig]:
    return {name: PanelConfig(**params) for name, params in PANEL_CATALOG.items()}


@dataclass
class PanelNetConfig:
    """Complete configuration for PanelNet."""
    model: ModelConfig = field(default_factory=ModelConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    panels: Dict[str, PanelConfig] = field(default_factory=_default_panels)

    def get_panel(self, name: str) -> PanelConfig:
        """Look up a panel model by name."""
        if name not in self.panels:
            raise ValueError(f"Unknown panel model: {name}")
        return self.panels[name]

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'PanelNetConfig':
        """Create PanelNetConfig from dictionary."""
        kwargs: Dict[str, Any] = {
            'model': ModelConfig(**(config_dict.get('model') or {})),
            'report': ReportConfig(**(config_dict.get('report') or {}))
        }
        # An explicit catalog replaces the built-in one
        if 'panels' in config_dict:
            kwargs['panels'] = {
                name: PanelConfig(**params)
                for name, params in (config_dict['panels'] or {}).items()
            }
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, file_path: str) -> 'PanelNetConfig':
        """Load configuration from YAML file."""
        with open(file_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict or {})

    @classmethod
    def from_json(cls, file_path: str) -> 'PanelNetConfig':
        """Load configuration from JSON file."""
        with open(file_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert PanelNetConfig to dictionary."""
        def dataclass_to_dict(obj):
            if isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            if hasattr(obj, '__dict__'):
                return {k: dataclass_to_dict(v) for k, v in obj.__dict__.items()}
            return obj

        return dataclass_to_dict(self)

    def to_yaml(self, file_path: str) -> None:
        """Save configuration to YAML file."""
        config_dict = self.to_dict()
        with open(file_path, 'w') as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    def to_json(self, file_path: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        with open(file_path, 'w') as f:
            json.dump(config_dict, f, indent=2)

    def summary(self) -> str:
        """Generate a summary of the configuration."""
        panel_lines = "\n".join(
            f"- {name}: {panel.current:.2f} A, {panel.voltage:.2f} V, {panel.rated_power:.1f} W"
            for name, panel in self.panels.items()
        )
        return f"""
PanelNet Configuration Summary
==============================

Model:
- Current Ceiling: {self.model.current_ceiling:g} A
- Voltage Ceiling: {self.model.voltage_ceiling:g} V

Report:
- Precision: {self.report.precision} decimals
- Log Level: {self.report.log_level}

Panel Catalog:
{panel_lines}
"""


def create_default_config() -> PanelNetConfig:
    """Create a default configuration."""
    return PanelNetConfig()
