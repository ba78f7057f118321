"""
Solar panel leaf source for PanelNet.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .source import Source
from ..utils.constants import PANEL_CATALOG


@dataclass(frozen=True)
class Panel(Source):
    """
    A single panel delivering its nameplate current and voltage.

    Ratings are returned exactly as given. No domain validation is done,
    so zero or negative ratings are accepted. Panels are immutable and
    may be shared by any number of networks.

    Attributes:
        rated_current: Current at maximum power (A)
        rated_voltage: Voltage at maximum power (V)
        name: Optional model name for reports
    """
    rated_current: float
    rated_voltage: float
    name: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_catalog(cls, name: str, catalog: Optional[Dict[str, Any]] = None) -> 'Panel':
        """
        Create a panel from a named nameplate entry.

        Args:
            name: Panel model name, e.g. 'kc50t'
            catalog: Mapping of names to ratings; PANEL_CATALOG if None.
                Entries may be dicts or PanelConfig objects.

        Returns:
            Panel with the catalog ratings
        """
        catalog = PANEL_CATALOG if catalog is None else catalog
        if name not in catalog:
            raise ValueError(f"Unknown panel model: {name}")

        entry = catalog[name]
        if isinstance(entry, dict):
            return cls(entry['current'], entry['voltage'], name=name)
        return cls(entry.current, entry.voltage, name=name)

    def current(self) -> float:
        return self.rated_current

    def voltage(self) -> float:
        return self.rated_voltage

    @property
    def rated_power(self) -> float:
        """Nameplate power in W."""
        return self.rated_current * self.rated_voltage

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['name'] = self.name
        return result
