"""
PanelNet: Solar Panel Series/Parallel Network Modeling

A small Python library for combining ideal power sources (solar panels)
into series strings and parallel banks, nested to any depth, and
computing the current, voltage and power of the result.

Main Components:
- Source contract shared by every network element
- Panel leaves with fixed nameplate ratings
- ParallelSource and SeriesSource composites
- NetworkAnalyzer for tabulating and reporting labelled networks

Example Usage:
    >>> from panelnet import Panel, SeriesSource, ParallelSource, power
    >>>
    >>> kc50t = Panel(3.11, 17.4)
    >>> string = SeriesSource([kc50t, kc50t, kc50t, kc50t])
    >>> round(string.voltage(), 3), round(power(string), 3)
    (69.6, 216.456)
"""

__version__ = "1.0.0"
__author__ = "PanelNet Development Team"

# Source model
from .components.source import Source, power
from .components.panel import Panel
from .components.networks import (
    CompositeSource,
    ParallelSource,
    SeriesSource,
    series,
    parallel,
    string_of
)

# Analysis and reporting
from .analysis import NetworkAnalyzer, build_demo_networks

# Configuration management
from .utils.config import (
    PanelNetConfig,
    PanelConfig,
    ModelConfig,
    ReportConfig,
    create_default_config
)

# Constants
from .utils.constants import (
    VOLTAGE_CEILING,
    CURRENT_CEILING,
    PANEL_CATALOG
)

# Define public API
__all__ = [
    # Source model
    'Source',
    'power',
    'Panel',
    'CompositeSource',
    'ParallelSource',
    'SeriesSource',
    'series',
    'parallel',
    'string_of',

    # Analysis
    'NetworkAnalyzer',
    'build_demo_networks',

    # Configuration
    'PanelNetConfig',
    'PanelConfig',
    'ModelConfig',
    'ReportConfig',
    'create_default_config',

    # Constants
    'VOLTAGE_CEILING',
    'CURRENT_CEILING',
    'PANEL_CATALOG'
]


def get_version():
    """Return the version string."""
    return __version__


def list_available_panels():
    """List the panel models in the built-in catalog."""
    print("Available Panels in PanelNet")
    print("=" * 40)

    for name, params in PANEL_CATALOG.items():
        rated_power = params['current'] * params['voltage']
        print(f"  {name}: {params['current']:.2f} A, {params['voltage']:.2f} V, "
              f"{rated_power:.1f} W ({params['description']})")
