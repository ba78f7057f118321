"""
Network analysis for PanelNet.

This module provides the NetworkAnalyzer class that evaluates labelled
panel networks, tabulates their ratings and renders the text report.
It also wires the demonstration networks printed by ``panelnet-demo``.
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Optional, Any
import logging
from pathlib import Path

from .components.source import Source, power
from .components.panel import Panel
from .components.networks import ParallelSource, SeriesSource, contains_empty_network
from .utils.config import PanelNetConfig, create_default_config
from .utils.constants import LOG_FORMAT
from .utils.helpers import format_quantity

RESULT_COLUMNS = ['voltage_v', 'current_a', 'power_w', 'leaf_count', 'depth', 'unconstrained']


class NetworkAnalyzer:
    """
    Evaluates a set of labelled sources and reports their ratings.

    Sources are registered in order under unique labels. Networks built
    through the analyzer's series() and parallel() use the ceilings from
    the model configuration.
    """

    def __init__(self, config: Optional[PanelNetConfig] = None):
        """
        Initialize the analyzer.

        Args:
            config: PanelNet configuration; defaults if None
        """
        self.config = config or create_default_config()
        self.logger = self._setup_logging()

        self._sources: Dict[str, Source] = {}
        self._show_voltage: Dict[str, bool] = {}
        self.results: Optional[pd.DataFrame] = None

    def _setup_logging(self) -> logging.Logger:
        """Set up analyzer logging."""
        logger = logging.getLogger(f'PanelNet.analysis.{id(self)}')
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        logger.setLevel(getattr(logging, self.config.report.log_level))
        return logger

    @property
    def labels(self) -> List[str]:
        return list(self._sources)

    def panel(self, name: str) -> Panel:
        """Create a panel from the configured catalog."""
        return Panel.from_catalog(name, self.config.panels)

    def series(self, *sources: Source) -> SeriesSource:
        """Wire sources in series using the configured current ceiling."""
        return SeriesSource(sources, ceiling=self.config.model.current_ceiling)

    def parallel(self, *sources: Source) -> ParallelSource:
        """Wire sources in parallel using the configured voltage ceiling."""
        return ParallelSource(sources, ceiling=self.config.model.voltage_ceiling)

    def add(self, label: str, source: Source, show_voltage: bool = False) -> Source:
        """
        Register a source for analysis.

        Args:
            label: Unique report label
            source: Panel or network to evaluate
            show_voltage: Include the voltage in the report line

        Returns:
            The registered source, for further wiring
        """
        if label in self._sources:
            raise ValueError(f"Duplicate source label: {label}")
        if not isinstance(source, Source):
            raise TypeError(f"Expected a source for {label}, got {type(source).__name__}")

        self._sources[label] = source
        self._show_voltage[label] = show_voltage
        self.results = None
        self.logger.debug(f"Registered {label}: {source!r}")
        return source

    def get(self, label: str) -> Source:
        if label not in self._sources:
            raise ValueError(f"Unknown source label: {label}")
        return self._sources[label]

    def evaluate(self, label: str) -> Dict[str, Any]:
        """
        Evaluate one registered source.

        Args:
            label: Label the source was registered under

        Returns:
            Dictionary with voltage, current, power and structure metrics
        """
        source = self.get(label)
        voltage = source.voltage()
        current = source.current()

        unconstrained = contains_empty_network(source)
        if unconstrained:
            self.logger.warning(f"{label} contains an empty network; its ceiling may leak into the ratings")

        return {
            'label': label,
            'voltage_v': voltage,
            'current_a': current,
            'power_w': power(source),
            'leaf_count': sum(1 for _ in source.leaves()),
            'depth': source.depth(),
            'unconstrained': unconstrained
        }

    def run(self) -> pd.DataFrame:
        """
        Evaluate every registered source.

        Returns:
            DataFrame indexed by label with one row per source
        """
        self.logger.info(f"Evaluating {len(self._sources)} sources")

        rows = [self.evaluate(label) for label in self._sources]
        if rows:
            results = pd.DataFrame(rows).set_index('label')
        else:
            results = pd.DataFrame(columns=RESULT_COLUMNS)
            results.index.name = 'label'

        self.results = results
        self.logger.info("Evaluation completed successfully")
        return results

    def report_lines(self) -> List[str]:
        """
        Render one human-readable line per registered source.

        Lines read "<label> = <watts> watts", or
        "<label> = <volts> volts, <watts> watts" for sources registered
        with show_voltage.
        """
        results = self.results if self.results is not None else self.run()
        precision = self.config.report.precision

        lines = []
        for label, row in results.iterrows():
            watts = format_quantity(row['power_w'], precision)
            if self._show_voltage.get(label, False):
                volts = format_quantity(row['voltage_v'], precision)
                lines.append(f"{label} = {volts} volts, {watts} watts")
            else:
                lines.append(f"{label} = {watts} watts")
        return lines

    def export_results(self, output_path: str, format: str = 'csv') -> Path:
        """
        Export evaluation results to a file.

        Args:
            output_path: Directory to save results
            format: Export format ('csv', 'json')

        Returns:
            Path of the written file
        """
        if format not in ('csv', 'json'):
            raise ValueError(f"Unknown export format: {format}")

        results = self.results if self.results is not None else self.run()

        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        if format == 'csv':
            target = output_dir / 'network_results.csv'
            results.to_csv(target)
        else:
            target = output_dir / 'network_results.json'
            results.reset_index().to_json(target, orient='records', indent=2)

        self.logger.info(f"Results exported to {target} in {format} format")
        return target

    def get_summary_report(self) -> str:
        """Generate a text summary report of evaluation results."""
        if self.results is None or self.results.empty:
            return "No evaluation results available. Run analysis first."

        results = self.results
        constrained = results[~results['unconstrained'].astype(bool)]
        best_label = constrained['power_w'].idxmax() if not constrained.empty else 'n/a'
        max_power = constrained['power_w'].max() if not constrained.empty else 0.0
        watts_per_leaf = np.divide(
            results['power_w'].to_numpy(dtype=float),
            results['leaf_count'].to_numpy(dtype=float),
            out=np.zeros(len(results)),
            where=results['leaf_count'].to_numpy() > 0
        )

        report = f"""
PanelNet Network Analysis Summary
=================================

Networks Evaluated: {len(results)}
Unconstrained (empty) Networks: {int(results['unconstrained'].sum())}

Power:
- Highest Output: {best_label}
- Maximum Power: {max_power:.2f} W
- Mean Power per Panel: {watts_per_leaf.mean():.2f} W

Voltage:
- Highest: {results['voltage_v'].max():.2f} V
- Lowest: {results['voltage_v'].min():.2f} V
"""
        return report


def build_demo_networks(analyzer: NetworkAnalyzer) -> NetworkAnalyzer:
    """
    Register the demonstration panel networks.

    Args:
        analyzer: Analyzer to register networks on

    Returns:
        The same analyzer
    """
    kc50t = analyzer.panel('kc50t')
    sun100 = analyzer.panel('sun100')
    newpowa220 = analyzer.panel('newpowa220')

    series_4_kc50t = analyzer.series(kc50t, kc50t, kc50t, kc50t)
    parallel_4_kc50t = analyzer.parallel(kc50t, kc50t, kc50t, kc50t)
    parallel_2_sun100 = analyzer.parallel(sun100, sun100)
    series_4_newpowa220 = analyzer.series(newpowa220, newpowa220, newpowa220, newpowa220)

    analyzer.add("one kc50t", kc50t)
    analyzer.add("4S kc50t", series_4_kc50t)
    analyzer.add("2P sun100", parallel_2_sun100)
    analyzer.add("4P kc50t", parallel_4_kc50t)
    analyzer.add("4S NewPowa 220", series_4_newpowa220)
    analyzer.add("4S newpowas and 4P KC50T string",
                 analyzer.series(parallel_4_kc50t, series_4_newpowa220))
    analyzer.add("4S newpowas and 2P SUN100 string",
                 analyzer.series(parallel_2_sun100, series_4_newpowa220))

    # Mismatched panels in one string: ~36 V but only ~111 W
    analyzer.add("serial sun100 and kc50t", analyzer.series(kc50t, sun100), show_voltage=True)

    sun100_and_2p_kc50t = analyzer.series(sun100, analyzer.parallel(kc50t, kc50t))
    analyzer.add("2x (1 sun100 and 2p kc50t)",
                 analyzer.series(sun100_and_2p_kc50t, sun100_and_2p_kc50t),
                 show_voltage=True)
    return analyzer


def main() -> int:
    """Print the demonstration network ratings to standard output."""
    config = create_default_config()
    config.report.log_level = 'WARNING'

    analyzer = build_demo_networks(NetworkAnalyzer(config))
    for line in analyzer.report_lines():
        print(line)
    return 0
