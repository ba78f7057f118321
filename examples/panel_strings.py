"""
Basic PanelNet Usage Example

This script wires a few panel strings by hand, prints their ratings, and
then runs the demonstration networks through the NetworkAnalyzer.
"""

import sys
from pathlib import Path

# Add the parent directory to path to import panelnet
sys.path.append(str(Path(__file__).parent.parent))

from panelnet import Panel, SeriesSource, ParallelSource, NetworkAnalyzer, build_demo_networks, power


def hand_wired_strings():
    """Build and print a few networks without the analyzer."""
    kc50t = Panel(3.11, 17.4, name='kc50t')
    sun100 = Panel(5.44, 18.4, name='sun100')

    four_series = SeriesSource([kc50t] * 4)
    two_parallel = ParallelSource([sun100, sun100])
    mixed = SeriesSource([four_series, two_parallel])

    for label, source in [('4S kc50t', four_series), ('2P sun100', two_parallel), ('mixed', mixed)]:
        print(f"{label}: {source.voltage():.2f} V, {source.current():.2f} A, {power(source):.2f} W")


def main():
    print("PanelNet String Example\n" + "=" * 40)
    hand_wired_strings()

    analyzer = build_demo_networks(NetworkAnalyzer())
    analyzer.run()
    print("\n".join(analyzer.report_lines()))
    print(analyzer.get_summary_report())

    output_dir = Path(__file__).parent / 'analysis_results'
    analyzer.export_results(str(output_dir), format='csv')
    print(f"Results exported to: {output_dir}")


if __name__ == "__main__":
    main()
