"""
String comparison plot for the demonstration networks.

Requires matplotlib (pip install panelnet[examples]).
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

import matplotlib.pyplot as plt

from panelnet import NetworkAnalyzer, build_demo_networks


def plot_string_comparison(analyzer):
    data = analyzer.results
    if data is None:
        print("No results available for plotting")
        return
    fig, axes = plt.subplots(2, 1, figsize=(12, 9), sharex=True)
    fig.suptitle('Panel Network Comparison', fontsize=16)
    # Power
    axes[0].bar(data.index, data['power_w'], color='gold', alpha=0.8)
    axes[0].set_ylabel('Power (W)')
    axes[0].set_title('Output Power')
    axes[0].grid(True, alpha=0.3)
    # Voltage and current
    axes[1].bar(data.index, data['voltage_v'], color='blue', alpha=0.6, label='Voltage')
    ax2 = axes[1].twinx()
    ax2.plot(data.index, data['current_a'], color='red', marker='o', label='Current')
    axes[1].set_ylabel('Voltage (V)')
    ax2.set_ylabel('Current (A)', color='red')
    axes[1].set_title('Voltage and Current')
    axes[1].grid(True, alpha=0.3)
    plt.setp(axes[1].get_xticklabels(), rotation=30, ha='right')
    plt.tight_layout(rect=(0, 0, 1, 0.97))
    output_path = Path(__file__).parent / 'analysis_results' / 'string_comparison.png'
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    print(f"Comparison plot saved to: {output_path}")
    return fig


def main():
    analyzer = build_demo_networks(NetworkAnalyzer())
    analyzer.run()
    plot_string_comparison(analyzer)


if __name__ == "__main__":
    main()
