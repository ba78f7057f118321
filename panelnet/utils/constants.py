"""
Electrical constants and panel nameplate data for PanelNet.
"""

# Fold identities for the minimum-limited quantity of a composite.
# An empty parallel network imposes no voltage limit and an empty series
# string imposes no current limit, so the minimum fold starts here. The
# value only needs to exceed any real panel rating.
VOLTAGE_CEILING = 1e6                      # V
CURRENT_CEILING = 1e6                      # A

# Fold identity for the summed quantity
ZERO_CURRENT = 0.0                         # A
ZERO_VOLTAGE = 0.0                         # V

# Wiring topologies understood by string_of()
WIRING_SERIES = 'series'
WIRING_PARALLEL = 'parallel'
WIRING_TYPES = (WIRING_SERIES, WIRING_PARALLEL)

# Panel nameplate ratings (current at max power, voltage at max power)
PANEL_CATALOG = {
    'kc50t': {
        'current': 3.11,                   # A
        'voltage': 17.4,                   # V
        'description': 'Kyocera KC50T 54 W multicrystalline'
    },
    'sun100': {
        'current': 5.44,
        'voltage': 18.4,
        'description': 'Renogy 100 W monocrystalline'
    },
    'newpowa220': {
        'current': 12.6,
        'voltage': 17.52,
        'description': 'Newpowa 220 W monocrystalline'
    }
}

# Reporting
DEFAULT_REPORT_PRECISION = 6               # matches printf("%f")
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
