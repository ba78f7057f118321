"""Run the PanelNet demonstration: ``python -m panelnet``."""

from .analysis import main

if __name__ == "__main__":
    raise SystemExit(main())
