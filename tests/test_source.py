"""Tests for the source contract and panel leaves."""

import dataclasses

import pytest

from panelnet.components.source import Source, power
from panelnet.components.panel import Panel
from panelnet.utils.config import PanelConfig


class TestPanel:
    """Tests for Panel class."""

    def test_returns_ratings_exactly(self):
        """Current and voltage come back exactly as given."""
        panel = Panel(3.11, 17.4)
        assert panel.current() == 3.11
        assert panel.voltage() == 17.4

    def test_no_validation_of_ratings(self):
        """Zero and negative ratings are accepted unchanged."""
        panel = Panel(-1.5, 0.0)
        assert panel.current() == -1.5
        assert panel.voltage() == 0.0

    def test_immutable(self):
        """Ratings cannot be reassigned after construction."""
        panel = Panel(3.11, 17.4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            panel.rated_current = 5.0

    def test_is_a_source(self):
        assert isinstance(Panel(1.0, 1.0), Source)

    def test_repeated_evaluation_is_stable(self):
        """Evaluation has no side effects."""
        panel = Panel(5.44, 18.4)
        assert [panel.current() for _ in range(3)] == [5.44] * 3
        assert [panel.voltage() for _ in range(3)] == [18.4] * 3

    def test_rated_power(self):
        assert Panel(3.11, 17.4).rated_power == pytest.approx(54.114)

    def test_equal_ratings_compare_equal(self):
        """Name is a label only, not part of equality."""
        assert Panel(3.11, 17.4, name='a') == Panel(3.11, 17.4, name='b')

    def test_to_dict(self):
        data = Panel(3.11, 17.4, name='kc50t').to_dict()
        assert data == {'type': 'Panel', 'current': 3.11, 'voltage': 17.4, 'name': 'kc50t'}

    def test_leaf_structure(self):
        panel = Panel(1.0, 2.0)
        assert list(panel.leaves()) == [panel]
        assert panel.depth() == 0


class TestPanelCatalog:
    """Tests for building panels from nameplate data."""

    def test_builtin_catalog(self):
        panel = Panel.from_catalog('sun100')
        assert panel.current() == 5.44
        assert panel.voltage() == 18.4
        assert panel.name == 'sun100'

    def test_config_catalog(self):
        """PanelConfig entries work as catalog values."""
        catalog = {'custom': PanelConfig(current=2.0, voltage=12.0)}
        panel = Panel.from_catalog('custom', catalog)
        assert panel.current() == 2.0
        assert panel.voltage() == 12.0

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="Unknown panel model"):
            Panel.from_catalog('nonexistent')


class TestPower:
    """Tests for the power function."""

    def test_single_panel(self):
        """One kc50t delivers 3.11 A * 17.4 V."""
        assert power(Panel(3.11, 17.4)) == pytest.approx(54.114)

    def test_matches_current_times_voltage(self):
        panel = Panel(12.6, 17.52)
        assert power(panel) == panel.current() * panel.voltage()

    def test_custom_source(self):
        """Any Source implementation can be measured."""

        class Battery(Source):
            def current(self):
                return 2.0

            def voltage(self):
                return 12.5

        assert power(Battery()) == pytest.approx(25.0)

    def test_source_is_abstract(self):
        with pytest.raises(TypeError):
            Source()
