"""Tests for configuration management."""

import pytest

from panelnet.utils.config import (
    PanelNetConfig, PanelConfig, ModelConfig, ReportConfig, create_default_config
)
from panelnet.utils.constants import VOLTAGE_CEILING, CURRENT_CEILING, PANEL_CATALOG
from panelnet.utils.helpers import fold_sum, fold_min, validate_range


class TestModelConfig:
    """Tests for ModelConfig class."""

    def test_defaults(self):
        config = ModelConfig()
        assert config.current_ceiling == CURRENT_CEILING
        assert config.voltage_ceiling == VOLTAGE_CEILING

    def test_rejects_non_positive_ceiling(self):
        with pytest.raises(ValueError, match="Voltage ceiling must be positive"):
            ModelConfig(voltage_ceiling=0)

    def test_numeric_strings_coerced(self):
        """YAML exponent literals arrive as strings and are accepted."""
        config = ModelConfig(current_ceiling="1e6", voltage_ceiling="500")
        assert config.current_ceiling == 1e6
        assert config.voltage_ceiling == 500.0

    def test_rejects_non_numeric_ceiling(self):
        with pytest.raises(ValueError, match="Current ceiling must be a number"):
            ModelConfig(current_ceiling="lots")
        with pytest.raises(ValueError, match="Voltage ceiling must be a number"):
            ModelConfig(voltage_ceiling=None)


class TestReportConfig:
    """Tests for ReportConfig class."""

    def test_log_level_normalized(self):
        assert ReportConfig(log_level='debug').log_level == 'DEBUG'

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            ReportConfig(log_level='chatty')

    def test_non_string_log_level(self):
        with pytest.raises(ValueError, match="Log level must be a string"):
            ReportConfig(log_level=10)

    def test_precision_range(self):
        with pytest.raises(ValueError, match="Report precision"):
            ReportConfig(precision=20)


class TestPanelNetConfig:
    """Tests for PanelNetConfig class."""

    def test_default_catalog(self):
        config = create_default_config()
        assert set(config.panels) == set(PANEL_CATALOG)
        assert config.get_panel('kc50t').rated_power == pytest.approx(54.114)

    def test_unknown_panel(self):
        with pytest.raises(ValueError, match="Unknown panel model"):
            create_default_config().get_panel('missing')

    def test_from_dict(self):
        config = PanelNetConfig.from_dict({
            'model': {'voltage_ceiling': 1000.0},
            'report': {'precision': 2},
            'panels': {'small': {'current': 1.0, 'voltage': 6.0}}
        })
        assert config.model.voltage_ceiling == 1000.0
        assert config.model.current_ceiling == CURRENT_CEILING
        assert config.report.precision == 2
        assert list(config.panels) == ['small']

    def test_from_dict_keeps_builtin_catalog(self):
        config = PanelNetConfig.from_dict({'report': {'log_level': 'WARNING'}})
        assert 'sun100' in config.panels

    def test_yaml_roundtrip(self, tmp_path):
        path = tmp_path / 'panelnet.yaml'
        original = PanelNetConfig(report=ReportConfig(precision=3))
        original.panels['custom'] = PanelConfig(current=2.5, voltage=20.0, description='test')
        original.to_yaml(str(path))

        loaded = PanelNetConfig.from_yaml(str(path))
        assert loaded.report.precision == 3
        assert loaded.get_panel('custom') == PanelConfig(2.5, 20.0, 'test')

    def test_json_roundtrip(self, tmp_path):
        path = tmp_path / 'panelnet.json'
        PanelNetConfig(model=ModelConfig(current_ceiling=50.0)).to_json(str(path))
        assert PanelNetConfig.from_json(str(path)).model.current_ceiling == 50.0

    def test_yaml_exponent_ceiling(self, tmp_path):
        path = tmp_path / 'ceiling.yaml'
        path.write_text('model:\n  voltage_ceiling: 1e6\n  current_ceiling: 2e3\n')
        config = PanelNetConfig.from_yaml(str(path))
        assert config.model.voltage_ceiling == 1e6
        assert config.model.current_ceiling == 2000.0

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert PanelNetConfig.from_yaml(str(path)) == create_default_config()

    def test_summary(self):
        summary = create_default_config().summary()
        assert 'PanelNet Configuration Summary' in summary
        assert 'kc50t' in summary


class TestHelpers:
    """Tests for aggregation and validation helpers."""

    def test_fold_sum(self):
        assert fold_sum([]) == 0.0
        assert fold_sum([1.0, 2.5]) == 3.5

    def test_fold_min_seed_is_identity(self):
        assert fold_min([], seed=1e6) == 1e6
        assert fold_min([3.0, 2.0], seed=1e6) == 2.0
        assert fold_min([3.0], seed=1.0) == 1.0

    def test_validate_range(self):
        validate_range(5, 0, 10, "Value")
        with pytest.raises(ValueError, match="Value must be between 0 and 10"):
            validate_range(11, 0, 10, "Value")


class TestPackageHelpers:
    """Tests for package-level helpers."""

    def test_list_available_panels(self, capsys):
        import panelnet

        panelnet.list_available_panels()
        out = capsys.readouterr().out
        assert 'kc50t: 3.11 A, 17.40 V, 54.1 W' in out
        assert panelnet.get_version() == panelnet.__version__
