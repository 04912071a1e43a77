import pytest
from unittest.mock import MagicMock, patch
from prometheus_client import generate_latest

from partypicker.utils.observability import (
    Logger,
    MetricsRegistry,
    ObservabilityConfig,
    initialize_observability,
)

class TestObservability:

    @pytest.fixture
    def mock_logger(self):
        return MagicMock()

    def test_logger_event_structure(self, mock_logger):
        """Log events include required context fields."""
        with patch("structlog.get_logger", return_value=mock_logger):
            logger = Logger("test_module")
            logger.log_event("test_event", custom_field=123)

            mock_logger.info.assert_called_once()
            call_args = mock_logger.info.call_args

            assert call_args[0][0] == "test_event"

            kwargs = call_args[1]
            assert kwargs["module"] == "test_module"
            assert kwargs["custom_field"] == 123
            assert "correlation_id" in kwargs

    def test_logger_warning(self, mock_logger):
        with patch("structlog.get_logger", return_value=mock_logger):
            Logger("test_module").log_warning("fallback_used", source="primary")

            mock_logger.warning.assert_called_once()
            assert mock_logger.warning.call_args[1]["source"] == "primary"

    def test_logger_error_capture(self, mock_logger):
        """Error logs capture exception info."""
        with patch("structlog.get_logger", return_value=mock_logger):
            logger = Logger("test_module")
            try:
                raise ValueError("Oops")
            except ValueError as e:
                logger.log_error("test_error", exc_info=e)

            mock_logger.error.assert_called_once()
            kwargs = mock_logger.error.call_args[1]
            assert kwargs["exc_info"] is not None

    def test_metrics_registry_initialization(self):
        """Metrics registry initializes the counters."""
        registry = MetricsRegistry()

        assert registry.brackets_generated is not None
        assert registry.spins is not None
        assert registry.track_load_fallbacks is not None

    def test_metrics_registries_are_isolated(self):
        """Each registry keeps its own counts."""
        first, second = MetricsRegistry(), MetricsRegistry()
        first.invalid_bracket_requests.inc()

        assert first.registry.get_sample_value("invalid_bracket_requests_total") == 1.0
        assert second.registry.get_sample_value("invalid_bracket_requests_total") == 0.0

    def test_disabled_metrics_not_exposed(self):
        """A disabled registry keeps counting but exposes no samples."""
        registry = MetricsRegistry(enabled=False)
        registry.spins.labels(mode="uniform").inc()

        assert registry.enabled is False
        assert registry.registry.get_sample_value("spins_total", {"mode": "uniform"}) is None
        assert b"spins_total" not in generate_latest(registry.registry)

    def test_enable_metrics_setting_reaches_registry(self, monkeypatch):
        monkeypatch.setenv("ENABLE_METRICS", "false")
        metrics, config = initialize_observability()

        assert config.enable_metrics is False
        assert metrics.enabled is False

    def test_observability_config_defaults(self, monkeypatch):
        """Configuration defaults to development mode."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        config = ObservabilityConfig()
        assert config.environment == "development"
        assert config.log_format == "console"

    def test_production_logs_json(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert ObservabilityConfig().log_format == "json"
