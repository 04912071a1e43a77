# partypicker/utils/observability.py
import logging
import sys
import structlog
import contextvars
from prometheus_client import Counter, CollectorRegistry

from partypicker.config.settings import ObservabilitySettings

# Correlation ID for tying together the events of one command or request
CORRELATION_ID = contextvars.ContextVar('correlation_id', default=None)

class ObservabilityConfig:
    """Configuration for observability stack."""

    def __init__(self):
        env_settings = ObservabilitySettings()
        self.environment = env_settings.environment
        self.log_level = env_settings.log_level
        self.enable_metrics = env_settings.enable_metrics
        self.log_format = 'json' if self.environment == 'production' else env_settings.log_format

class MetricsRegistry:
    """Centralized metrics management.

    When disabled the counters still work but are not registered, so the
    registry exposes nothing.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.registry = CollectorRegistry()
        self._init_metrics(self.registry if enabled else None)

    def _init_metrics(self, registry):
        """Initialize all metrics with proper naming conventions."""

        # COUNTERS (monotonic increases)
        self.brackets_generated = Counter(
            'brackets_generated_total',
            'Total number of brackets generated',
            labelnames=['format'],  # 'single' or 'double'
            registry=registry
        )

        self.invalid_bracket_requests = Counter(
            'invalid_bracket_requests_total',
            'Bracket requests rejected for a non power-of-two player count',
            registry=registry
        )

        self.spins = Counter(
            'spins_total',
            'Total number of wheel spins',
            labelnames=['mode'],  # 'uniform' or 'weighted'
            registry=registry
        )

        self.track_load_fallbacks = Counter(
            'track_load_fallbacks_total',
            'Track loader attempts that failed and fell through',
            labelnames=['source'],
            registry=registry
        )

class StructlogConfig:
    """Structured logging configuration."""

    @staticmethod
    def configure(env: str = 'development', log_level: str = 'INFO', log_format: str = 'console'):
        """
        Configure structlog with environment-appropriate settings.

        Production: JSON output (machine-readable)
        Development: Console output (human-readable)
        """

        shared_processors = [
            # Add correlation ID to all logs
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
        ]

        if env == 'production' or log_format == 'json':
            processors = shared_processors + [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        else:
            processors = shared_processors + [
                structlog.dev.ConsoleRenderer(),
            ]

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(log_level)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),  # keep stdout for command output
            cache_logger_on_first_use=True,
        )

class Logger:
    """Wrapper for structured logging with context awareness."""

    def __init__(self, module_name: str):
        self.logger = structlog.get_logger(module_name)
        self.module_name = module_name

    def log_event(self, event: str, **kwargs):
        """Log structured event with automatic context."""
        corr_id = CORRELATION_ID.get()
        ctx = {'correlation_id': corr_id, 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.info(event, **ctx)

    def log_warning(self, event: str, **kwargs):
        """Log a recoverable problem."""
        corr_id = CORRELATION_ID.get()
        ctx = {'correlation_id': corr_id, 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.warning(event, **ctx)

    def log_error(self, event: str, exc_info=None, **kwargs):
        """Log error with exception details."""
        corr_id = CORRELATION_ID.get()
        ctx = {'correlation_id': corr_id, 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.error(event, exc_info=exc_info, **ctx)

def initialize_observability(environment: str = None):
    """One-stop initialization for all observability components."""
    config = ObservabilityConfig()
    environment = environment or config.environment
    StructlogConfig.configure(env=environment, log_level=config.log_level, log_format=config.log_format)
    metrics = MetricsRegistry(enabled=config.enable_metrics)

    logger = structlog.get_logger(__name__)
    logger.info(
        'observability_initialized',
        environment=environment,
        log_format=config.log_format,
        metrics_enabled=config.enable_metrics,
    )

    return metrics, config

# Global metrics instance
METRICS = None
CONFIG = None

def get_metrics() -> MetricsRegistry:
    """Lazy-load metrics singleton."""
    global METRICS, CONFIG
    if METRICS is None:
        METRICS, CONFIG = initialize_observability()
    return METRICS
