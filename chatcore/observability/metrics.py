"""
Prometheus Metrics for the chat model.

METRIC TYPES:
    - Counter: Value only goes up (entities added, toggles, status reads)

Recording functions are no-ops when Config.METRICS_ENABLED is false.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST

from chatcore.config.settings import Config


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
ENTITIES_ADDED_TOTAL = Counter(
    "chat_entities_added_total",
    "Total number of entities inserted into the registry",
    ["entity"],
)

PERMISSION_TOGGLES_TOTAL = Counter(
    "chat_permission_toggles_total",
    "Total number of permission toggle requests by result",
    ["result"],
)

STATUS_UPDATES_TOTAL = Counter(
    "chat_status_updates_total",
    "Total number of status update reports produced",
)

LOOKUP_MISSES_TOTAL = Counter(
    "chat_lookup_misses_total",
    "Total number of required lookups that found nothing",
    ["entity"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsEntity:
    """Entity labels for chat_entities_added_total and chat_lookup_misses_total."""

    USER = "user"
    CONVERSATION = "conversation"
    MESSAGE = "message"
    BOT = "bot"


class MetricsToggleResult:
    GRANTED = "granted"
    DENIED = "denied"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def record_entity_added(entity: str):
    if Config.METRICS_ENABLED:
        ENTITIES_ADDED_TOTAL.labels(entity=entity).inc()


def record_permission_toggle(result: str):
    if Config.METRICS_ENABLED:
        PERMISSION_TOGGLES_TOTAL.labels(result=result).inc()


def record_status_update():
    if Config.METRICS_ENABLED:
        STATUS_UPDATES_TOTAL.inc()


def record_lookup_miss(entity: str):
    if Config.METRICS_ENABLED:
        LOOKUP_MISSES_TOTAL.labels(entity=entity).inc()


def export_metrics() -> tuple[bytes, str]:
    """Latest exposition payload and its content type, for an outer layer to serve."""
    return generate_latest(), CONTENT_TYPE_LATEST
