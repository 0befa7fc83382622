from podaggregate.config import Config
from podaggregate.errors import (
    ConfigurationError,
    IntegrationError,
    PathError,
    PodaggregateError,
)
from podaggregate.details.targets.aggregate_target import (
    AggregateTarget,
    EMBED_FRAMEWORKS_IN_HOST_TARGET_TYPES,
)
