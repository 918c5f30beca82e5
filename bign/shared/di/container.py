from dependency_injector import containers, providers

from bign.domain.services.factory import NumberFactory
from bign.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)
from bign.shared.config import get_settings
from bign.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    precision_policy = providers.Singleton(
        PrecisionPolicy.from_settings,
        default_precision=config.default_precision,
        rounding_mode=config.rounding_mode,
    )

    precision_service = providers.Singleton(
        PrecisionService,
        policy=precision_policy,
    )

    number_factory = providers.Singleton(
        NumberFactory,
        precision_service=precision_service,
    )


def get_container(configure_logs: bool = False) -> Container:
    settings = get_settings()

    if configure_logs:
        configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    container = Container()

    container.config.from_dict(
        {
            "default_precision": settings.DEFAULT_PRECISION,
            "rounding_mode": settings.DEFAULT_ROUNDING_MODE,
        }
    )

    logger.info(
        "di_container_configured",
        default_precision=settings.DEFAULT_PRECISION,
        rounding_mode=settings.DEFAULT_ROUNDING_MODE,
    )

    return container
