import os
import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    stage: str = "dev"


def load_settings():
    return Settings(
        log_level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
        stage=os.environ.get('STAGE', 'dev'),
    )


# Lambda already attaches a handler to the root logger, so only the level is set here
def configure_logging(settings):
    logger = logging.getLogger()
    logger.setLevel(settings.log_level)
    return logger
