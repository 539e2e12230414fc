"""
Logging setup - one dictConfig applied at application start.

Modules log through logging.getLogger(__name__).
"""

import logging.config
from typing import Optional

DEFAULT_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        'jobportal': {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False
        },
        'uvicorn.access': {
            'level': 'WARNING',
        },
    }
}


def setup_logging(log_level: Optional[str] = None) -> None:
    """Apply the logging config, optionally overriding the jobportal level."""
    config = {**DEFAULT_LOGGING_CONFIG, 'loggers': {
        name: dict(logger) for name, logger in DEFAULT_LOGGING_CONFIG['loggers'].items()
    }}
    if log_level:
        config['loggers']['jobportal']['level'] = log_level.upper()
    logging.config.dictConfig(config)
