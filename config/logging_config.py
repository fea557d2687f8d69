"""
Logging configuration for the task list project.

Everything goes to the console; the level for the project's own loggers
comes from LOG_LEVEL.
"""
import os

DEFAULT_LOG_LEVEL = 'INFO'


def get_log_level() -> str:
    level = os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        raise ValueError(f"Invalid LOG_LEVEL: {level}")
    return level


def get_logging_config(level: str) -> dict:
    """
    Returns a dictConfig mapping.

    Args:
        level: Level for the `apps` logger tree

    Returns:
        Dictionary suitable for Django's LOGGING setting
    """
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'verbose',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'loggers': {
            'apps': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
            'django.request': {
                'handlers': ['console'],
                'level': 'WARNING',
                'propagate': False,
            },
        },
    }
