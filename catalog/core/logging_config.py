"""
Настройка логирования приложения.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Настроить корневой логгер.

    Args:
        level: Имя уровня логирования (DEBUG/INFO/WARNING/ERROR)
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("catalog").setLevel(level.upper())
