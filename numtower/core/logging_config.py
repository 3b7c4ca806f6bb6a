"""
Logging для numtower.

Библиотека не настраивает handlers сама: на корневой logger пакета
устанавливается NullHandler. Приложение (REPL, evaluator) вызывает
setup_logging() для вывода в консоль.

Использование:
    from numtower.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("dispatch %s x %s -> %s", a, b, kind)
"""

import logging
import sys
from typing import Final, TextIO

ROOT_LOGGER_NAME: Final[str] = "numtower"

LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Logger внутри иерархии numtower.

    Args:
        name: Обычно __name__ модуля. Имена вне пакета помещаются
            под корневой logger numtower.

    Returns:
        logging.Logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """
    Подключение консольного handler к корневому logger пакета.

    Повторный вызов заменяет ранее установленный handler, а не дублирует его.

    Args:
        level: Уровень логирования (default: INFO)
        stream: Поток вывода (default: sys.stderr)

    Returns:
        Установленный handler
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root.handlers):
        if getattr(handler, "_numtower_console", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._numtower_console = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(level)
    return handler
