import logging


def setup_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера (один раз за процесс)"""
    logger = logging.getLogger()
    if logger.handlers:
        # uvicorn или pytest уже настроили обработчики
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
