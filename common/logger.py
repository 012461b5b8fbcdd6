import logging
from enum import IntEnum
from typing import Optional

DEFAULT_LOGGER_NAME = "paidfor"


class Level(IntEnum):
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class Logger:
    _logger: Optional[logging.Logger] = None

    @classmethod
    def configure(cls, name: str, level: Level | int) -> None:
        if cls._logger is not None:
            raise RuntimeError("logger has already been configured")

        logging.basicConfig(
            level=int(level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        cls._logger = logging.getLogger(name)
        cls._logger.setLevel(int(level))

    @classmethod
    def get(cls) -> logging.Logger:
        # parser code runs inside other processes too, where nobody calls configure()
        if cls._logger is None:
            return logging.getLogger(DEFAULT_LOGGER_NAME)
        return cls._logger

    @classmethod
    def log(cls, level: Level | int, msg: str, *args, **kwargs) -> None:
        cls.get().log(int(level), msg, *args, **kwargs)

    @classmethod
    def debug(cls, msg: str, *args, **kwargs) -> None:
        cls.get().debug(msg, *args, **kwargs)

    @classmethod
    def info(cls, msg: str, *args, **kwargs) -> None:
        cls.get().info(msg, *args, **kwargs)

    @classmethod
    def warning(cls, msg: str, *args, **kwargs) -> None:
        cls.get().warning(msg, *args, **kwargs)

    @classmethod
    def error(cls, msg: str, *args, **kwargs) -> None:
        cls.get().error(msg, *args, **kwargs)

    @classmethod
    def exception(cls, msg: str, *args, exc_info: bool = True, **kwargs) -> None:
        cls.get().exception(msg, *args, exc_info=exc_info, **kwargs)

    # httpx/httpcore are chatty at INFO
    @classmethod
    def silence(cls, *logger_names: str, level: Level | int = Level.CRITICAL) -> None:
        for n in logger_names:
            logging.getLogger(n).setLevel(int(level))
