import logging

from movie_catalog.domain.ports.services.logger import LoggerPort


class _ComponentAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        return f"[{self.extra['component']}] {msg}", kwargs


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: str, component: str):
        self._logger = _ComponentAdapter(logging.getLogger(name), {"component": component})

    def debug(self, msg: str) -> None:
        self._logger.debug(msg)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warning(self, msg: str) -> None:
        self._logger.warning(msg)

    def error(self, msg: str) -> None:
        self._logger.error(msg)
