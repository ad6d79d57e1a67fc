"""Configuração centralizada de logs do pacote ``finance_tracker``.

- ``configure_logging(...)``: anexa um único ``StreamHandler`` ao logger raiz
  do pacote. Deve ser chamada uma vez pelo ponto de entrada (``main``).
- ``get_logger(name)``: devolve um logger; enquanto nada foi configurado, o
  logger do pacote recebe um ``NullHandler`` para ficar silencioso.

Os módulos do pacote nunca anexam handlers próprios.
"""

import logging
import sys
from typing import IO, Union

_PKG_LOGGER_NAME = "finance_tracker"
_CONFIGURED = False


def _parse_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(
    level: Union[int, str, None] = None,
    fmt: Union[str, None] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configura o logger do pacote uma única vez."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Retorna um logger pelo nome, silencioso até ``configure_logging`` rodar."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
