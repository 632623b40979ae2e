import logging
import sys

from utils.constants import LOG_LEVEL

logger = logging.getLogger("pizzerias")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(module)s] %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(LOG_LEVEL.upper())
    logger.propagate = False
