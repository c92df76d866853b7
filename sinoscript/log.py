import logging

logger = logging.getLogger("sinoscript")
