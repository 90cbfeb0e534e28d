# backend/logger.py

import logging

from config import DEBUG

# Configure a single “docsumm” logger here
logger = logging.getLogger("docsumm")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(module)s] %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.DEBUG if DEBUG else logging.INFO)
