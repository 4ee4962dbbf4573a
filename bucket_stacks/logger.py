# -*- coding: utf-8 -*-

"""
Logging setup shared by the deploy and debug scripts.
"""

import sys
import logging

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
