from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_podkit_logger():
    # CLI invocations install a handler and stop propagation; caplog needs both undone
    yield
    logger = logging.getLogger("podkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
