import logging
import os
from typing import Iterator

import pytest


@pytest.fixture(scope="session", autouse=True)
def debug_logging() -> Iterator[None]:
    """
    Turns on debug logging for fnvfold when `FNVFOLD_DEBUG=true` in the
    environment, which is handy for seeing which parameter set and fold a
    failing case went through.
    """

    if os.getenv("FNVFOLD_DEBUG") != "true":
        yield
        return

    logger = logging.getLogger("fnvfold")
    handler = logging.StreamHandler()
    previous_level = logger.level

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield

    logger.removeHandler(handler)
    logger.setLevel(previous_level)


@pytest.fixture
def hashme() -> bytes:
    """
    Input for the known vectors, all of which came from
    https://nqv.github.io/fnv/.
    """

    return b"asdfasdfasdfasdf"
