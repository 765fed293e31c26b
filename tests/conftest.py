import logging
import random

import pytest

from py_unitsgame.logger import logger
from py_unitsgame.settings import Tuning

logger.setLevel(logging.DEBUG)


def pytest_addoption(parser):
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=20240501,
        help="Seed of the random source handed to generators and games",
    )


@pytest.fixture
def rng(request):
    seed = request.config.getoption("--seed")
    logger.info(f"Seeding random source with {seed}")
    return random.Random(seed)


@pytest.fixture(autouse=True)
def default_tuning():
    Tuning.restore_defaults()
    yield
    Tuning.restore_defaults()
