import random
from datetime import date

import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def today():
    return date(2024, 3, 10)
