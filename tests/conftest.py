"""Shared fixtures: the two demo measurement profiles."""

import pytest

from hormone_scoring.core.models import MeasurementSnapshot
from hormone_scoring.core.reference_ranges import DEFAULT_REFERENCE_RANGES
from hormone_scoring.core.weights import DEFAULT_WEIGHTS


PERIMENOPAUSE_VALUES = {
    "Progesterone": 2.1,
    "Pregnenolone": 70,
    "17-Hydroxyprogesterone": 45,
    "Estrone": 95,
    "Estradiol": 45,
    "Estriol": 0.4,
    "2-Hydroxyestrone": 12,
    "Testosterone": 24,
    "DHEA": 165,
    "DHT": 6,
    "Androstenedione": 90,
    "Androsterone": 120,
    "Hydroxytestosterone": 4,
    "Cortisol": 17.5,
    "Cortisone": 3.2,
    "Corticosterone": 0.6,
    "Aldosterone": 14,
}

HIGH_STRESS_VALUES = {
    "Progesterone": 4.2,
    "Pregnenolone": 60,
    "17-Hydroxyprogesterone": 38,
    "Estrone": 120,
    "Estradiol": 90,
    "Estriol": 0.7,
    "2-Hydroxyestrone": 10,
    "Testosterone": 30,
    "DHEA": 120,
    "DHT": 8,
    "Androstenedione": 110,
    "Androsterone": 140,
    "Hydroxytestosterone": 5,
    "Cortisol": 22.0,
    "Cortisone": 3.8,
    "Corticosterone": 0.4,
    "Aldosterone": 18,
}


@pytest.fixture
def perimenopause():
    return MeasurementSnapshot("T1", PERIMENOPAUSE_VALUES)


@pytest.fixture
def high_stress():
    return MeasurementSnapshot("T2", HIGH_STRESS_VALUES)


@pytest.fixture
def reference_ranges():
    return DEFAULT_REFERENCE_RANGES


@pytest.fixture
def weights():
    return DEFAULT_WEIGHTS
