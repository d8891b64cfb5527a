"""Shared test fixtures for mizan."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from mizan.zakat.nisab import compute_nisab


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "logging": {"level": "info"},
        "zakat": {
            "currency": "gbp",
            "nisab_standard": "gold",
            "gold_nisab_grams": "85",
            "silver_nisab_grams": "595",
        },
        "reminders": {"lead_days": 14},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def usd_nisab():
    """Gold at 65/g and silver at 0.85/g: gold nisab 5686.20, silver 520.506."""
    return compute_nisab(Decimal("65"), Decimal("0.85"), "USD", as_of_date=date(2025, 3, 15))
