"""
Pytest Configuration and Fixtures for Calendar App Tests

Provides fixtures for:
- Fixed reference dates ("today")
- Date and month key ranges for property checks
- Week salary maps
"""
from datetime import date, timedelta

import pytest

from core.config import WeekAttributionConfig


# ===== REFERENCE DATE FIXTURES =====

@pytest.fixture
def as_of():
    """Fixed "today": Saturday 2024-02-10."""
    return date(2024, 2, 10)


# ===== RANGE FIXTURES =====

@pytest.fixture(scope="session")
def all_days():
    """Every day from 2023-01-01 to 2025-12-31 (covers a leap year)."""
    start = date(2023, 1, 1)
    end = date(2025, 12, 31)
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


@pytest.fixture(scope="session")
def month_key_range():
    """Factory fixture for consecutive month keys, inclusive on both ends."""
    def _create(first_year: int = 2023, last_year: int = 2025) -> list:
        return [
            f"{year:04d}-{month:02d}"
            for year in range(first_year, last_year + 1)
            for month in range(1, 13)
        ]
    return _create


# ===== PAYROLL FIXTURES =====

@pytest.fixture
def week_salaries():
    """Week salary map spanning the January/February 2024 boundary."""
    return {
        "2024-01-22": 100.0,
        "2024-01-29": 500.0,  # Ends Feb 4, attributed to January
        "2024-02-05": 300.0,
    }


# ===== CONFIG FIXTURES =====

@pytest.fixture
def config_override(monkeypatch):
    """Temporarily override WeekAttributionConfig attributes."""
    def _override(**values):
        for name, value in values.items():
            monkeypatch.setattr(WeekAttributionConfig, name, value)
    return _override
