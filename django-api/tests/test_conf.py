"""Tests for reading engine settings.

Run with: pytest tests/test_conf.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.exceptions import ImproperlyConfigured

from bookings.conf import get_policy


class TestGetPolicy:
    """Tests for get_policy."""

    def test_missing_keys_use_defaults(self, settings):
        settings.BOOKINGS = {"MUTABLE_WINDOW_MINUTES": 15}
        policy = get_policy()
        assert policy.mutable_window == timedelta(minutes=15)
        assert policy.min_lead_time == timedelta(hours=2)
        assert policy.tax_rate == Decimal("0.15")

    def test_invalid_value_is_improperly_configured(self, settings):
        settings.BOOKINGS = {"TAX_RATE": "fifteen percent"}
        with pytest.raises(ImproperlyConfigured):
            get_policy()

    def test_negative_window_is_improperly_configured(self, settings):
        settings.BOOKINGS = {"MUTABLE_WINDOW_MINUTES": -5}
        with pytest.raises(ImproperlyConfigured):
            get_policy()
