"""Unit tests for options pricing and the price breakdown.

Run with: pytest tests/test_pricing.py -v
"""

from decimal import Decimal

import pytest

from bookings.domain import Money, OptionsSelection
from bookings.domain.pricing import OptionsPricer, PriceCalculator
from bookings.domain.value_objects import round2


@pytest.fixture
def calculator() -> PriceCalculator:
    return PriceCalculator(tax_rate=Decimal("0.15"))


class TestOptionsPricer:
    """Tests for OptionsPricer."""

    def test_insurance_is_charged_per_day(self):
        assert OptionsPricer().insurance(OptionsSelection(insurance=True), 3).amount == Decimal("150.00")

    def test_no_insurance_is_free(self):
        assert OptionsPricer().insurance(OptionsSelection(), 3).amount == 0

    def test_flat_extras_are_summed(self):
        options = OptionsSelection(extra_driver=True, child_seat=True, international_permit=True)
        assert OptionsPricer().extras(options).amount == Decimal("180.00")

    def test_open_km_is_free(self):
        assert OptionsPricer().extras(OptionsSelection(open_km=True)).amount == 0

    def test_extras_do_not_depend_on_days(self):
        """Extras are flat per booking; only insurance scales with days."""
        options = OptionsSelection(extra_driver=True)
        assert OptionsPricer().extras(options).amount == Decimal("50.00")


class TestPriceCalculator:
    """Tests for PriceCalculator."""

    def test_scenario_no_options_branch_pickup(self, calculator):
        price = calculator.calculate(Money.of(142), 3, OptionsSelection(), Money.of(0))
        assert price.base.amount == Decimal("426.00")
        assert price.insurance.amount == 0
        assert price.extras.amount == 0
        assert price.delivery.amount == 0
        assert price.tax.amount == Decimal("63.90")
        assert price.total.amount == Decimal("489.90")

    def test_scenario_insurance_and_extra_driver(self, calculator):
        options = OptionsSelection(insurance=True, extra_driver=True)
        price = calculator.calculate(Money.of(142), 3, options, Money.of(0))
        assert price.insurance.amount == Decimal("150.00")
        assert price.extras.amount == Decimal("50.00")
        assert price.subtotal == Decimal("626.00")
        assert price.tax.amount == Decimal("93.90")
        assert price.total.amount == Decimal("719.90")

    def test_delivery_fee_is_taxed(self, calculator):
        price = calculator.calculate(Money.of(100), 1, OptionsSelection(), Money.of(40))
        assert price.tax.amount == Decimal("21.00")
        assert price.total.amount == Decimal("161.00")

    @pytest.mark.parametrize("daily_rate", ["99.99", "142", "412.50", "0.03"])
    @pytest.mark.parametrize("days", [1, 2, 7, 31])
    def test_total_reconciles_with_tax_formula(self, calculator, daily_rate, days):
        """total == round2(subtotal * 1.15) for any rate and day count."""
        options = OptionsSelection(insurance=True, child_seat=True)
        price = calculator.calculate(Money.of(daily_rate), days, options, Money.of(15))
        assert price.total.amount == round2(price.subtotal * Decimal("1.15"))
        assert price.total.amount == price.subtotal + price.tax.amount

    def test_rejects_zero_days(self, calculator):
        with pytest.raises(ValueError):
            calculator.calculate(Money.of(142), 0, OptionsSelection(), Money.of(0))

    def test_custom_tax_rate(self):
        price = PriceCalculator(tax_rate=Decimal("0.05")).calculate(
            Money.of(200), 1, OptionsSelection(), Money.of(0)
        )
        assert price.total.amount == Decimal("210.00")
