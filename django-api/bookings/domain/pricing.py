"""Options pricing and composition of the tax-inclusive price breakdown."""

from decimal import Decimal

from bookings.domain.models import OptionsSelection, PriceBreakdown
from bookings.domain.value_objects import Money, round2

INSURANCE_PER_DAY = Decimal("50")
EXTRA_DRIVER_FEE = Decimal("50")
CHILD_SEAT_FEE = Decimal("30")
INTERNATIONAL_PERMIT_FEE = Decimal("100")


class OptionsPricer:
    """Flat-rate add-on pricing. Open kilometers carries no charge."""

    def insurance(self, options: OptionsSelection, days: int) -> Money:
        if not options.insurance:
            return Money.of(0)
        return Money.of(INSURANCE_PER_DAY * days)

    def extras(self, options: OptionsSelection) -> Money:
        total = Decimal("0")
        if options.extra_driver:
            total += EXTRA_DRIVER_FEE
        if options.child_seat:
            total += CHILD_SEAT_FEE
        if options.international_permit:
            total += INTERNATIONAL_PERMIT_FEE
        return Money.of(total)


class PriceCalculator:
    """Pure composition of base rate, add-ons, delivery and tax."""

    def __init__(self, tax_rate: Decimal = Decimal("0.15"), options_pricer: OptionsPricer | None = None) -> None:
        self._tax_rate = tax_rate
        self._options_pricer = options_pricer or OptionsPricer()

    def calculate(
        self,
        daily_rate: Money,
        days: int,
        options: OptionsSelection,
        delivery_fee: Money,
    ) -> PriceBreakdown:
        if days < 1:
            raise ValueError("A rental is billed for at least one day")

        base = Money.of(daily_rate.amount * days)
        insurance = self._options_pricer.insurance(options, days)
        extras = self._options_pricer.extras(options)
        subtotal = base.amount + insurance.amount + extras.amount + delivery_fee.amount
        tax = round2(subtotal * self._tax_rate)

        return PriceBreakdown(
            base=base,
            insurance=insurance,
            extras=extras,
            delivery=delivery_fee,
            tax=Money(tax),
            total=Money(subtotal + tax),
        )
