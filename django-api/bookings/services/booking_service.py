"""Booking service - all booking business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from bookings.domain import (
    Booking,
    BookingDraft,
    BookingId,
    BookingNumber,
    BookingPolicy,
    BookingStatus,
    CarPricingInfo,
    DeliveryMode,
    DeliveryRequest,
    OptionsSelection,
    Quote,
    RentalRequest,
)
from bookings.domain.delivery import DeliveryFeeEstimator
from bookings.domain.errors import (
    BookingNotFoundError,
    BookingNumberUnavailableError,
    CarNotFoundError,
    DeliveryUnavailableError,
    InvalidBookingIdError,
    NotMutableError,
)
from bookings.domain.lifecycle import BookingLifecycle
from bookings.domain.pricing import PriceCalculator
from bookings.domain.rental_window import DateWindowValidator
from bookings.stores.interfaces import BookingStore, CatalogStore, DuplicateBookingNumberError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Actor:
    """The authenticated caller. Staff act administratively."""

    user_id: str
    is_staff: bool = False


class BookingService:
    """Service for quoting, submitting and changing bookings."""

    def __init__(
        self,
        catalog: CatalogStore,
        store: BookingStore,
        clock: Callable[[], datetime],
        policy: BookingPolicy | None = None,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._clock = clock
        self._policy = policy or BookingPolicy()
        self._window_validator = DateWindowValidator(self._policy.min_lead_time)
        self._delivery_estimator = DeliveryFeeEstimator(self._policy.max_delivery_km)
        self._calculator = PriceCalculator(self._policy.tax_rate)
        self.lifecycle = BookingLifecycle(self._policy.mutable_window)

    def quote(self, request: RentalRequest) -> Quote:
        """Price a rental request.

        A delivery range problem is reported on the quote, not raised.

        Raises:
            CarNotFoundError: If the car is not in the catalog.
            InvalidWindowError: If the window is malformed.
            LeadTimeViolationError: If pickup is too soon.
            MissingLocationError: If delivery is requested without a location.
        """
        return self._price(request, self._car_info(request.car_id), self._clock())

    def submit(self, draft: BookingDraft) -> Booking:
        """Price a draft authoritatively and persist it as a pending booking.

        Raises:
            DeliveryUnavailableError: If the requested delivery cannot be served.
            BookingNumberUnavailableError: If no free booking number was found.
            Any error raised by quote().
        """
        now = self._clock()
        info = self._car_info(draft.request.car_id)
        quote = self._price(draft.request, info, now)
        self._ensure_deliverable(quote)

        for _ in range(self._policy.booking_number_attempts):
            number = BookingNumber.generate()
            if self._store.booking_number_exists(number.value):
                continue
            try:
                created = self._store.create(self._new_booking(draft, info, quote, number, now))
            except DuplicateBookingNumberError:
                logger.warning("Booking number %s was taken concurrently, drawing another", number)
                continue
            logger.info(
                "Booking %s submitted by user %s for car %s, total %s",
                created.booking_number, created.user_id, created.car_id, created.price.total,
            )
            return created
        logger.error("Exhausted booking number attempts")
        raise BookingNumberUnavailableError()

    def get_booking(self, booking_id: str, actor: Actor) -> Booking:
        """Return a booking visible to the actor.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist or belongs to someone else.
        """
        try:
            parsed = BookingId.from_string(booking_id)
        except ValueError:
            raise InvalidBookingIdError() from None

        booking = self._store.get(parsed)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        if not actor.is_staff and booking.user_id != actor.user_id:
            logger.warning("User %s requested booking %s owned by another user", actor.user_id, booking_id)
            raise BookingNotFoundError(booking_id)
        return booking

    def list_bookings(self, actor: Actor) -> list[Booking]:
        """Return the actor's bookings, or every booking for staff."""
        if actor.is_staff:
            return self._store.list_bookings()
        return self._store.list_bookings(user_id=actor.user_id)

    def cancel(self, booking_id: str, actor: Actor, reason: str | None = None) -> Booking:
        """Cancel a booking.

        Raises:
            NotMutableError: If a customer cancels outside the mutable window.
            ConcurrentModificationError: If the status changed concurrently.
        """
        booking = self.get_booking(booking_id, actor)
        now = self._clock()
        self._ensure_mutable(booking, actor, now)
        cancelled = self.lifecycle.cancel(booking, now, reason, administrative=actor.is_staff)
        saved = self._store.update(cancelled, expected_status=booking.status)
        logger.info("Booking %s cancelled by user %s", saved.booking_number, actor.user_id)
        return saved

    def edit(
        self,
        booking_id: str,
        actor: Actor,
        *,
        start: datetime,
        end: datetime,
        options: OptionsSelection,
        delivery: DeliveryRequest,
    ) -> Booking:
        """Re-price a booking with new window, options and delivery.

        Raises:
            NotMutableError: If a customer edits outside the mutable window.
            DeliveryUnavailableError: If the new delivery cannot be served.
            ConcurrentModificationError: If the status changed concurrently.
            Any error raised by quote().
        """
        booking = self.get_booking(booking_id, actor)
        now = self._clock()
        self._ensure_mutable(booking, actor, now)

        request = RentalRequest(
            car_id=booking.car_id, start=start, end=end, options=options, delivery=delivery
        )
        quote = self._price(
            request, self._car_info(booking.car_id), now, administrative=actor.is_staff
        )
        self._ensure_deliverable(quote)
        edited = self.lifecycle.edit(
            booking,
            now,
            window=quote.window,
            options=options,
            delivery=delivery.normalized(),
            price=quote.price,
            administrative=actor.is_staff,
        )
        saved = self._store.update(edited, expected_status=booking.status)
        logger.info(
            "Booking %s edited by user %s, new total %s",
            saved.booking_number, actor.user_id, saved.price.total,
        )
        return saved

    def change_status(self, booking_id: str, target: BookingStatus, actor: Actor) -> Booking:
        """Administrative status change. Authorization is the caller's job."""
        booking = self.get_booking(booking_id, actor)
        changed = self.lifecycle.transition(booking, target)
        saved = self._store.update(changed, expected_status=booking.status)
        logger.info(
            "Booking %s moved from %s to %s by %s",
            saved.booking_number, booking.status.value, target.value, actor.user_id,
        )
        return saved

    def is_mutable(self, booking: Booking) -> bool:
        return self.lifecycle.is_mutable(booking, self._clock())

    def _car_info(self, car_id: str) -> CarPricingInfo:
        info = self._catalog.get_car_pricing_info(car_id)
        if info is None:
            raise CarNotFoundError(car_id)
        return info

    def _price(
        self,
        request: RentalRequest,
        info: CarPricingInfo,
        now: datetime,
        *,
        administrative: bool = False,
    ) -> Quote:
        window = self._window_validator.validate(
            request.start, request.end, now, enforce_lead_time=not administrative
        )
        branch_point = None
        if request.delivery.mode is not DeliveryMode.BRANCH and request.delivery.location is not None:
            branch_point = self._catalog.get_branch_point(info.branch_id)
        delivery = self._delivery_estimator.estimate(branch_point, request.delivery)
        price = self._calculator.calculate(info.daily_rate, window.days, request.options, delivery.fee)

        logger.debug(
            "Quoted car %s for %d day(s): total %s, delivery error %r",
            request.car_id, window.days, price.total, delivery.error,
        )
        return Quote(window=window, delivery=delivery, price=price)

    def _ensure_mutable(self, booking: Booking, actor: Actor, now: datetime) -> None:
        if actor.is_staff:
            return
        try:
            self.lifecycle.ensure_mutable(booking, now)
        except NotMutableError:
            logger.warning(
                "Rejected change to booking %s by user %s: status %s, window closed at %s",
                booking.booking_number, actor.user_id, booking.status.value,
                self.lifecycle.mutable_until(booking).isoformat(),
            )
            raise

    def _ensure_deliverable(self, quote: Quote) -> None:
        if quote.delivery_error:
            raise DeliveryUnavailableError(quote.delivery_error)

    def _new_booking(
        self,
        draft: BookingDraft,
        info: CarPricingInfo,
        quote: Quote,
        number: BookingNumber,
        now: datetime,
    ) -> Booking:
        return Booking(
            id=None,
            booking_number=number,
            car_id=draft.request.car_id,
            user_id=draft.user_id,
            branch_id=info.branch_id,
            window=quote.window,
            options=draft.request.options,
            delivery=draft.request.delivery.normalized(),
            price=quote.price,
            contact=draft.contact,
            documents=draft.documents,
            payment_method=draft.payment_method,
            status=BookingStatus.PENDING,
            created_at=now,
            notes=draft.notes,
        )
