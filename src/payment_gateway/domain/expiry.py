"""Card expiry rule."""

from payment_gateway.domain.clock import Clock, SystemClock

_system_clock = SystemClock()


def not_expired(month: int, year: int, clock: Clock | None = None) -> bool:
    """
    Check that a card's expiry month/year has not passed.

    A month outside 1-12 returns True: range checks on the month belong to
    the validator, and this rule must never be the one to reject it.

    Args:
        month: Expiry month
        year: Expiry year (four digits)
        clock: Source of "now" (defaults to the system clock)

    Returns:
        True if the card is still valid in the current UTC month
    """
    if month < 1 or month > 12:
        return True

    now = (clock or _system_clock).now()
    if year < now.year:
        return False
    if year > now.year:
        return True
    return month >= now.month
