from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

# ---------------------------------------------------------------------------
# Tariff
# Regular:     2.0 covers 2 days, then 1.5/day
# New Release: 3.0/day, 2 points when rented for more than 1 day
# Childrens:   1.5 covers 3 days, then 1.5/day
# ---------------------------------------------------------------------------
_REGULAR_BASE       = Decimal("2.0")
_REGULAR_DAYS       = 2
_REGULAR_RATE       = Decimal("1.5")

_NEW_RELEASE_RATE   = Decimal("3.0")
_NEW_RELEASE_BONUS  = 1

_CHILDRENS_BASE     = Decimal("1.5")
_CHILDRENS_DAYS     = 3
_CHILDRENS_RATE     = Decimal("1.5")


class MovieCategory(ABC):
    """Pricing policy for one movie classification.

    Subclasses compute a rental charge and a frequent renter point award
    from the number of days rented. Both must be pure and defined for every
    non-negative integer.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def charge(self, days_rented: int) -> Decimal:
        ...

    def points(self, days_rented: int) -> int:
        return 1


@dataclass(frozen=True)
class FlatRateCategory(MovieCategory):
    """Base charge covering the first days, then a per-day surcharge."""

    label: str
    base_charge: Decimal
    included_days: int
    daily_rate: Decimal

    @property
    def name(self) -> str:
        return self.label

    def charge(self, days_rented: int) -> Decimal:
        amount = self.base_charge
        if days_rented > self.included_days:
            amount += (days_rented - self.included_days) * self.daily_rate
        return amount


@dataclass(frozen=True)
class PerDayCategory(MovieCategory):
    """Charged for every day; long rentals earn a bonus point."""

    label: str
    daily_rate: Decimal
    bonus_after_days: int

    @property
    def name(self) -> str:
        return self.label

    def charge(self, days_rented: int) -> Decimal:
        return days_rented * self.daily_rate

    def points(self, days_rented: int) -> int:
        if days_rented > self.bonus_after_days:
            return 2
        return 1


REGULAR = FlatRateCategory("Regular", _REGULAR_BASE, _REGULAR_DAYS, _REGULAR_RATE)
NEW_RELEASE = PerDayCategory("New Release", _NEW_RELEASE_RATE, _NEW_RELEASE_BONUS)
CHILDRENS = FlatRateCategory("Childrens", _CHILDRENS_BASE, _CHILDRENS_DAYS, _CHILDRENS_RATE)
