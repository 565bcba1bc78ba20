import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple

from .models import Rental, StatementLine

logger = logging.getLogger(__name__)


def format_amount(amount: Decimal) -> str:
    """Render 14 as '14.0' and 1.50 as '1.5'."""
    text = format(amount.normalize(), "f")
    if "." not in text:
        text += ".0"
    return text


@dataclass
class Statement:
    name: str
    _rentals: List[Rental] = field(default_factory=list, init=False, repr=False)
    total_amount: Decimal = field(default=Decimal("0"), init=False)
    total_points: int = field(default=0, init=False)

    @property
    def rentals(self) -> Tuple[Rental, ...]:
        return tuple(self._rentals)

    def add_rental(self, rental: Rental) -> None:
        self._rentals.append(rental)

    def lines(self) -> List[StatementLine]:
        return [
            StatementLine(
                title=r.movie.title,
                category=r.movie.category.name,
                days_rented=r.days_rented,
                amount=r.determine_amount(),
                points=r.determine_frequent_renter_points(),
            )
            for r in self._rentals
        ]

    def generate(self) -> str:
        self._clear_totals()
        result = f"Rental Record for {self.name}\n"
        for line in self.lines():
            self.total_amount += line.amount
            self.total_points += line.points
            result += f"\t{line.title}\t{format_amount(line.amount)}\n"

        result += f"Amount owed is {format_amount(self.total_amount)}\n"
        result += f"You earned {self.total_points} frequent renter points"

        logger.debug(
            "Generated statement for %s: %d rentals, amount=%s, points=%d",
            self.name, len(self._rentals), self.total_amount, self.total_points,
        )
        return result

    def _clear_totals(self) -> None:
        self.total_amount = Decimal("0")
        self.total_points = 0
