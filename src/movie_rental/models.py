from dataclasses import dataclass
from decimal import Decimal

from .categories import MovieCategory
from .exceptions import InvalidMovieError, InvalidRentalError


@dataclass(frozen=True)
class Movie:
    title: str  # Empty titles are accepted
    category: MovieCategory

    def __post_init__(self):
        if not isinstance(self.category, MovieCategory):
            raise InvalidMovieError(
                f"Movie {self.title!r} needs a MovieCategory, got {self.category!r}"
            )

    def determine_amount(self, days_rented: int) -> Decimal:
        return self.category.charge(days_rented)

    def determine_frequent_renter_points(self, days_rented: int) -> int:
        return self.category.points(days_rented)


@dataclass(frozen=True)
class Rental:
    movie: Movie
    days_rented: int

    def __post_init__(self):
        if isinstance(self.days_rented, bool) or not isinstance(self.days_rented, int):
            raise InvalidRentalError(f"days_rented must be an integer: {self.days_rented!r}")
        if self.days_rented < 0:
            raise InvalidRentalError(f"days_rented cannot be negative: {self.days_rented}")

    def determine_amount(self) -> Decimal:
        return self.movie.determine_amount(self.days_rented)

    def determine_frequent_renter_points(self) -> int:
        return self.movie.determine_frequent_renter_points(self.days_rented)


@dataclass(frozen=True)
class StatementLine:
    title: str
    category: str
    days_rented: int
    amount: Decimal
    points: int
