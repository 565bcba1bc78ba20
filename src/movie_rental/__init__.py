from .categories import CHILDRENS, NEW_RELEASE, REGULAR, FlatRateCategory, MovieCategory, PerDayCategory
from .exceptions import InvalidMovieError, InvalidRentalError, RentalError
from .models import Movie, Rental, StatementLine
from .statement import Statement, format_amount

__all__ = [
    "Statement",
    "StatementLine",
    "Movie",
    "Rental",
    "MovieCategory",
    "FlatRateCategory",
    "PerDayCategory",
    "REGULAR",
    "NEW_RELEASE",
    "CHILDRENS",
    "format_amount",
    "RentalError",
    "InvalidRentalError",
    "InvalidMovieError",
]
