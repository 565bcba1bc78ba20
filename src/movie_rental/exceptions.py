class RentalError(Exception):
    pass

class InvalidRentalError(RentalError, ValueError):
    pass

class InvalidMovieError(RentalError, ValueError):
    pass
