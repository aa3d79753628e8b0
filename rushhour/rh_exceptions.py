class RushHourException(Exception):
    """Base exception class for Rush Hour errors."""
    pass

class InvalidMove(RushHourException):
    """Raised when an invalid move is attempted."""
    pass

class VehicleNotFound(RushHourException):
    """Raised when a move refers to a vehicle index that is not on the board."""
    pass

class InvalidConfiguration(RushHourException):
    """Raised when a configuration breaks the board invariants (bounds, overlap, target)."""
    pass
