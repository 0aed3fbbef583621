class CoffeeMachineError(Exception):
    """Base class for hardware faults raised by machine collaborators."""
    pass


class GrinderException(CoffeeMachineError):
    """Raised when the grinder hits a mechanical fault."""
    pass


class HeaterException(CoffeeMachineError):
    """Raised when the milk heater fails."""
    pass
