class SimulationError(ValueError):
    """Base class for inputs the engine refuses to simulate."""


class InvalidInputError(SimulationError):
    pass


class InvalidCapacityError(SimulationError):
    pass


class InvalidPolicyError(SimulationError):
    pass
