"""Exceptions raised by dicekeep combiners and validators"""

class DiceError(Exception):
    """Base class of all dicekeep domain errors"""


class ConfigurationError(DiceError):
    """A combiner or die was constructed with invalid parameters"""


class InvalidRollError(DiceError):
    """The roll handed to a combiner is malformed or unusably empty"""

    def __init__(self, message, roll=None):
        super().__init__(message)
        if roll is not None:
            self.roll = roll


class ComparabilityError(DiceError):
    """Two rolled values could not be ordered by the active comparison"""

    def __init__(self, message, value=None, index=None):
        super().__init__(message)
        self.value = value
        self.index = index


class InvalidValueError(DiceError):
    """A value was rejected by one of the validators"""
