# saltsim/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (floors, mutation rate, etc).
    Should NOT print traceback.
    """


class InvalidRecordError(ValueError):
    """
    Raised when a Record cannot be used for accounting:
    a wager that is zero or negative, or a negative duration.
    """
