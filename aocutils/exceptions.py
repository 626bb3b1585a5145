class AocUtilsError(Exception):
    """base exception for this package"""


class PuzzleDateError(AocUtilsError):
    """the year/day could not be determined from the caller"""


class MissingInputError(AocUtilsError):
    """no local file and no usable server response for the puzzle input"""


class MissingSessionError(AocUtilsError):
    """no session token in the environment or properties files"""


class CoercionError(AocUtilsError):
    """an answer value can not be safely turned into a string"""
