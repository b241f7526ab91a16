"""
Errors raised while loading input or writing property files
"""


class ConversionError(ValueError):
    """Base class for failures that abort a conversion"""


class InputUnreadableError(ConversionError):
    """The input file is missing or cannot be opened"""


class MalformedJSONError(ConversionError):
    """The input text could not be parsed"""


class OutputUnwritableError(ConversionError):
    """The output file cannot be created"""
