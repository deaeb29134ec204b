"""
Resistor Code - Error Types

Every failure raised by the color-code engine derives from ColorCodeError,
which is itself a ValueError so callers that only care about "bad input"
can catch the built-in type.  None of these are fatal: the caller catches
them at its boundary and shows a message.
"""


class ColorCodeError(ValueError):
    """Base class for recoverable color-code errors."""


class UnknownColor(ColorCodeError, KeyError):
    """The identifier is not one of the 13 table colors."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidFirstBand(ColorCodeError):
    """A 4- or 5-band resistor starts with a Black (zero) digit."""


class InvalidColorForRole(ColorCodeError):
    """A band color lacks the attribute its position needs, or the band
    count does not match the sequence."""


class NonStandardTolerance(ColorCodeError):
    """No table color carries exactly the requested tolerance."""


class UnrepresentableValue(ColorCodeError):
    """No multiplier/digit combination encodes the requested resistance."""


class InvalidValue(ColorCodeError):
    """Numeric or sequence input outside the accepted domain."""
