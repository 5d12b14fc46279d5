# README
# October 11, 2026

# Exceptions raised by the entropy codecs.

# EXCEPTIONS
##################################################

class EntropyCodingError(ValueError):
    """Base class for every error raised while encoding or decoding."""
    pass

class RangeError(EntropyCodingError):
    """A value does not fit in the requested fixed number of bits."""
    pass

class FormatError(EntropyCodingError):
    """A container header or serialized Huffman tree is malformed."""
    pass

class DecodeError(EntropyCodingError):
    """A payload ends in the middle of a code, or decodes to an invalid symbol."""
    pass

class DictionaryMiss(EntropyCodingError):
    """A symbol to compress has no code in the supplied dictionary."""

    def __init__(self, symbol: int, position: int = None):
        self.symbol = symbol
        self.position = position
        message = f"No code for symbol {symbol}"
        if position is not None:
            message += f" at position {position}"
        super().__init__(message + ".")

##################################################
