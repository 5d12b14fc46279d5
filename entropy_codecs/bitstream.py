# README
# October 11, 2026

# Helper objects for reading and writing bit sequences, and for fixed-width unsigned integers.

# IMPORTS
##################################################

from typing import Type
from bitarray import bitarray
from bitarray.util import ba2int, int2ba

from entropy_codecs.constants import ENDIANESS, PADDING_HEADER_BYTES
from entropy_codecs.errors import EntropyCodingError, RangeError, DecodeError, FormatError

##################################################


# FIXED-WIDTH VALUES
##################################################

def encode_fixed_width(value: int, width: int) -> bitarray:
    """
    Encode an unsigned integer as exactly `width` bits, least significant bit first.

    Parameters
    ----------
    value : int
        The unsigned integer to encode.
    width : int
        The number of bits to use.

    Returns
    -------
    bitarray
        The bits, where the bit at index i contributes 2 ** i.
    """
    if value < 0 or value >= (1 << width):
        raise RangeError(f"Value {value} does not fit in {width} bits.")
    if width == 0: # zero-width field, only zero fits
        return bitarray(endian = ENDIANESS)
    return int2ba(int(value), length = width, endian = ENDIANESS)

def decode_fixed_width(bits: bitarray) -> int:
    """
    Decode bits (least significant bit first) into an unsigned integer.

    Parameters
    ----------
    bits : bitarray
        The bits to decode.

    Returns
    -------
    int
        The sum of 2 ** i over every set bit i.
    """
    if len(bits) == 0:
        return 0
    return ba2int(bitarray(bits, endian = ENDIANESS)) # ba2int reads in the bitarray's own endianness

def format_bits(bits: bitarray) -> str:
    """Render a fixed-width value most significant bit first, e.g. `encode_fixed_width(8, 5)` as '01000'."""
    return bits.to01()[::-1]

##################################################


# BYTE TRANSPORT
##################################################

def pack(bits: bitarray) -> bytes:
    """
    Pack a bit sequence into bytes. The first byte holds the number of zero bits padding the final byte.

    Parameters
    ----------
    bits : bitarray
        The bit sequence.

    Returns
    -------
    bytes
        The padding count followed by the packed bits.
    """
    padding = (8 - (len(bits) % 8)) % 8
    bits = bitarray(bits, endian = ENDIANESS)
    return bytes([padding]) + bits.tobytes()

def unpack(stream: bytes) -> bitarray:
    """
    Inverse of `pack`.

    Parameters
    ----------
    stream : bytes
        The padding count followed by the packed bits.

    Returns
    -------
    bitarray
        The bit sequence.
    """
    if len(stream) < PADDING_HEADER_BYTES:
        raise FormatError("Packed stream is missing its padding byte.")
    padding = stream[0]
    body = stream[PADDING_HEADER_BYTES:]
    if padding >= 8 or (padding > 0 and len(body) == 0):
        raise FormatError(f"Invalid padding of {padding} bits for {len(body)} bytes.")
    bits = bitarray(endian = ENDIANESS)
    bits.frombytes(bytes(body))
    if padding > 0:
        del bits[-padding:]
    return bits

##################################################


# BIT INPUT STREAM
##################################################

class BitInputStream:
    """
    Stream object for reading bits from a bit sequence.
    """

    def __init__(self, bits: bitarray, error: Type[EntropyCodingError] = DecodeError):
        """
        Initialize the bit input stream.

        Parameters
        ----------
        bits : bitarray
            The bit sequence to read from.
        error : Type[EntropyCodingError], default = DecodeError
            The exception raised when a read runs past the end of the sequence.
        """
        self.stream = bits
        self.error = error
        self.reset()

    def get_position(self) -> int:
        """
        Get the current position in the stream.

        Returns
        -------
        int
            The current bit position in the stream.
        """
        return self.position

    def get_remaining(self) -> int:
        """Number of bits left to read."""
        return len(self.stream) - self.position

    def is_exhausted(self) -> bool:
        """Whether every bit has been read."""
        return self.position >= len(self.stream)

    def _check(self, n: int):
        if self.position + n > len(self.stream):
            raise self.error(f"End of stream reached: needed {n} bits at position {self.position}, but only {self.get_remaining()} remain.")

    def read_bit(self) -> bool:
        """
        Read a single bit.

        Returns
        -------
        bool
            The bit.
        """
        self._check(n = 1)
        bit = bool(self.stream[self.position])
        self.position += 1
        return bit

    def read_slice(self, n: int) -> bitarray:
        """
        Read `n` bits as a bit sequence.

        Parameters
        ----------
        n : int
            The number of bits to read.

        Returns
        -------
        bitarray
            The bits.
        """
        self._check(n = n)
        bits = self.stream[self.position:self.position + n]
        self.position += n
        return bits

    def read_bits(self, n: int) -> int:
        """
        Read `n` bits as a fixed-width unsigned integer.

        Parameters
        ----------
        n : int
            The number of bits to read.

        Returns
        -------
        int
            The value.
        """
        return decode_fixed_width(bits = self.read_slice(n = n))

    def read_rest(self) -> bitarray:
        """Read every remaining bit."""
        return self.read_slice(n = self.get_remaining())

    def reset(self):
        """Reset the cursor to the start of the stream."""
        self.position = 0 # current bit position in stream

##################################################


# BIT OUTPUT STREAM
##################################################

class BitOutputStream:
    """
    Stream object for writing bits to a bit sequence. Nothing is ever padded or aligned.
    """

    def __init__(self):
        """Initialize the bit output stream."""
        self.stream = bitarray(endian = ENDIANESS)

    def get_position(self) -> int:
        """
        Get the current position in the stream.

        Returns
        -------
        int
            The number of bits written so far.
        """
        return len(self.stream)

    def write_bit(self, bit: bool):
        """
        Write a single bit.

        Parameters
        ----------
        bit : bool
            The bit to write.
        """
        self.stream.append(bool(bit))

    def write_bits(self, bits: int, n: int):
        """
        Write `bits` as an `n`-bit fixed-width unsigned integer.

        Parameters
        ----------
        bits : int
            The value to write.
        n : int
            The number of bits to write.
        """
        self.stream.extend(encode_fixed_width(value = bits, width = n))

    def write_code(self, code: bitarray):
        """
        Write a bit sequence as is.

        Parameters
        ----------
        code : bitarray
            The bits to write.
        """
        self.stream.extend(code)

    def flush(self) -> bitarray:
        """
        Get the stream contents.

        Returns
        -------
        bitarray
            A copy of every bit written so far.
        """
        return self.stream.copy()

##################################################
