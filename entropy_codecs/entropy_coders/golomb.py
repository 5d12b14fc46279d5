# README
# October 13, 2026

# Adaptive Golomb-Rice Coder.
# Every byte is coded as a unary quotient (ones closed by a zero) and a fixed-width remainder, relative to a divisor 2 ** k.
# All eight exponents k = 0, ..., 7 are tried in parallel and the shortest encoding wins.
# The container is the 3-bit exponent followed by the payload.

# IMPORTS
##################################################

import numpy as np
import multiprocessing
import functools
import logging
from typing import List, Tuple
from bitarray import bitarray

from entropy_codecs.entropy_coders.entropy_coder import EntropyCoder, DATA_TYPE
from entropy_codecs.bitstream import BitInputStream, BitOutputStream, encode_fixed_width
from entropy_codecs.histogram import as_symbols
from entropy_codecs.constants import ENDIANESS, N_SYMBOLS, MAXIMUM_SYMBOL, GOLOMB_PARAMETER_BITS, GOLOMB_PARAMETERS, GOLOMB_UNARY_BIT, GOLOMB_TERMINATOR_BIT, JOBS_DEFAULT
from entropy_codecs.errors import DecodeError, FormatError

##################################################


# HELPER FUNCTIONS
##################################################

def validate_parameter(
    k: int,
) -> None:
    """
    Validate a Golomb-Rice exponent.

    Parameters
    ----------
    k : int
        The exponent to validate.
    """
    assert k in GOLOMB_PARAMETERS, f"Golomb-Rice exponent must be one of {GOLOMB_PARAMETERS}, but got {k}"

def get_code(
    symbol: int,
    k: int,
) -> bitarray:
    """
    Get the code of a single symbol.

    Parameters
    ----------
    symbol : int
        The symbol to code.
    k : int
        The exponent, so the divisor is 2 ** k.

    Returns
    -------
    bitarray
        `symbol >> k` ones, a zero, then `symbol % 2 ** k` in k bits.
    """
    code = bitarray((symbol >> k) * [GOLOMB_UNARY_BIT] + [GOLOMB_TERMINATOR_BIT], endian = ENDIANESS)
    code.extend(encode_fixed_width(value = symbol & ((1 << k) - 1), width = k))
    return code

def get_code_table(
    k: int,
) -> List[bitarray]:
    """Codes of every symbol for exponent `k`, indexed by symbol."""
    return [get_code(symbol = symbol, k = k) for symbol in range(N_SYMBOLS)]

def get_trial_length(
    data: DATA_TYPE,
    k: int,
) -> int:
    """
    Get the length in bits of the payload for exponent `k`, without encoding.

    Parameters
    ----------
    data : DATA_TYPE
        The data.
    k : int
        The exponent.

    Returns
    -------
    int
        The sum of the quotients, plus one terminator and k remainder bits per symbol.
    """
    symbols = as_symbols(data = data).astype(np.int64)
    return int(np.sum(symbols >> k)) + (len(symbols) * (1 + k))

##################################################


# PARAMETER SEARCH
##################################################

def encode_trial(
    k: int,
    data: bytes,
) -> bitarray:
    """
    Encode the payload with a fixed exponent. Stateless, so safe to run in a worker process.

    Parameters
    ----------
    k : int
        The exponent.
    data : bytes
        The data to encode.

    Returns
    -------
    bitarray
        The payload.
    """
    validate_parameter(k = k)
    table = get_code_table(k = k)
    out = BitOutputStream()
    for symbol in data:
        out.write_code(code = table[symbol])
    return out.flush()

def search(
    data: DATA_TYPE,
    jobs: int = JOBS_DEFAULT,
) -> Tuple[int, bitarray]:
    """
    Encode the data with every exponent and keep the shortest payload. Ties go to the lowest exponent.

    Parameters
    ----------
    data : DATA_TYPE
        The data to encode.
    jobs : int, default = JOBS_DEFAULT
        Number of worker processes. With a single job, the trials run in the calling process.

    Returns
    -------
    Tuple[int, bitarray]
        The selected exponent and its payload.
    """

    # run every trial to completion
    worker_func = functools.partial(encode_trial, data = as_symbols(data = data).tobytes())
    if jobs > 1:
        with multiprocessing.Pool(processes = jobs) as pool:
            trials = pool.map(func = worker_func, iterable = GOLOMB_PARAMETERS) # results come back in order of k
    else:
        trials = list(map(worker_func, GOLOMB_PARAMETERS))

    # select the shortest, first minimum wins
    k = min(GOLOMB_PARAMETERS, key = lambda k: len(trials[k]))
    logging.debug(f"golomb.search: trial lengths {[len(trial) for trial in trials]}, selected k={k}")

    return k, trials[k]

##################################################


# GOLOMB ENTROPY CODING FUNCTIONS
##################################################

def encode(
    out: BitOutputStream,
    data: DATA_TYPE,
    jobs: int = JOBS_DEFAULT,
) -> None:
    """
    Encode the data.

    Parameters
    ----------
    out : BitOutputStream
        The output stream to write to.
    data : DATA_TYPE
        The data to encode.
    jobs : int, default = JOBS_DEFAULT
        Number of worker processes for the parameter search.
    """

    # determine optimal exponent and write to stream
    k, payload = search(data = data, jobs = jobs)
    out.write_bits(bits = k, n = GOLOMB_PARAMETER_BITS)

    # write payload
    out.write_code(code = payload)

    return

def decode(
    inp: BitInputStream,
) -> bytes:
    """
    Decode the data.

    Parameters
    ----------
    inp : BitInputStream
        The input stream to read from. Should raise FormatError when reading past its end.

    Returns
    -------
    bytes
        The decoded data.
    """

    # get exponent
    k = inp.read_bits(n = GOLOMB_PARAMETER_BITS)
    payload = BitInputStream(bits = inp.read_rest(), error = DecodeError) # a truncated remainder is a bad payload

    # read symbols until the payload is exhausted
    symbols = bytearray()
    quotient = 0
    while not payload.is_exhausted():
        if payload.read_bit() == GOLOMB_UNARY_BIT:
            quotient += 1
            if (quotient << k) > MAXIMUM_SYMBOL:
                raise DecodeError(f"Quotient {quotient} with k={k} exceeds a byte at position {GOLOMB_PARAMETER_BITS + payload.get_position()}.")
            continue
        remainder = payload.read_bits(n = k)
        symbols.append((quotient << k) | remainder)
        quotient = 0
    if quotient > 0:
        raise DecodeError(f"Payload ends inside a unary quotient, after {len(symbols)} symbols.")

    return bytes(symbols)

##################################################


# ENTROPY CODER INTERFACE
##################################################

class GolombCoder(EntropyCoder):
    """
    Adaptive Golomb-Rice Coder.
    """

    @property
    def type_(self) -> str:
        """
        Get the type of the entropy coder.

        Returns
        -------
        str
            The type of the entropy coder.
        """
        return "golomb"

    def __init__(
        self,
        jobs: int = JOBS_DEFAULT,
    ):
        """
        Initialize the Golomb-Rice Coder.

        Parameters
        ----------
        jobs : int, default = JOBS_DEFAULT
            Number of worker processes for the parameter search.
        """
        self.jobs = jobs
        assert self.jobs > 0, "Number of jobs must be positive."

    def encode(
        self,
        data: DATA_TYPE,
    ) -> bitarray:
        """
        Encode the data.

        Parameters
        ----------
        data : DATA_TYPE
            The data to encode.

        Returns
        -------
        bitarray
            The container.
        """
        out = BitOutputStream() # helper for writing bits to an output stream
        encode(out = out, data = data, jobs = self.jobs)
        return out.flush()

    def decode(
        self,
        bits: bitarray,
    ) -> bytes:
        """
        Decode the data.

        Parameters
        ----------
        bits : bitarray
            The container to decode.

        Returns
        -------
        bytes
            The decoded data.
        """
        inp = BitInputStream(bits = bits, error = FormatError) # a missing exponent is a malformed container
        return decode(inp = inp)

##################################################
