# README
# October 11, 2026

# Symbol histogram of a byte stream.

# IMPORTS
##################################################

import numpy as np
from typing import Dict, Union

from entropy_codecs.constants import N_SYMBOLS

##################################################


# HELPER FUNCTIONS
##################################################

def as_symbols(data: Union[bytes, bytearray, memoryview, np.ndarray]) -> np.ndarray:
    """
    View a byte stream as a numpy array of symbols.

    Parameters
    ----------
    data : Union[bytes, bytearray, memoryview, np.ndarray]
        The byte stream.

    Returns
    -------
    np.ndarray
        The symbols, dtype uint8.
    """
    if isinstance(data, np.ndarray):
        assert data.dtype == np.uint8, "Data must be uint8."
        return data.reshape(-1)
    return np.frombuffer(bytes(data), dtype = np.uint8)

##################################################


# HISTOGRAM
##################################################

def count(data: Union[bytes, bytearray, memoryview, np.ndarray]) -> Dict[int, int]:
    """
    Count the occurrences of every symbol in a byte stream.

    Parameters
    ----------
    data : Union[bytes, bytearray, memoryview, np.ndarray]
        The byte stream.

    Returns
    -------
    Dict[int, int]
        Mapping from symbol to number of occurrences. Symbols that do not occur are absent.
    """
    counts = np.bincount(as_symbols(data = data), minlength = N_SYMBOLS)
    return {int(symbol): int(counts[symbol]) for symbol in np.flatnonzero(counts)}

##################################################
