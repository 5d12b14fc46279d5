# README
# October 12, 2026

# Entropy Coder interface.

# IMPORTS
##################################################

from abc import ABC, abstractmethod
from typing import Union
import numpy as np
from bitarray import bitarray

from entropy_codecs import bitstream

##################################################


# CONSTANTS
##################################################

# anything that can be read as a byte stream
DATA_TYPE = Union[bytes, bytearray, memoryview, np.ndarray]

##################################################


# ENTROPY CODER INTERFACE
##################################################

class EntropyCoder(ABC):
    """
    Abstract base class for entropy coders. Containers are bit sequences, with no byte alignment.
    """

    @property
    @abstractmethod
    def type_(self) -> str:
        """
        Get the type of the entropy coder.

        Returns
        -------
        str
            The type of the entropy coder.
        """
        return self.__class__.__name__

    @abstractmethod
    def __init__(
        self,
    ):
        """
        Initialize the entropy coder.
        """
        pass

    @abstractmethod
    def encode(
        self,
        data: DATA_TYPE,
    ) -> bitarray:
        """
        Encode the data into a self-describing container.

        Parameters
        ----------
        data : DATA_TYPE
            The byte stream to encode.

        Returns
        -------
        bitarray
            The container.
        """
        pass

    @abstractmethod
    def decode(
        self,
        bits: bitarray,
    ) -> bytes:
        """
        Decode a container.

        Parameters
        ----------
        bits : bitarray
            The container to decode.

        Returns
        -------
        bytes
            The decoded byte stream.
        """
        pass

    def encode_to_bytes(
        self,
        data: DATA_TYPE,
    ) -> bytes:
        """
        Encode the data, packing the container into bytes (see `bitstream.pack`).

        Parameters
        ----------
        data : DATA_TYPE
            The byte stream to encode.

        Returns
        -------
        bytes
            The packed container.
        """
        return bitstream.pack(bits = self.encode(data = data))

    def decode_from_bytes(
        self,
        stream: bytes,
    ) -> bytes:
        """
        Decode a container packed into bytes (see `bitstream.unpack`).

        Parameters
        ----------
        stream : bytes
            The packed container.

        Returns
        -------
        bytes
            The decoded byte stream.
        """
        return self.decode(bits = bitstream.unpack(stream = stream))

    def get_compressed_size(
        self,
        bits: bitarray,
    ) -> int:
        """
        Get the compressed size of the data in bits.

        Parameters
        ----------
        bits : bitarray
            The container.

        Returns
        -------
        int
            The size of the container in bits.
        """
        return len(bits)

##################################################
