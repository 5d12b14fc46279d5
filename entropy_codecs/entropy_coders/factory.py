# README
# October 13, 2026

# IMPORTS
##################################################

from entropy_codecs.entropy_coders.entropy_coder import EntropyCoder
from entropy_codecs.entropy_coders.huffman import HuffmanCoder
from entropy_codecs.entropy_coders.golomb import GolombCoder

##################################################


# CONSTANTS
##################################################

TYPES = ["huffman", "golomb"]

##################################################


# FACTORY
##################################################

def get_entropy_coder(
    type_: str,
    **kwargs,
) -> EntropyCoder:
    """
    Get an entropy coder of the given type.

    Parameters
    ----------
    type_ : str
        The type of entropy coder to get.
    **kwargs : dict
        Additional keyword arguments to pass to the entropy coder constructor.

    Returns
    -------
    EntropyCoder
        The entropy coder.
    """

    match type_:
        case "huffman":
            return HuffmanCoder(**kwargs)
        case "golomb":
            return GolombCoder(**kwargs)
        case _:
            raise ValueError(f"Invalid entropy coder type: {type_}")

##################################################
