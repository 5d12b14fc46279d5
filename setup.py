from setuptools import setup, find_packages

setup(
    name="entropy_codecs",
    version="0.1.0",
    description="Canonical Huffman and adaptive Golomb-Rice coding of byte streams at the bit level.",
    packages=find_packages(include=["entropy_codecs", "entropy_codecs.*"]),
    python_requires=">=3.10",
    zip_safe=False,
    install_requires=[
        "numpy",
        "bitarray",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
