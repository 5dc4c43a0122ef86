"""RC6 and Twofish ciphers, disk-image helpers and console messages for Allwinner IMAGEWTY tools."""

__version__ = "1.0.0"