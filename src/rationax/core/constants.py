import numpy as np

# Signed integer base types, ordered from narrowest to widest
SIGNED_INTEGER_TYPES: tuple[type[np.signedinteger], ...] = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
)

"""Base type used when a Rational is built from plain python integers"""
DEFAULT_BASE_TYPE: type[np.signedinteger] = np.int64

"""Separator written between numerator and denominator"""
RATIONAL_DELIMITER: str = "/"
