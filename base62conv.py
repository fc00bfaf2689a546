#! /usr/bin/env python3

"""Convert a 32-bit unsigned integer to a Base62 string, and decode it.

Each value gets exactly one minimal-length representation of at most
six symbols, so these are suitable for generated file names and
identifiers.  Zero encodes as "0" rather than an empty string.
"""

ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
LENGTH = len(ALPHABET)
INVERTED = {char: index for (index, char) in enumerate(ALPHABET)}

MAX_VALUE = 2**32 - 1
# 62**5 < MAX_VALUE < 62**6
MAX_LENGTH = 6

class Base62Error(Exception):
    """Base exception for all codec errors."""

class EncodingError(Base62Error):
    """A digit outside the alphabet reached the symbol mapping.
    Indicates a bug rather than bad input."""

    def __init__(self, digit):
        self.digit = digit
        super().__init__('Encoding a value failed because digit {!r} is'
                         ' not representable in a single Base62 symbol'
                         .format(digit))

class DecodingError(Base62Error, ValueError):
    """Input contained a symbol outside the alphabet."""

    def __init__(self, symbol, index, message=None):
        self.symbol = symbol
        self.index = index
        if message is None:
            message = ('Decoding a value failed because symbol {!r} at'
                       ' index {} is not one of 0-9, a-z, A-Z'
                       .format(symbol, index))
        super().__init__(message)

class DecodingOverflowError(DecodingError):
    """Decoded value does not fit in 32 bits."""

    def __init__(self, length):
        self.length = length
        super().__init__(None, None,
                         'Decoding a value failed because the {} symbol'
                         ' input exceeds the 32-bit maximum of {}'
                         .format(length, MAX_VALUE))

def symbol_for(digit):
    """Returns the symbol for DIGIT in 0..61.
    May raise EncodingError"""
    if not 0 <= digit < LENGTH:
        raise EncodingError(digit)
    return ALPHABET[digit]

def digit_for(symbol, index=0):
    """Returns the digit value of SYMBOL.  INDEX is only reported on error.
    May raise DecodingError"""
    try:
        return INVERTED[symbol]
    except (KeyError, TypeError):
        raise DecodingError(symbol, index) from None

def _check_value(integer):
    if isinstance(integer, bool) or not isinstance(integer, int):
        raise TypeError('Value must be an integer, not {}'
                        .format(type(integer).__name__))
    if not 0 <= integer <= MAX_VALUE:
        raise ValueError('Value must be within 0..{}, not {}'
                         .format(MAX_VALUE, integer))

def _fill(integer, buffer):
    """Write symbols of INTEGER into BUFFER from its right end, growing
    it on the left when full.
    Returns: index of the most significant symbol"""
    position = len(buffer)
    while True:
        integer, remainder = divmod(integer, LENGTH)
        if position == 0:
            buffer[0:0] = b'\0'
        else:
            position -= 1
        buffer[position] = ord(symbol_for(remainder))
        if integer == 0:
            return position

def encode(integer, size_hint=None):
    """Returns INTEGER encoded as Base62 string.

    SIZE_HINT pre-sizes the output buffer and never changes the result.
    An unsatisfiable hint raises MemoryError or OverflowError from the
    allocator, never EncodingError.
    May raise EncodingError, ValueError or TypeError"""
    _check_value(integer)
    capacity = MAX_LENGTH if size_hint is None else size_hint
    if capacity < 0:
        raise ValueError('Size hint must be non-negative')
    buffer = bytearray(capacity)
    position = _fill(integer, buffer)
    return buffer[position:].decode('ascii')

def encode_with_prefix(integer, prefix, size_hint=None):
    """Returns PREFIX followed by INTEGER encoded as Base62 string.
    SIZE_HINT covers the whole result, prefix included.
    An unsatisfiable hint raises MemoryError or OverflowError."""
    _check_value(integer)
    if size_hint is None:
        size_hint = len(prefix) + MAX_LENGTH
    elif size_hint < 0:
        raise ValueError('Size hint must be non-negative')
    # Prefix is concatenated afterwards; only symbols need buffer space
    buffer = bytearray(max(size_hint - len(prefix), 0))
    position = _fill(integer, buffer)
    return prefix + buffer[position:].decode('ascii')

def decode(symbols):
    """Returns SYMBOLS in Base62 format as an integer.

    SYMBOLS may be any sequence of characters supporting reversed().
    An empty sequence decodes to 0, although 0 itself encodes as "0".
    Every symbol is validated before the value is accumulated, so an
    invalid symbol is reported ahead of any overflow.
    May raise DecodingError or DecodingOverflowError"""
    length = len(symbols)
    digits = [digit_for(symbol, index)
              for (index, symbol) in enumerate(symbols)]
    total = 0
    place = 1
    for digit in reversed(digits):
        if place > MAX_VALUE:
            # Only zero padding may remain beyond the 32-bit places
            if digit:
                raise DecodingOverflowError(length)
            continue
        total += digit * place
        if total > MAX_VALUE:
            raise DecodingOverflowError(length)
        place *= LENGTH

    return total
