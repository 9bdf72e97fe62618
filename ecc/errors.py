"""Exceptions raised by the PDF417 error-correction layer."""


class ChecksumError(Exception):
    """The received block cannot be corrected.

    Raised when errors and erasures exceed the correction capacity of the
    redundancy codewords, or when a candidate correction fails verification.
    """
