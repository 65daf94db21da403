# -*- coding: utf-8 -*-
"""BRR Exceptions."""


class BRRException(Exception):
    """Base class exception for this module.

    Parameters
    ----------
    message : str
        Error description.

    """

    def __init__(self, message):
        super().__init__(message)


class FormatError(BRRException):
    """Raised when the compressed input is malformed."""


class TruncatedSample(FormatError):
    """Raised when the source runs out before an END block.

    Parameters
    ----------
    offset : int
        Byte offset of the first block.
    blocks : int
        Number of complete blocks read before the source ran out.

    """

    def __init__(self, offset, blocks):
        self.offset = offset
        self.blocks = blocks
        super().__init__(f'Sample@0x{offset:X} truncated after {blocks} '
                         f'block(s) without an END block')


class InvalidFilter(FormatError):
    """Raised when decoding a block with an unknown filter.

    Parameters
    ----------
    filter_id : int
        Filter number taken from the block header.

    """

    def __init__(self, filter_id):
        self.filter_id = filter_id
        super().__init__(f'Invalid filter: {filter_id}')


class ConfigurationError(BRRException):
    """Raised when playback settings cannot be resolved."""


class InvalidArgument(ConfigurationError):
    """Raised when an argument is in an invalid range.

    Parameters
    ----------
    arg : int or str
        Offending value.
    arg_type : str
        Description of argument type.

    """

    def __init__(self, arg, arg_type):
        self.arg = arg
        self.arg_type = arg_type
        if isinstance(arg, int) and arg >= 0:
            super().__init__(f'Invalid argument: 0x{arg:X} [{arg_type}]')
        else:
            super().__init__(f'Invalid argument: {arg!r} [{arg_type}]')


class StreamExhausted(BRRException):
    """Raised when a sample is requested from a finished stream."""

    def __init__(self):
        super().__init__('No samples left in stream; check has_next() first.')
