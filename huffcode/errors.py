"""
Exceptions raised by the Huffman coding pipeline
"""


class HuffmanError(Exception):
    """
    Base class for every error raised by huffcode
    """


class EmptyInputError(HuffmanError, ValueError):
    """
    Raised when there are no symbols to build a Huffman tree from.
    """

    def __init__(self, message="Cannot build Huffman tree from empty input"):
        super().__init__(message)


class TreeHeightError(HuffmanError):
    """
    Raised when the height of a tree cannot be computed because
    an internal node is missing one of its children.
    """

    def __init__(self, message="Could not calculate tree height due to missing child"):
        super().__init__(message)


class CodeLookupError(HuffmanError, LookupError):
    """
    Raised by the encoder when a symbol has no code in the table.
    """

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} not found in code table")


class JoinError(HuffmanError):
    """
    Raised by the encoder when a code cannot be appended to the output.
    """

    def __init__(self, message="Unable to join binary codes"):
        super().__init__(message)


class DecodeError(HuffmanError, ValueError):
    """
    Raised when a bit sequence cannot be decoded with the given tree.
    """
