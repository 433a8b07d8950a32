class HexDecodeError(ValueError):
    pass


class InvalidHexDigit(HexDecodeError):
    """
    A slice of the hex string contains characters outside of [0-9a-fA-F].
    """

    def __init__(self, slice_: str, offset: int):
        self.slice_ = slice_
        self.offset = offset
        super().__init__(f"Invalid hex digit in {slice_!r} at offset {offset}")


class UnknownCodeHash(HexDecodeError, KeyError):
    """
    The requested name is not in the code hash table.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown code hash: {name}")

    def __str__(self):
        return self.args[0]
