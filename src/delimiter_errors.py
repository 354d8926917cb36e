ISA_LENGTH_ERROR_MESSAGE = "ISA segment must be at least 106 bytes long to extract delimiters"


class InvalidHeaderLengthError(ValueError):
    """Raised when an ISA header is too short to reach the segment terminator."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"{ISA_LENGTH_ERROR_MESSAGE} (got {length})")
