import logging
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from delimiter_errors import InvalidHeaderLengthError

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_TERMINATOR = ord('~')
DEFAULT_ELEMENT_SEPARATOR = ord('*')
DEFAULT_SUB_ELEMENT_SEPARATOR = ord(':')

# Positions are fixed in the X12 standard
ISA_MIN_LENGTH = 106
ISA_ELEMENT_SEPARATOR_INDEX = 3
ISA_SUB_ELEMENT_SEPARATOR_INDEX = 104
ISA_SEGMENT_TERMINATOR_INDEX = 105

IsaSource = Union[bytes, bytearray, memoryview, str]


def _as_bytes(data: IsaSource) -> bytes:
    # One character per byte; anything above U+00FF cannot come from a byte stream.
    if isinstance(data, str):
        return data.encode('latin-1')
    return bytes(data)


class Delimiters(BaseModel):
    """
    The three delimiter characters of an X12 interchange.

    X12 delimiters control how segments, elements and sub-elements are separated.
    Each is held as a single 8-bit character code. The standard defaults are:
    - Segment terminator: '~'
    - Element separator: '*'
    - Sub-element separator: ':'

    No semantic check happens at construction; call `are_valid()` before handing
    the set to a tokenizer.
    """
    model_config = ConfigDict(frozen=True)

    segment_terminator: int = Field(ge=0, le=255, strict=True)
    element_separator: int = Field(ge=0, le=255, strict=True)
    sub_element_separator: int = Field(ge=0, le=255, strict=True)

    @field_validator('segment_terminator', 'element_separator', 'sub_element_separator', mode='before')
    @classmethod
    def _coerce_character(cls, value):
        if isinstance(value, bool):
            raise ValueError("a delimiter must be a byte code or a single character, not a bool")
        if isinstance(value, (bytes, bytearray)) and len(value) == 1:
            return value[0]
        if isinstance(value, str) and len(value) == 1:
            return ord(value)
        return value

    @classmethod
    def new(cls, segment_terminator, element_separator, sub_element_separator) -> 'Delimiters':
        """Creates a delimiter set from explicit values, in segment/element/sub-element order."""
        return cls(
            segment_terminator=segment_terminator,
            element_separator=element_separator,
            sub_element_separator=sub_element_separator,
        )

    @classmethod
    def default(cls) -> 'Delimiters':
        return cls(
            segment_terminator=DEFAULT_SEGMENT_TERMINATOR,
            element_separator=DEFAULT_ELEMENT_SEPARATOR,
            sub_element_separator=DEFAULT_SUB_ELEMENT_SEPARATOR,
        )

    @classmethod
    def from_isa(cls, isa_segment: IsaSource) -> 'Delimiters':
        """
        Extracts delimiters from an ISA segment.

        The ISA segment is the first segment of an X12 interchange and is fixed width:
        - Element separator is at position 3
        - Sub-element separator is at position 104
        - Segment terminator is at position 105

        Anything after position 105 is ignored. The extracted bytes are taken verbatim,
        and the input is not checked for the 'ISA' tag.

        Raises:
            InvalidHeaderLengthError: if the segment is shorter than 106 bytes.
        """
        data = _as_bytes(isa_segment)
        if len(data) < ISA_MIN_LENGTH:
            raise InvalidHeaderLengthError(len(data))

        delimiters = cls(
            element_separator=data[ISA_ELEMENT_SEPARATOR_INDEX],
            sub_element_separator=data[ISA_SUB_ELEMENT_SEPARATOR_INDEX],
            segment_terminator=data[ISA_SEGMENT_TERMINATOR_INDEX],
        )
        logger.debug(
            f"Delimiters extracted: Element={delimiters.element_separator_char!r}, "
            f"Segment={delimiters.segment_terminator_char!r}, Component={delimiters.sub_element_separator_char!r}"
        )
        return delimiters

    @property
    def segment_terminator_char(self) -> str:
        return chr(self.segment_terminator)

    @property
    def element_separator_char(self) -> str:
        return chr(self.element_separator)

    @property
    def sub_element_separator_char(self) -> str:
        return chr(self.sub_element_separator)

    def are_valid(self) -> bool:
        """All three delimiters must differ, otherwise tokenizing is ambiguous."""
        return (
            self.segment_terminator != self.element_separator
            and self.segment_terminator != self.sub_element_separator
            and self.element_separator != self.sub_element_separator
        )


def detect_delimiters(edi_content: IsaSource) -> Delimiters:
    """
    Detects delimiters from the ISA header at the start of an EDI document.

    Leading whitespace is skipped. When the document does not open with a full ISA
    header, or its delimiters are not single-byte characters, the standard defaults
    are returned instead of raising.
    """
    if isinstance(edi_content, str):
        clean_edi = edi_content.lstrip()
        if clean_edi.startswith('ISA') and len(clean_edi) >= ISA_MIN_LENGTH:
            element_sep = clean_edi[ISA_ELEMENT_SEPARATOR_INDEX]
            sub_element_sep = clean_edi[ISA_SUB_ELEMENT_SEPARATOR_INDEX]
            segment_term = clean_edi[ISA_SEGMENT_TERMINATOR_INDEX]
            if max(ord(element_sep), ord(sub_element_sep), ord(segment_term)) <= 0xFF:
                return Delimiters.new(segment_term, element_sep, sub_element_sep)
            logger.warning(
                f"ISA delimiters {element_sep!r}, {sub_element_sep!r}, {segment_term!r} are not single-byte characters."
            )
    else:
        clean_edi = bytes(edi_content).lstrip()
        if clean_edi.startswith(b'ISA') and len(clean_edi) >= ISA_MIN_LENGTH:
            return Delimiters.from_isa(clean_edi)
    logger.warning("Could not find standard ISA segment. Falling back to default delimiters ('*', '~', ':').")
    return Delimiters.default()
