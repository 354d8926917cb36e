# Shared ISA header samples for the delimiter tests.

STANDARD_ISA = b"ISA*00*          *00*          *ZZ*SENDERID       *ZZ*RECEIVERID     *250403*0856*U*00501*000000001*0*P*:~"
ALTERNATE_ISA = b"ISA^00^          ^00^          ^ZZ^SENDERID       ^ZZ^RECEIVERID     ^250403^0856^U^00401^000000002^1^T^>}"
TOO_SHORT_ISA = b"ISA*00*"


def build_isa(element_sep: int, sub_element_sep: int, segment_term: int, filler: int = ord('X')) -> bytes:
    """Builds a minimal 106-byte header carrying the given delimiters at their fixed offsets."""
    isa = bytearray(b"ISA")
    isa.append(element_sep)
    while len(isa) < 104:
        isa.append(element_sep if len(isa) % 2 == 0 else filler)
    isa.append(sub_element_sep)
    isa.append(segment_term)
    return bytes(isa)
