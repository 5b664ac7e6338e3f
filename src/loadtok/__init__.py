"""loadtok — decode typed values from slash-delimited token strings."""

from loadtok.domain.capability import Decodable, dump, load
from loadtok.domain.errors import DecodeError, EndOfStream, InvalidLength, ParseError
from loadtok.domain.record import Field, RecordDecoder, record
from loadtok.domain.registry import CapabilityRegistry, TypeExpressionError, default_registry
from loadtok.domain.scalars import FLOAT, INT, TEXT
from loadtok.domain.sequence import SequenceDecoder, sequence_of
from loadtok.domain.stream import DELIMITER, TokenStream

__version__ = "0.1.0"

__all__ = [
    "DELIMITER",
    "FLOAT",
    "INT",
    "TEXT",
    "CapabilityRegistry",
    "DecodeError",
    "Decodable",
    "EndOfStream",
    "Field",
    "InvalidLength",
    "ParseError",
    "RecordDecoder",
    "SequenceDecoder",
    "TokenStream",
    "TypeExpressionError",
    "__version__",
    "default_registry",
    "dump",
    "load",
    "record",
    "sequence_of",
]
