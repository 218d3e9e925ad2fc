import enum
import string

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import EmptyCharsetError

Symbol = str
Alphabet = tuple[Symbol, ...]


class Charset(str, enum.Enum):
    NUMERIC = "numeric"
    ALPHA_LOWER = "alpha_lower"
    ALPHA_UPPER = "alpha_upper"
    ALPHABETIC = "alphabetic"
    ALPHANUMERIC = "alphanumeric"


class CustomCharset(BaseModel):
    """Caller supplied alphabet. Repeated characters are only used once."""

    model_config = ConfigDict(frozen=True)

    symbols: str

    @field_validator("symbols")
    @classmethod
    def _check_not_empty(cls, value: str) -> str:
        if not value:
            raise EmptyCharsetError()
        return value


CharsetSelector = Charset | CustomCharset


def _dedup(symbols: str) -> Alphabet:
    # dict keeps insertion order, so the first occurrence of each symbol wins
    return tuple(dict.fromkeys(symbols))


def resolve(charset: CharsetSelector) -> Alphabet:
    match charset:
        case Charset.NUMERIC:
            return tuple(string.digits)
        case Charset.ALPHA_LOWER:
            return tuple(string.ascii_lowercase)
        case Charset.ALPHA_UPPER:
            return tuple(string.ascii_uppercase)
        case Charset.ALPHABETIC:
            return tuple(string.ascii_lowercase + string.ascii_uppercase)
        case Charset.ALPHANUMERIC:
            return tuple(
                string.ascii_lowercase + string.ascii_uppercase + string.digits
            )
        case CustomCharset(symbols=symbols):
            # instances created through `model_construct` skip the validator
            if not symbols:
                raise EmptyCharsetError()
            return _dedup(symbols)
        case _:
            raise NotImplementedError(charset)


def alphabet_size(charset: CharsetSelector) -> int:
    return len(resolve(charset))


__all__ = [
    "Symbol",
    "Alphabet",
    Charset.__name__,
    CustomCharset.__name__,
    "CharsetSelector",
    resolve.__name__,
    alphabet_size.__name__,
]
