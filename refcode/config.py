from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .charset import Charset, CharsetSelector
from .errors import InvalidCountError
from .pattern import LengthPattern, Pattern

DEFAULT_CODE_LENGTH = 8


class CodeConfig(BaseModel):
    """
    Everything needed to generate a batch of codes.

    Validation happens once, when the config is constructed. The alphabet is
    not stored here, it's resolved from `charset` by the generator.
    """

    model_config = ConfigDict(frozen=True)

    charset: CharsetSelector = Charset.ALPHANUMERIC
    pattern: Pattern = Field(
        default_factory=lambda: LengthPattern(length=DEFAULT_CODE_LENGTH)
    )
    count: int = 1
    prefix: str = ""
    postfix: str = ""

    @field_validator("count")
    @classmethod
    def _check_count(cls, value: int) -> int:
        if value < 1:
            raise InvalidCountError(value)
        return value

    def _replace(self, **changes: Any) -> "CodeConfig":
        # go through __init__ again so the new values are validated as well
        return type(self)(**{**dict(self), **changes})

    def with_pattern(self, pattern: Pattern) -> "CodeConfig":
        return self._replace(pattern=pattern)

    def with_count(self, count: int) -> "CodeConfig":
        return self._replace(count=count)

    def with_charset(self, charset: CharsetSelector) -> "CodeConfig":
        return self._replace(charset=charset)

    def with_prefix(self, prefix: str) -> "CodeConfig":
        return self._replace(prefix=prefix)

    def with_postfix(self, postfix: str) -> "CodeConfig":
        return self._replace(postfix=postfix)


def default_config() -> CodeConfig:
    """Single alphanumeric code of `DEFAULT_CODE_LENGTH` symbols."""
    return CodeConfig(
        charset=Charset.ALPHANUMERIC,
        pattern=LengthPattern(length=DEFAULT_CODE_LENGTH),
        count=1,
    )


__all__ = [
    "DEFAULT_CODE_LENGTH",
    CodeConfig.__name__,
    default_config.__name__,
]
