from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidPatternError

DEFAULT_SEPARATOR = "-"
DEFAULT_PLACEHOLDER = "#"


class LengthPattern(BaseModel):
    """A single contiguous run of symbols."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["length"] = "length"
    length: int

    @field_validator("length")
    @classmethod
    def _check_length(cls, value: int) -> int:
        if value < 1:
            raise InvalidPatternError(f"length must be at least 1, got {value}")
        return value

    def total_length(self) -> int:
        return self.length

    def render(self, symbols: Sequence[str]) -> str:
        return "".join(symbols)

    def extract_symbols(self, rendered: str) -> str | None:
        if len(rendered) != self.length:
            return None
        return rendered


class SegmentsPattern(BaseModel):
    """
    Runs of symbols with `separator` between adjacent runs, e.g. `ABCD-EFGH`.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["segments"] = "segments"
    lengths: tuple[int, ...]
    separator: str = DEFAULT_SEPARATOR

    @field_validator("lengths")
    @classmethod
    def _check_lengths(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if not value:
            raise InvalidPatternError("at least one segment is required")
        for length in value:
            if length < 1:
                raise InvalidPatternError(
                    f"segment lengths must be at least 1, got {length}"
                )
        return value

    def total_length(self) -> int:
        return sum(self.lengths)

    def render(self, symbols: Sequence[str]) -> str:
        segments: list[str] = []
        offset = 0
        for length in self.lengths:
            segments.append("".join(symbols[offset : offset + length]))
            offset += length
        return self.separator.join(segments)

    def extract_symbols(self, rendered: str) -> str | None:
        # walk by position, the alphabet may contain the separator itself
        symbols = ""
        pos = 0
        for i, length in enumerate(self.lengths):
            if i > 0:
                if not rendered.startswith(self.separator, pos):
                    return None
                pos += len(self.separator)
            segment = rendered[pos : pos + length]
            if len(segment) != length:
                return None
            symbols += segment
            pos += length

        if pos != len(rendered):
            return None
        return symbols


class TemplatePattern(BaseModel):
    """
    Every `placeholder` in `template` is replaced by a symbol, all other
    characters are kept as they are. `REF-###-###` yields e.g. `REF-4K9-Q2X`.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["template"] = "template"
    template: str
    placeholder: str = DEFAULT_PLACEHOLDER

    @model_validator(mode="after")
    def _check_template(self) -> "TemplatePattern":
        if len(self.placeholder) != 1:
            raise InvalidPatternError(
                f"placeholder must be a single character, got {self.placeholder!r}"
            )
        if self.placeholder not in self.template:
            raise InvalidPatternError(
                f"template {self.template!r} has no {self.placeholder!r} placeholder"
            )
        return self

    def total_length(self) -> int:
        return self.template.count(self.placeholder)

    def render(self, symbols: Sequence[str]) -> str:
        it = iter(symbols)
        return "".join(
            next(it) if c == self.placeholder else c for c in self.template
        )

    def extract_symbols(self, rendered: str) -> str | None:
        if len(rendered) != len(self.template):
            return None

        symbols = ""
        for expected, got in zip(self.template, rendered):
            if expected == self.placeholder:
                symbols += got
            elif expected != got:
                return None
        return symbols


Pattern = Annotated[
    Union[LengthPattern, SegmentsPattern, TemplatePattern],
    Field(discriminator="kind"),
]


__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_PLACEHOLDER",
    LengthPattern.__name__,
    SegmentsPattern.__name__,
    TemplatePattern.__name__,
    "Pattern",
]
