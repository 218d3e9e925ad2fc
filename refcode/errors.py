class CodeGenerationError(Exception):
    """Base class for everything the code engine raises on bad input."""


class InvalidCountError(CodeGenerationError):
    def __init__(self, count: int) -> None:
        super().__init__(f"count must be at least 1, got {count}")
        self.count = count


class InvalidPatternError(CodeGenerationError):
    ...


class EmptyCharsetError(CodeGenerationError):
    def __init__(self) -> None:
        super().__init__("custom charset must contain at least one symbol")


class ExhaustedAlphabetError(CodeGenerationError):
    """
    The alphabet and pattern can't produce enough distinct codes for the batch.
    """


__all__ = [
    CodeGenerationError.__name__,
    InvalidCountError.__name__,
    InvalidPatternError.__name__,
    EmptyCharsetError.__name__,
    ExhaustedAlphabetError.__name__,
]
