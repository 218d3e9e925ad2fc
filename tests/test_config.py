import pytest
from pydantic import ValidationError

from refcode import (
    DEFAULT_CODE_LENGTH,
    Charset,
    CodeConfig,
    CustomCharset,
    EmptyCharsetError,
    InvalidCountError,
    InvalidPatternError,
    LengthPattern,
    SegmentsPattern,
    TemplatePattern,
    default_config,
)


def test_default_config():
    config = default_config()
    assert config.charset is Charset.ALPHANUMERIC
    assert config.pattern == LengthPattern(length=DEFAULT_CODE_LENGTH)
    assert config.count == 1
    assert config.prefix == config.postfix == ""


def test_default_config_is_fresh_and_equal():
    assert default_config() == default_config()
    assert default_config() == CodeConfig()


@pytest.mark.parametrize("count", [0, -1])
def test_invalid_count(count: int):
    with pytest.raises(InvalidCountError):
        CodeConfig(count=count)


def test_count_wrong_type_is_validation_error():
    with pytest.raises(ValidationError):
        CodeConfig(count="many")


def test_invalid_pattern():
    with pytest.raises(InvalidPatternError):
        CodeConfig(pattern=LengthPattern(length=0))


def test_empty_custom_charset():
    with pytest.raises(EmptyCharsetError):
        CodeConfig(charset=CustomCharset(symbols=""))


def test_config_is_frozen():
    config = default_config()
    with pytest.raises(ValidationError):
        config.count = 5  # type: ignore


def test_builders_return_new_configs():
    base = default_config()
    config = (
        base.with_charset(Charset.NUMERIC)
        .with_pattern(SegmentsPattern(lengths=[3, 3]))
        .with_count(4)
        .with_prefix("REF-")
        .with_postfix("!")
    )
    assert config.charset is Charset.NUMERIC
    assert config.pattern == SegmentsPattern(lengths=[3, 3])
    assert config.count == 4
    assert config.prefix == "REF-"
    assert config.postfix == "!"
    # the original is untouched
    assert base == default_config()


def test_builders_revalidate():
    with pytest.raises(InvalidCountError):
        default_config().with_count(0)


def test_parse_from_dict():
    config = CodeConfig.model_validate(
        {
            "charset": "numeric",
            "pattern": {"kind": "segments", "lengths": [4, 4], "separator": " "},
            "count": 3,
        }
    )
    assert config.charset is Charset.NUMERIC
    assert config.pattern == SegmentsPattern(lengths=[4, 4], separator=" ")
    assert config.count == 3


def test_parse_custom_charset_and_template_from_dict():
    config = CodeConfig.model_validate(
        {
            "charset": {"symbols": "XYZ"},
            "pattern": {"kind": "template", "template": "A-###"},
        }
    )
    assert config.charset == CustomCharset(symbols="XYZ")
    assert isinstance(config.pattern, TemplatePattern)


def test_parse_invalid_count_from_dict():
    with pytest.raises(InvalidCountError):
        CodeConfig.model_validate({"count": 0})


def test_parse_invalid_pattern_from_dict():
    with pytest.raises(InvalidPatternError):
        CodeConfig.model_validate({"pattern": {"kind": "length", "length": 0}})
