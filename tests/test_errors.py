import pytest

from pydrf import DRFError, DRFParseError, ParseErrorKind, parse_request
from pydrf.errors import ExpectedSeparator, MalformedNumber, TrailingInput, UnknownToken, \
    UnterminatedBracket


@pytest.mark.parametrize('drf, error, kind', [
    ('M_OUTTMP', ExpectedSeparator, ParseErrorKind.EXPECTED_SEPARATOR),
    ('M:OUTTMP@P,1x', UnknownToken, ParseErrorKind.UNKNOWN_TOKEN),
    ('M:OUTTMP{99999999999}', MalformedNumber, ParseErrorKind.MALFORMED_NUMBER),
    ('M:OUTTMP{1:2', UnterminatedBracket, ParseErrorKind.UNTERMINATED_BRACKET),
    ('M:OUTTMP.SCALED.RAW', TrailingInput, ParseErrorKind.TRAILING_INPUT),
])
def test_error_kinds(drf, error, kind):
    with pytest.raises(error) as e:
        parse_request(drf)
    assert e.value.kind == kind
    assert e.value.text == drf
    assert isinstance(e.value, DRFParseError)
    assert isinstance(e.value, DRFError)
    assert isinstance(e.value, ValueError)
    assert e.value.is_trailing == (kind == ParseErrorKind.TRAILING_INPUT)


def test_error_message():
    with pytest.raises(DRFParseError) as e:
        parse_request('M:OUTTMP.READING.ON')
    assert e.value.position == 16
    assert "'M:OUTTMP.READING.ON'" in str(e.value)
    assert 'position 16' in str(e.value)


def test_error_without_position():
    e = UnknownToken('bad')
    assert str(e) == 'bad'
    assert e.position is None
