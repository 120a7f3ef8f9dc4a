import pytest
from pydantic import ValidationError

from pydrf.drf2 import ARRAY_RANGE, BYTE_RANGE, DEFAULT_RANGE, FULL_RANGE, parse_range
from pydrf.errors import MalformedNumber, TrailingInput, UnterminatedBracket


@pytest.mark.parametrize('rng, canonical', [
    ('[]', '[]'),
    ('{}', '[]'),
    ('[:]', '[]'),
    ('{:}', '[]'),
    ('[0:]', '[]'),
    ('{0:}', '[]'),
    ('[1:2]', '[1:2]'),
    ('[0:0]', ''),
    ('[1:1]', '[1]'),
    ('{1:1}', '{1}'),
    ('{1:2}', '{1:2}'),
    ('[3]', '[3]'),
    ('[3:]', '[3:]'),
    ('[:5]', '[0:5]'),
    ('{3}', '{3}'),
    ('{0}', '{0}'),
    ('{3:}', '{3:}'),
    ('{:5}', '{0:5}'),
    ('[65535]', '[65535]'),
    ('{4294967295:0}', '{4294967295:0}'),
])
def test_range_canonical_forms(rng, canonical):
    assert parse_range(rng).canonical() == canonical


def test_range_values():
    assert parse_range(None) == DEFAULT_RANGE
    assert parse_range('') == DEFAULT_RANGE
    assert parse_range('[0:0]') == DEFAULT_RANGE
    assert parse_range('[]') == FULL_RANGE()
    assert parse_range('{}') == FULL_RANGE()
    assert parse_range('[]') != DEFAULT_RANGE
    assert parse_range('[5]') == ARRAY_RANGE(start=5, end=5)
    assert parse_range('[5:]') == ARRAY_RANGE(start=5, end=None)
    assert parse_range('{5}') == BYTE_RANGE(offset=5, length=1)
    assert parse_range('{5:}') == BYTE_RANGE(offset=5, length=None)
    assert DEFAULT_RANGE.is_default
    assert not parse_range('[1]').is_default


def test_range_str_and_repr():
    r = parse_range('[1:2]')
    assert str(r) == '[1:2]'
    assert repr(r) == "<ARRAY_RANGE: '[1:2]'>"


class TestRangeErrors:
    @pytest.mark.parametrize('rng', ['[1', '[1:', '[a]', '{1:2', '[1}', '{1]', '[1:2:3]'])
    def test_unterminated(self, rng):
        with pytest.raises(UnterminatedBracket):
            parse_range(rng)

    @pytest.mark.parametrize('rng', ['[65536]', '[0:65536]', '{4294967296}', '{0:4294967296}'])
    def test_overflow(self, rng):
        with pytest.raises(MalformedNumber):
            parse_range(rng)

    def test_trailing(self):
        with pytest.raises(TrailingInput):
            parse_range('[1]x')
        with pytest.raises(TrailingInput):
            parse_range('[1][2]')

    def test_direct_construction_is_validated(self):
        with pytest.raises(ValidationError):
            ARRAY_RANGE(start=70000)
        with pytest.raises(ValidationError):
            BYTE_RANGE(offset=-1)
