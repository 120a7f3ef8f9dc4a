import pandas as pd
import pytest

from pydrf.errors import DRFError, TrailingInput
from pydrf.utils import *


def test_ensure_immediate_event():
    assert ensure_immediate_event('M:OUTTMP') == 'M:OUTTMP@I'
    assert ensure_immediate_event('M|OUTTMP[0:3]') == 'M|OUTTMP[0:3]@I'
    assert ensure_immediate_event('M:OUTTMP@p,1000') == 'M:OUTTMP@p,1000'


def test_get_device_name():
    assert get_device_name('M|OUTTMP[0:10]@p,1000') == 'M:OUTTMP'
    assert get_device_name('M:OUTTMP.SETTING') == 'M:OUTTMP'


def test_replace_and_strip_event():
    assert replace_event('M:OUTTMP@p,1000', 'E,0F') == 'M:OUTTMP.READING.SCALED@E,F,E,0'
    assert replace_event('M|OUTTMP', '@I') == 'M:OUTTMP.STATUS.ALL@I'
    assert strip_event('M:OUTTMP[0:10]@p,1000') == 'M:OUTTMP.READING[0:10].SCALED'
    assert strip_event('M:OUTTMP') == 'M:OUTTMP.READING.SCALED'


def test_has_event():
    assert not has_event('M:OUTTMP')
    assert not has_event('M:OUTTMP@U')
    assert has_event('M:OUTTMP@I')
    assert has_event('M:OUTTMP[]@p,1000')


def test_has_explicit_property():
    assert not has_explicit_property('M:OUTTMP')
    assert not has_explicit_property('M|OUTTMP')
    assert not has_explicit_property('M:OUTTMP.RAW')
    assert has_explicit_property('M:OUTTMP.SETTING')
    assert has_explicit_property('M|OUTTMP.status[1].ON')
    with pytest.raises(TrailingInput):
        has_explicit_property('M:OUTTMP.ON')


def test_is_setting_property():
    assert is_setting_property('M:OUTTMP.SETTING')
    assert not is_setting_property('M:OUTTMP')


@pytest.mark.parametrize('drf, result', [
    ('Z:ACLTST', 'Z:ACLTST.SETTING.SCALED@N'),
    ('Z:ACLTST.RAW@I', 'Z:ACLTST.SETTING.RAW@N'),
    ('Z|ACLTST', 'Z:ACLTST.CONTROL@N'),
    ('Z|ACLTST.ON', 'Z:ACLTST.CONTROL@N'),
    ('Z:ACLTST.SETTING[0:3]', 'Z:ACLTST.SETTING[0:3].SCALED@N'),
    ('Z:ACLTST.ANALOG.MIN@p,1000', 'Z:ACLTST.ANALOG.MIN@N'),
])
def test_prepare_for_write(drf, result):
    assert prepare_for_write(drf) == result


def test_sort_drf_strings():
    devs = ['N:I2B1RI', 'N:I2B1RI.SETTING', 'Z|ACLTST', 'N:IBB1RH[0:1000]', 'N:I2B1RI@p,1000',
            'N:I2B1RI[]@p,1000']
    d, s, a = sort_drf_strings(devs)
    assert d == ['N:I2B1RI', 'N:I2B1RI.SETTING', 'N:I2B1RI@p,1000']
    assert s == ['Z|ACLTST']
    assert a == ['N:IBB1RH[0:1000]', 'N:I2B1RI[]@p,1000']

    with pytest.raises(DRFError):
        sort_drf_strings(['Z|ACLTST[0:3]'])
    with pytest.raises(DRFError):
        sort_drf_strings(['Z:ACLTST.DESCRIPTION'])


def test_requests_to_dataframe():
    df = requests_to_dataframe(['M:OUTTMP', 'M|OUTTMP.ON@I', 'Z:ACLTST.CONTROL[2]'])
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 3
    assert df['property'].tolist() == ['READING', 'STATUS', 'CONTROL']
    assert df.loc[1, 'canonical'] == 'M:OUTTMP.STATUS.ON@I'
    assert df.loc[1, 'event'] == '@I'
    assert df.loc[2, 'range'] == '[2]'
    assert df.loc[0, 'range'] == ''
    assert pd.isna(df.loc[2, 'field'])

    empty = requests_to_dataframe([])
    assert len(empty) == 0
    assert list(empty.columns) == ['drf', 'device', 'property', 'field', 'range', 'event',
                                   'canonical']
