from datetime import datetime

import pytest

from quakecore.quake_time import date_now, replace_to_unix


def test_iso_time_replace():
    assert replace_to_unix("created_date > 2020-04-12 22:10:57 +08:00") == "created_date > 1586700657"
    assert replace_to_unix("created_date > 2020-04-12 22:10:57") == "created_date > 1586729457"
    assert replace_to_unix("created_date > 2021-12-09") == "created_date > 1639008000"
    assert replace_to_unix("created_date > 2021.12.09") == "created_date > 1639008000"


def test_rfc_time_replace():
    assert replace_to_unix("created_date > 2021-08-20 06:32:28.537346") == "created_date > 1629441148"
    assert replace_to_unix("created_date > 2021-11-08T07:25:26Z") == "created_date > 1636356326"
    assert replace_to_unix("created_date > 2021-11-08T07:25:26.125Z") == "created_date > 1636356326"


def test_multiple_time_replace():
    text = "created_date > 2020-04-12 22:10:57 +08:00 AND created_date < 2020-05-12 22:10:57 +08:00"
    assert replace_to_unix(text) == "created_date > 1586700657 AND created_date < 1589292657"

    text = "created_date > 2020-04-12 22:10:57 +08:00 AND created_date < 2020-05-12"
    assert replace_to_unix(text) == "created_date > 1586700657 AND created_date < 1589241600"


def test_text_without_dates_is_unchanged():
    assert replace_to_unix("status = 'Todo'") == "status = 'Todo'"


def test_invalid_date_raises():
    with pytest.raises(ValueError):
        replace_to_unix("created_date > 2021-13-45")


def test_date_now_format():
    value = date_now()
    fmt = "%Y-%m-%d %H:%M:%S"
    assert len(value) == 19
    assert datetime.strptime(value, fmt).strftime(fmt) == value