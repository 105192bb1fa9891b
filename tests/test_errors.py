from quakecore.errors import QuakeError, QuakeParserError


def test_quake_error_message():
    err = QuakeError("length < 4")
    assert str(err) == "There is an error: length < 4"
    assert err.message == "length < 4"


def test_quake_error_keeps_message():
    err = QuakeError("boom")
    assert err.message == "boom"
    assert str(err) == "There is an error: boom"


def test_parser_error_message():
    err = QuakeParserError("not match action")
    assert str(err) == "QuakeParserError: not match action"
    assert repr(err) == "QuakeParserError: not match action"


def test_parser_error_keeps_message():
    err = QuakeParserError("not match transflows")
    assert err.message == "not match transflows"
    assert str(err) == "QuakeParserError: not match transflows"