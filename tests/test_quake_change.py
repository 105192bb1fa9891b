from quakecore.quake_change import QuakeChange


def test_from_string():
    text = '2021-12-09 09:40:28 "Spike" -> "Todo"'
    change = QuakeChange.parse(text)
    assert change.changed_date == "2021-12-09 09:40:28"
    assert change.from_state == "Spike"
    assert change.to_state == "Todo"
    assert str(change) == text


def test_option_target():
    text = '2021-12-09 09:40:28 "" -> "Spike"'
    change = QuakeChange.parse(text)
    assert change.changed_date == "2021-12-09 09:40:28"
    assert change.from_state == ""
    assert change.to_state == "Spike"
    assert str(change) == text


def test_no_match_returns_none():
    assert QuakeChange.parse("Todo -> Done") is None


def test_display_without_target():
    change = QuakeChange(from_state="Spike", to_state="", changed_date="2021-12-09 09:40:28")
    assert str(change) == '2021-12-09 09:40:28 "Spike"'


def test_round_trip_with_quote():
    change = QuakeChange(from_state="a", to_state="Done", changed_date="2021-12-10 12:12:28")
    assert QuakeChange.parse(str(change)) == change