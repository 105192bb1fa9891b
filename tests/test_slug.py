from quakecore.slug import slugify


def test_chinese_slug():
    assert slugify("你無可奈何asd fsadf+") == "你無可奈何asd-fsadf+"


def test_leading_slash():
    assert slugify("-love") == "love"


def test_separators_collapse():
    assert slugify("  Hello__World  -- again ") == "hello-world-again"


def test_punctuation_replaced():
    assert slugify("a,b:c") == "ab-c"