"""Domain: FieldBodyCache state machine"""


def test_starts_stale():
    from mimeheaders.domain.field_body_cache import FieldBodyCache

    cache = FieldBodyCache()

    assert cache.is_fresh is False
    assert cache.get() is None


def test_set_makes_fresh_and_invalidate_makes_stale():
    from mimeheaders.domain.field_body_cache import FieldBodyCache

    cache = FieldBodyCache()
    cache.set("value")
    assert cache.is_fresh is True
    assert cache.get() == "value"

    cache.invalidate()

    assert cache.is_fresh is False
    assert cache.get() is None


def test_empty_string_is_a_fresh_value():
    from mimeheaders.domain.field_body_cache import FieldBodyCache

    cache = FieldBodyCache()
    cache.set("")

    assert cache.is_fresh is True
    assert cache.get() == ""
