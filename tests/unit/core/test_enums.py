"""Unit tests for core enums."""

from tusk.client.core import EventType, StreamKind


class TestStreamKind:
    """Test StreamKind."""

    def test_values_are_query_parameters(self):
        assert StreamKind.PUBLIC_LOCAL.value == "public:local"
        assert StreamKind("hashtag:local") is StreamKind.HASHTAG_LOCAL

    def test_required_parameters(self):
        assert StreamKind.HASHTAG.requires_tag
        assert StreamKind.HASHTAG_LOCAL.requires_tag
        assert StreamKind.LIST.requires_list
        assert not StreamKind.USER.requires_tag
        assert not StreamKind.USER.requires_list


def test_event_type_from_wire_name():
    assert EventType("filters_changed") is EventType.FILTERS_CHANGED
