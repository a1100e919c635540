"""Unit tests for ChatState."""
from termchat.state import ChatState, format_status

from helpers import LINE_FEED, typed


class TestStatus:
    def test_format(self):
        assert format_status(3, 12) == "Messages sent:    3  Messages received:   12"

    def test_refresh_uses_counters(self):
        state = ChatState(sent=1, received=2)
        assert state.refresh_status() == format_status(1, 2)
        assert state.status == format_status(1, 2)


class TestSubmit:
    def test_submit_moves_input_to_log(self):
        state = ChatState()
        for k in typed("hi"):
            state.input.apply(k)
        assert state.submit() == "hi"
        assert state.messages == ["hi"]
        assert state.sent == 1
        assert state.input.current_lines() == [""]

    def test_submit_empty_is_allowed(self):
        state = ChatState()
        state.submit()
        assert state.messages == [""]
        assert state.sent == 1

    def test_multiline_joined_with_newlines(self):
        state = ChatState()
        for k in typed("one") + [LINE_FEED] + typed("two"):
            state.input.apply(k)
        state.submit()
        assert state.messages == ["one\ntwo"]

    def test_submit_replaces_widget(self):
        state = ChatState()
        before = state.input
        state.submit()
        assert state.input is not before


class TestReceive:
    def test_receive_appends_in_order(self):
        state = ChatState()
        state.receive("a")
        state.receive("b")
        assert state.messages == ["a", "b"]
        assert state.received == 2
        assert state.sent == 0
