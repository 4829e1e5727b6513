"""Unit tests for FrameAssembler."""

from tusk.client.runtime.ws import Frame, FrameAssembler


def feed_all(assembler, lines):
    frames = []
    for line in lines:
        frame = assembler.feed(line)
        if frame is not None:
            frames.append(frame)
            assembler.reset()
    return frames


class TestSseFrames:
    """Test SSE-style frames."""

    def test_event_and_data(self):
        assembler = FrameAssembler()
        frames = feed_all(assembler, ["event: delete", "data: 42", ""])
        assert frames == [Frame(event_name="delete", data="42")]
        assert assembler.pending == 0

    def test_values_trimmed(self):
        frames = feed_all(FrameAssembler(), ["event:   update  ", "data:  {}  ", ""])
        assert frames == [Frame(event_name="update", data="{}")]

    def test_only_first_data_line(self):
        frames = feed_all(FrameAssembler(), ["event: delete", "data: 1", "data: 2", ""])
        assert frames == [Frame(event_name="delete", data="1")]

    def test_comment_terminates_pending_frame(self):
        frames = feed_all(FrameAssembler(), ["event: filters_changed", ":thump"])
        assert frames == [Frame(event_name="filters_changed", data=None)]

    def test_comment_and_blank_with_empty_buffer(self):
        """Test triggers with nothing buffered produce nothing."""
        assembler = FrameAssembler()
        assert assembler.feed(":thump") is None
        assert assembler.feed("") is None
        assert assembler.pending == 0

    def test_crlf_line_endings(self):
        frames = feed_all(FrameAssembler(), ["event: delete\r\n", "data: 9\r\n", "\r\n"])
        assert frames == [Frame(event_name="delete", data="9")]

    def test_frame_without_event(self):
        frames = feed_all(FrameAssembler(), ["data: orphan", ""])
        assert frames == [Frame(event_name=None, data="orphan")]

    def test_data_only_first_line_is_not_json_candidate(self):
        assembler = FrameAssembler()
        assert assembler.feed("event: update") is None
        assert assembler.pending == 1


class TestJsonFrames:
    """Test single-line JSON frames."""

    def test_complete_without_terminator(self):
        assembler = FrameAssembler()
        frame = assembler.feed('{"event": "delete", "payload": "42"}')
        assert frame == Frame(event_name="delete", data="42")

    def test_payload_optional(self):
        frame = FrameAssembler().feed('{"event": "filters_changed"}')
        assert frame == Frame(event_name="filters_changed", data=None)

    def test_stream_key_ignored(self):
        frame = FrameAssembler().feed('{"stream": ["user"], "event": "delete", "payload": "7"}')
        assert frame == Frame(event_name="delete", data="7")

    def test_non_frame_json_is_buffered(self):
        """Test JSON that is not a frame object stays in the buffer."""
        assembler = FrameAssembler()
        assert assembler.feed("[1, 2]") is None
        assert assembler.feed('{"event": 5}') is None
        assert assembler.pending == 2
