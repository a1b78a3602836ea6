"""Tests for StreamSink and the shared stdout sink."""

import io
import sys

import pytest

from printkit import println
from printkit.sinks import Sink, SinkLock, StreamSink, exclusive, stdout_sink


class TestStreamSink:
    """Test forwarding to text and binary streams."""

    def test_text_stream(self) -> None:
        """Text streams receive str."""
        out = io.StringIO()
        sink = StreamSink(out)
        assert not sink.binary
        sink.write("héllo")
        assert out.getvalue() == "héllo"

    def test_text_stream_decodes_bytes(self) -> None:
        """Bytes written to a text stream are decoded as UTF-8."""
        out = io.StringIO()
        StreamSink(out).write("é".encode())
        assert out.getvalue() == "é"

    def test_binary_stream(self) -> None:
        """Binary streams receive UTF-8 bytes."""
        out = io.BytesIO()
        sink = StreamSink(out)
        assert sink.binary
        assert sink.write("é") == 2
        sink.write(b"\x00")
        assert out.getvalue() == b"\xc3\xa9\x00"

    def test_forced_binary(self) -> None:
        """binary=True overrides detection."""
        out = io.BytesIO()
        sink = StreamSink(out, binary=True)
        sink.write("a")
        assert out.getvalue() == b"a"

    def test_is_a_sink(self) -> None:
        """StreamSink satisfies the Sink protocol."""
        assert isinstance(StreamSink(io.StringIO()), Sink)

    def test_flush(self) -> None:
        """flush() reaches the stream."""

        class Recorder(io.StringIO):
            flushed = False

            def flush(self) -> None:
                self.flushed = True

        out = Recorder()
        StreamSink(out).flush()
        assert out.flushed

    def test_shared_lock(self) -> None:
        """Sinks given the same SinkLock exclude each other."""
        lock = SinkLock()
        first = StreamSink(io.StringIO(), lock=lock)
        second = StreamSink(io.StringIO(), lock=lock)
        with exclusive(first):
            assert lock.locked
            with pytest.raises(RuntimeError, match="already holding"):
                second.acquire_exclusive(timeout=0)
        assert not lock.locked

    def test_stream_errors_propagate(self) -> None:
        """Failures of the underlying stream are not swallowed."""
        out = io.StringIO()
        out.close()
        with pytest.raises(ValueError, match="closed"):
            StreamSink(out).write("x")


class TestStdoutSink:
    """Test the shared stdout sink."""

    def test_shared_instance(self) -> None:
        """Repeated calls return the same sink."""
        assert stdout_sink() is stdout_sink()

    def test_follows_replaced_stdout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A replaced sys.stdout gets a new sink."""
        out = io.StringIO()
        monkeypatch.setattr(sys, "stdout", out)
        sink = stdout_sink()
        assert sink.stream is out
        println(sink, "hi")
        assert out.getvalue() == "hi\n"

    def test_rebuilt_sink_shares_lock(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Holding the old stdout sink also holds the rebuilt one."""
        old = stdout_sink()
        with exclusive(old):
            monkeypatch.setattr(sys, "stdout", io.StringIO())
            new = stdout_sink()
            assert new is not old
            with pytest.raises(RuntimeError, match="already holding"):
                new.acquire_exclusive(timeout=0)
        new.acquire_exclusive(timeout=0)
        new.release_exclusive()
