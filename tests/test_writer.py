"""
Tests for the output adapter (Utf8Writer and module-level write_uN).

Streams are io.BytesIO or small doubles that fail on demand.
The fatal path is checked by replacing os.abort.
"""

import io

import pytest

from utf8emit import writer as writer_module
from utf8emit.errors import OutputStreamError, WidthRangeError
from utf8emit.model import CellWidth, ErrorPolicy, WriteStatus
from utf8emit.writer import Utf8Writer


class Aborted(Exception):
    """Stands in for process termination."""


class RecordingStream(io.BytesIO):
    """BytesIO that records each write() and flush() call."""

    def __init__(self):
        super().__init__()
        self.writes = []
        self.flushes = 0

    def write(self, data):
        self.writes.append(bytes(data))
        return super().write(data)

    def flush(self):
        self.flushes += 1
        super().flush()


class FailingFlushStream:
    def __init__(self):
        self.data = bytearray()

    def write(self, data):
        self.data += data
        return len(data)

    def flush(self):
        raise OSError("disk full")


class FailingWriteStream:
    def write(self, data):
        raise OSError("broken pipe")

    def flush(self):
        pass


@pytest.fixture
def fake_abort(monkeypatch):
    calls = []

    def _abort():
        calls.append(True)
        raise Aborted()

    monkeypatch.setattr(writer_module.os, "abort", _abort)
    return calls


def make_writer(policy=ErrorPolicy.RETURN, stream=None):
    stream = stream if stream is not None else RecordingStream()
    return Utf8Writer(stream=stream, policy=policy), stream


class TestWriteU8:
    """Test the raw byte entry point."""

    def test_writes_raw_byte(self):
        """Bytes go out unencoded, even above 0x7F."""
        w, stream = make_writer()
        result = w.write_u8(0xE9)
        assert result.ok
        assert result.bytes_written == 1
        assert stream.getvalue() == b"\xE9"

    def test_flushes_after_write(self):
        """Each call flushes the stream."""
        w, stream = make_writer()
        w.write_u8(0x41)
        w.write_u8(0x42)
        assert stream.flushes == 2

    def test_rejects_value_above_byte(self):
        """A value over 0xFF is a width violation."""
        w, stream = make_writer()
        result = w.write_u8(0x100)
        assert result.status is WriteStatus.OUT_OF_RANGE
        assert isinstance(result.error, WidthRangeError)
        assert stream.getvalue() == b""


class TestWriteU32:
    """Test the full code point entry point."""

    def test_encodes_emoji(self):
        """A 4-byte code point is written byte by byte."""
        w, stream = make_writer()
        result = w.write_u32(0x1F600)
        assert result.ok
        assert result.bytes_written == 4
        assert stream.writes == [b"\xF0", b"\x9F", b"\x98", b"\x80"]
        assert stream.flushes == 1

    def test_unclassifiable_is_not_an_error(self):
        """0x110000 writes nothing but still succeeds and flushes."""
        w, stream = make_writer(policy=ErrorPolicy.ABORT)
        result = w.write_u32(0x110000)
        assert result.ok
        assert result.bytes_written == 0
        assert stream.getvalue() == b""
        assert stream.flushes == 1

    def test_max_u32_is_sentinel_not_error(self):
        """0xFFFFFFFF fits the width, so it is the codec's sentinel case."""
        w, _ = make_writer(policy=ErrorPolicy.RAISE)
        assert w.write_u32(0xFFFFFFFF).bytes_written == 0

    def test_rejects_value_above_u32(self):
        w, _ = make_writer()
        assert w.write_u32(0x100000000).status is WriteStatus.OUT_OF_RANGE


class TestWriteU16:
    """Test the 16-bit entry point."""

    def test_delegates_to_u32(self):
        """Values below 0x10000 are encoded."""
        w, stream = make_writer()
        assert w.write_u16(0x4E2D).ok
        assert stream.getvalue() == b"\xE4\xB8\xAD"

    def test_out_of_range_returns_failure(self):
        """0x10000 is rejected under the RETURN policy."""
        w, stream = make_writer()
        result = w.write_u16(0x10000)
        assert not result.ok
        assert result.status is WriteStatus.OUT_OF_RANGE
        assert result.error.width is CellWidth.U16
        assert stream.getvalue() == b""

    def test_out_of_range_aborts_by_default(self, fake_abort):
        """The default policy terminates the process."""
        w = Utf8Writer(stream=io.BytesIO())
        with pytest.raises(Aborted):
            w.write_u16(0x10000)
        assert fake_abort == [True]

    def test_out_of_range_raises(self):
        w, _ = make_writer(policy=ErrorPolicy.RAISE)
        with pytest.raises(WidthRangeError):
            w.write_u16(0x10000)


class TestWriteU64:
    """Test the 64-bit entry point."""

    def test_delegates_to_u32(self):
        w, stream = make_writer()
        assert w.write_u64(0xE9).ok
        assert stream.getvalue() == b"\xC3\xA9"

    def test_out_of_range_aborts(self, fake_abort):
        """0x100000000 is fatal under ABORT."""
        w = Utf8Writer(stream=io.BytesIO(), policy=ErrorPolicy.ABORT)
        with pytest.raises(Aborted):
            w.write_u64(0x100000000)
        assert fake_abort == [True]

    def test_out_of_range_raises(self):
        w, _ = make_writer(policy=ErrorPolicy.RAISE)
        with pytest.raises(WidthRangeError) as exc_info:
            w.write_u64(0x100000000)
        assert exc_info.value.value == 0x100000000
        assert exc_info.value.width is CellWidth.U64


class TestStreamFailures:
    """Test write and flush failures."""

    def test_flush_failure_returns_io_failed(self):
        """A flush OSError is reported with the bytes already written."""
        w, _ = make_writer(stream=FailingFlushStream())
        result = w.write_u32(0xE9)
        assert result.status is WriteStatus.IO_FAILED
        assert result.bytes_written == 2
        assert isinstance(result.error, OutputStreamError)
        assert isinstance(result.error.__cause__, OSError)

    def test_write_failure_raises(self):
        w, _ = make_writer(policy=ErrorPolicy.RAISE, stream=FailingWriteStream())
        with pytest.raises(OutputStreamError):
            w.write_u8(0x41)

    def test_flush_failure_aborts_by_default(self, fake_abort):
        w = Utf8Writer(stream=FailingFlushStream())
        with pytest.raises(Aborted):
            w.write_u8(0x41)


class TestDispatch:
    """Test write() width dispatch."""

    @pytest.mark.parametrize("width,value,expected", [
        (CellWidth.U8, 0xE9, b"\xE9"),
        (CellWidth.U16, 0xE9, b"\xC3\xA9"),
        (CellWidth.U32, 0xE9, b"\xC3\xA9"),
        (CellWidth.U64, 0xE9, b"\xC3\xA9"),
    ])
    def test_width_selects_entry_point(self, width, value, expected):
        w, stream = make_writer()
        assert w.write(value, width).ok
        assert stream.getvalue() == expected


class TestModuleLevelWriters:
    """Test write_u8/16/32/64 on the shared stdout writer."""

    @pytest.fixture(autouse=True)
    def reset_default(self):
        writer_module.set_default_writer(None)
        yield
        writer_module.set_default_writer(None)

    def test_write_u32_to_stdout(self, capsysbinary):
        """Writes go to standard output."""
        writer_module.write_u32(0x4E2D)
        writer_module.write_u8(0x0A)
        assert capsysbinary.readouterr().out == b"\xE4\xB8\xAD\n"

    def test_default_policy_aborts(self, fake_abort, capsysbinary):
        """The shared writer is fatal on width violations."""
        with pytest.raises(Aborted):
            writer_module.write_u64(0x100000000)

    def test_replaced_default_writer(self):
        stream = io.BytesIO()
        writer_module.set_default_writer(Utf8Writer(stream=stream, policy=ErrorPolicy.RETURN))
        assert not writer_module.write_u16(0x10000).ok
        assert writer_module.write_u16(0x41).ok
        assert stream.getvalue() == b"A"


class TestClosedStream:
    """A closed stream goes through the error policy like any stream failure."""

    def test_closed_stream_returns_io_failed(self):
        stream = io.BytesIO()
        stream.close()
        w, _ = make_writer(stream=stream)
        result = w.write_u32(0x41)
        assert result.status is WriteStatus.IO_FAILED
        assert isinstance(result.error, OutputStreamError)

    def test_closed_stream_aborts_by_default(self, fake_abort):
        stream = io.BytesIO()
        stream.close()
        with pytest.raises(Aborted):
            Utf8Writer(stream=stream).write_u8(0x41)


@pytest.mark.parametrize("func", [
    writer_module.write_u8,
    writer_module.write_u16,
    writer_module.write_u32,
    writer_module.write_u64,
])
def test_module_level_writers_documented(func):
    assert func.__doc__
