import hashlib
import io

import pytest

from siege.md5 import Md5, md5_buffer, md5_stream


def test_rfc1321_empty_string():
    assert Md5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_rfc1321_abc():
    assert md5_buffer(b"abc").hex() == "900150983cd24fb0d6963f7d28e17f72"


def test_rfc1321_message_digest():
    assert Md5(b"message digest").hexdigest() == "f96b697d7cb7938d525a2f31aaf161d0"


@pytest.mark.parametrize(
    "length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000]
)
def test_block_boundaries_match_reference(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert md5_buffer(data) == hashlib.md5(data).digest()


def test_incremental_updates_equal_single_buffer():
    data = bytes(range(256)) * 5
    ctx = Md5()
    for size in (1, 3, 60, 64, 5, 200, 17):
        ctx.update(data[:size])
        data_consumed = data[:size]
        data = data[size:]
        assert data_consumed
    ctx.update(data)
    whole = bytes(range(256)) * 5
    assert ctx.digest() == md5_buffer(whole)


def test_digest_is_repeatable_and_does_not_change_state():
    ctx = Md5(b"hello")
    first = ctx.digest()
    assert ctx.digest() == first
    ctx.update(b" world")
    assert ctx.digest() == md5_buffer(b"hello world")


def test_copy_is_independent():
    ctx = Md5(b"prefix-")
    clone = ctx.copy()
    clone.update(b"one")
    ctx.update(b"two")
    assert clone.digest() == md5_buffer(b"prefix-one")
    assert ctx.digest() == md5_buffer(b"prefix-two")


def test_hexdigest_matches_digest():
    ctx = Md5(b"siege")
    assert ctx.hexdigest() == ctx.digest().hex()
    assert len(ctx.digest()) == 16


def test_accepts_bytearray_and_memoryview():
    data = b"some bytes to hash"
    assert md5_buffer(bytearray(data)) == md5_buffer(data)
    assert md5_buffer(memoryview(data)) == md5_buffer(data)


def test_str_input_rejected():
    with pytest.raises(TypeError):
        md5_buffer("text")
    with pytest.raises(TypeError):
        Md5().update("text")


def test_stream_larger_than_block_size():
    data = bytes((i * 31) % 251 for i in range(4096 * 3 + 77))
    assert md5_stream(io.BytesIO(data)) == hashlib.md5(data).digest()


def test_stream_exact_multiple_of_block_size():
    data = b"x" * 8192
    assert md5_stream(io.BytesIO(data)) == md5_buffer(data)


def test_empty_stream():
    assert md5_stream(io.BytesIO(b"")) == md5_buffer(b"")


def test_stream_from_file(tmp_path):
    path = tmp_path / "payload.bin"
    data = b"line of text\n" * 1000
    path.write_bytes(data)
    with path.open("rb") as handle:
        assert md5_stream(handle) == hashlib.md5(data).digest()


def test_stream_read_error_propagates():
    class Broken(io.RawIOBase):
        def readable(self):
            return True

        def read(self, size=-1):
            raise OSError("read failed")

    with pytest.raises(OSError):
        md5_stream(Broken())


def test_different_inputs_give_different_digests():
    assert md5_buffer(b"a") != md5_buffer(b"b")
    assert md5_buffer(b"a") == hashlib.md5(b"a").digest()