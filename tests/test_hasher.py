"""
Unit tests for TwinHash and HasherImpl.
Verifies determinism, the empty-input digest, chunk independence and error propagation.
"""
import io
import string
import pytest
from twinfinder.core.hasher import (
    HasherImpl, TwinHash, TwinHashAlgorithmImpl, XXHash128AlgorithmImpl,
    fingerprint, fnv1a_64, rotl64, rotr64, SALT, SEED1, SEED2,
)

# With no input both accumulators keep their seeds, and the seeds are
# 32-bit rotations of each other.
EMPTY_DIGEST = "4fd0bfc14fd0bfc14fd0bfc14fd0bfc1"


class TestPrimitives:

    def test_fnv1a_known_vectors(self):
        assert fnv1a_64(b"") == 0xcbf29ce484222325
        assert fnv1a_64(b"a") == 0xaf63dc4c8601ec8c

    def test_salt_is_derived_from_label(self):
        assert SALT == fnv1a_64(b"deduplicator")
        assert 0 <= SALT < 2 ** 64

    def test_rotations_are_inverse(self):
        value = 0x0123456789ABCDEF
        assert rotr64(rotl64(value, 13), 13) == value
        assert rotl64(value, 32) == 0x89ABCDEF01234567
        assert rotr64(1, 1) == 0x8000000000000000

    def test_seeds_are_rotations_of_each_other(self):
        assert SEED1 != SEED2
        assert rotl64(SEED1, 32) == SEED2


class TestTwinHash:

    def test_empty_input_digest(self):
        assert TwinHash().hexdigest() == EMPTY_DIGEST

    def test_same_content_same_digest(self):
        assert TwinHash(b"hello world").hexdigest() == TwinHash(b"hello world").hexdigest()

    def test_single_byte_difference_changes_digest(self):
        assert TwinHash(b"12345").hexdigest() != TwinHash(b"abcde").hexdigest()
        assert TwinHash(b"aaaa").hexdigest() != TwinHash(b"aaab").hexdigest()

    def test_byte_order_matters(self):
        assert TwinHash(b"ab").hexdigest() != TwinHash(b"ba").hexdigest()

    def test_length_matters(self):
        assert TwinHash(b"\x00").hexdigest() != TwinHash(b"\x00\x00").hexdigest()
        assert TwinHash(b"\x00").hexdigest() != EMPTY_DIGEST

    def test_digest_is_lowercase_hex_up_to_32_chars(self):
        for data in (b"", b"x", b"some longer content" * 10):
            digest = TwinHash(data).hexdigest()
            assert 0 < len(digest) <= 32
            assert set(digest) <= set(string.hexdigits.lower())

    def test_split_updates_match_single_update(self):
        data = bytes(range(256)) * 20
        whole = TwinHash(data).hexdigest()

        split = TwinHash()
        for i in range(0, len(data), 7):
            split.update(data[i:i + 7])

        assert split.hexdigest() == whole

    def test_no_collisions_among_small_inputs(self):
        digests = {TwinHash(bytes([a, b])).hexdigest() for a in range(256) for b in range(0, 256, 5)}
        assert len(digests) == 256 * len(range(0, 256, 5))


class TestFingerprint:

    def test_stream_fingerprint_independent_of_chunk_size(self):
        data = b"streamed content " * 1000
        reference = fingerprint(io.BytesIO(data))

        for chunk_size in (1, 3, 4096, 1 << 20):
            assert fingerprint(io.BytesIO(data), chunk_size=chunk_size) == reference

    def test_empty_stream(self):
        assert fingerprint(io.BytesIO(b"")) == EMPTY_DIGEST

    def test_xxh128_algorithm_uses_same_protocol(self):
        data = b"content"
        digest = fingerprint(io.BytesIO(data), XXHash128AlgorithmImpl())
        assert len(digest) == 32
        assert digest == fingerprint(io.BytesIO(data), XXHash128AlgorithmImpl(), chunk_size=2)
        assert digest != fingerprint(io.BytesIO(data), TwinHashAlgorithmImpl())


class TestHasherImpl:

    def test_identical_files_same_fingerprint(self, tmp_path):
        content = "Identical content for the fingerprint check.".encode("utf-8")
        file_a = tmp_path / "fileA.txt"
        file_b = tmp_path / "fileB.txt"
        file_a.write_bytes(content)
        file_b.write_bytes(content)

        hasher = HasherImpl()
        assert hasher.compute_fingerprint(str(file_a)) == hasher.compute_fingerprint(str(file_b))

    def test_different_files_different_fingerprint(self, tmp_path):
        file_a = tmp_path / "fileA.txt"
        file_b = tmp_path / "fileB.txt"
        file_a.write_bytes(b"Contents of file A.")
        file_b.write_bytes(b"Completely different contents of file B.")

        hasher = HasherImpl()
        assert hasher.compute_fingerprint(str(file_a)) != hasher.compute_fingerprint(str(file_b))

    def test_fingerprint_is_idempotent(self, tmp_path):
        path = tmp_path / "same.bin"
        path.write_bytes(bytes(range(256)) * 40)

        hasher = HasherImpl()
        assert hasher.compute_fingerprint(str(path)) == hasher.compute_fingerprint(str(path))

    def test_empty_files_share_digest(self, tmp_path):
        (tmp_path / "a").write_bytes(b"")
        (tmp_path / "b").write_bytes(b"")

        hasher = HasherImpl()
        assert hasher.compute_fingerprint(str(tmp_path / "a")) == EMPTY_DIGEST
        assert hasher.compute_fingerprint(str(tmp_path / "b")) == EMPTY_DIGEST

    def test_chunk_size_does_not_change_result(self, tmp_path):
        path = tmp_path / "large.bin"
        path.write_bytes(b"0123456789" * 2000)

        assert HasherImpl(chunk_size=4096).compute_fingerprint(str(path)) == \
            HasherImpl(chunk_size=13).compute_fingerprint(str(path))

    def test_missing_file_raises_oserror(self, tmp_path):
        """The hasher does not swallow I/O errors; the scanner decides to skip."""
        with pytest.raises(OSError):
            HasherImpl().compute_fingerprint(str(tmp_path / "gone.txt"))

    def test_invalid_chunk_size_rejected(self):
        with pytest.raises(ValueError):
            HasherImpl(chunk_size=0)
