import pytest

from zktls.hashing import generate, sha256_hex


def test_empty_string_hash():
    h = generate("")
    assert h == "836cc68931c2e4e3e838602eca1902591d216837bafddfe6f0c8cb07"


def test_hash():
    h = generate("acab")
    assert h == "09c4a38a350818fcabc9eba223519d9539f072185bb6e7c0e29ea392"


def test_sha256_empty():
    assert (
        sha256_hex(b"")
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


if __name__ == "__main__":
    pytest.main()
