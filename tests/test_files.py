import pytest
import json

from zktls.files import load_json, load_string, save_json, save_string


def test_save_json_creates_parents_and_sorts_keys(tmp_path):
    path = tmp_path / "a" / "b" / "out.json"
    save_json(path, {"proof": "0x00", "vkey": "0x11"})

    text = path.read_text()
    assert json.loads(text) == {"proof": "0x00", "vkey": "0x11"}
    assert text.index('"proof"') < text.index('"vkey"')


def test_save_json_overwrites(tmp_path):
    path = tmp_path / "out.json"
    save_json(path, {"a": 1})
    save_json(path, {"b": 2})
    assert load_json(path) == {"b": 2}


def test_load_string_is_byte_for_byte(tmp_path):
    key = "-----BEGIN PUBLIC KEY-----\r\nabc\n-----END PUBLIC KEY-----\n"
    path = tmp_path / "k.key"
    save_string(path, key)
    assert load_string(path) == key


def test_load_json_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / "missing.json")


if __name__ == "__main__":
    pytest.main()
