"""Tests for vocabulary / word-list loading."""
import orjson
import pytest

from utils.jsonio import dump_json_atomic, load_json, load_vocab_store, load_word_list
from utils.textops import looks_like_word, normalize_spaces


def _write(path, obj):
    path.write_bytes(orjson.dumps(obj))
    return path


def test_load_json_bom_and_empty(tmp_path):
    p = tmp_path / "bom.json"
    p.write_bytes(b"\xef\xbb\xbf" + orjson.dumps({"a": 1}))
    assert load_json(p) == {"a": 1}

    empty = tmp_path / "empty.json"
    empty.write_bytes(b"  \n")
    assert load_json(empty) is None


def test_dump_json_atomic_leaves_no_tmp(tmp_path):
    p = tmp_path / "out.json"
    dump_json_atomic(p, {"entries": [{"word": "cat"}]})
    assert load_json(p) == {"entries": [{"word": "cat"}]}
    assert not (tmp_path / "out.json.tmp").exists()


class TestLoadVocabStore:

    def test_list_becomes_entries(self, tmp_path):
        p = _write(tmp_path / "v.json", ["cat", {"word": "dog"}])
        assert load_vocab_store(p) == {"entries": ["cat", {"word": "dog"}]}

    def test_mapping_kept_as_is(self, tmp_path):
        p = _write(tmp_path / "v.json", {"cat": {"word": "cat"}})
        assert load_vocab_store(p) == {"cat": {"word": "cat"}}

    def test_empty_file(self, tmp_path):
        p = tmp_path / "v.json"
        p.write_text("")
        assert load_vocab_store(p) == {"entries": []}

    @pytest.mark.parametrize("bad", [42, "cat", {"entries": 5}])
    def test_bad_shapes(self, tmp_path, bad):
        p = _write(tmp_path / "v.json", bad)
        with pytest.raises(ValueError):
            load_vocab_store(p)


class TestLoadWordList:

    def test_text_file(self, tmp_path):
        p = tmp_path / "words.txt"
        p.write_text("# comment\napple\n\n  Big   Cat \n", encoding="utf-8")
        assert load_word_list(p) == ["apple", "Big Cat"]

    def test_json_entries(self, tmp_path):
        p = _write(tmp_path / "w.json", ["apple", {"word": "dog"}, {"entry": {"word": "cat"}}, 3])
        assert load_word_list(p) == ["apple", "dog", "cat"]

    def test_json_mapping_falls_back_to_key(self, tmp_path):
        p = _write(tmp_path / "w.json", {"cat": {"ipa": "kæt"}, "dog": {"word": "Dog"}})
        assert load_word_list(p) == ["cat", "Dog"]


def test_textops():
    assert looks_like_word("ice-cream")
    assert looks_like_word(" o'clock ")
    assert not looks_like_word("123")
    assert not looks_like_word("")
    assert normalize_spaces(" a \r\n  b ") == "a b"
