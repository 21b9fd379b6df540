"""Tests for filling the phonics field of a vocabulary file."""
import orjson

from enrich.add_phonics import add_phonics
from phonics import VERSION


def _write(path, obj):
    path.write_bytes(orjson.dumps(obj))
    return path


def _read(path):
    return orjson.loads(path.read_bytes())


def test_entries_form(tmp_path):
    src = _write(tmp_path / "vocab.json", {"entries": [
        {"word": "cat"},
        {"word": "flower", "phonics": ["x"]},
        {"entry": {"word": "apple"}},
        "said",
        {"word": "123"},
    ]})
    out = tmp_path / "out" / "vocab_phonics.json"

    stats = add_phonics(src, out)

    assert stats == {"total": 5, "patched": 3, "kept": 1, "skipped": 1}
    entries = _read(out)["entries"]
    assert entries[0]["phonics"] == ["cat"]
    assert entries[1]["phonics"] == ["x"]
    assert entries[2]["entry"]["phonics"] == ["ap", "ple"]
    assert entries[3] == {"word": "said", "phonics": ["s", "ai", "d"]}
    assert "phonics" not in entries[4]
    meta = _read(out)["meta"]["phonics_added"]
    assert meta["rules"] == VERSION
    assert meta["patched"] == 3


def test_plain_list_is_upgraded(tmp_path):
    src = _write(tmp_path / "list.json", ["table", "little"])
    out = tmp_path / "list_out.json"
    add_phonics(src, out)
    data = _read(out)
    assert [e["phonics"] for e in data["entries"]] == [["ta", "ble"], ["lit", "tle"]]


def test_mapping_form_force_joined(tmp_path):
    src = _write(tmp_path / "custom.json", {
        "flower": {"word": "flower"},
        "Monday": {"word": "Monday", "phonics": "old"},
        "tea": {"ipa": "tiː"},
    })
    stats = add_phonics(src, src, force=True, joined=True)

    data = _read(src)
    assert data["flower"]["phonics"] == "fl-ow-er"
    assert data["Monday"]["phonics"] == "mon-d-ay"
    assert data["tea"]["phonics"] == "t-ea"
    assert "meta" not in data
    assert stats["patched"] == 3 and stats["kept"] == 0


def test_progress_and_checkpoint(tmp_path):
    src = _write(tmp_path / "v.json", [{"word": w} for w in ("cat", "dog", "pig")])
    out = tmp_path / "o.json"
    calls = []
    add_phonics(src, out, checkpoint_every=1, progress_cb=lambda d, t: calls.append((d, t)))
    assert calls == [(1, 3), (2, 3), (3, 3)]
    assert not (tmp_path / "o.json.tmp").exists()


def test_trace_is_forwarded(tmp_path):
    src = _write(tmp_path / "v.json", ["said"])
    messages = []
    add_phonics(src, tmp_path / "o.json", trace=messages.append)
    assert any(m.startswith("exception said") for m in messages)
