from pathlib import Path

import pytest

from packfile.cli import main, parse_number
from packfile.packer import read_entries


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_bytes(b"alpha contents")
    (src / "b.bin").write_bytes(bytes(range(200)))
    return src


@pytest.fixture
def pack(tmp_path: Path, source_dir: Path) -> Path:
    pack_path = tmp_path / "pack.dat"
    assert main([f"{source_dir}/*.*", str(pack_path)]) == 0
    return pack_path


def test_parse_number_reads_digits_after_option():
    assert parse_number("-l3") == 3
    assert parse_number("-u12") == 12


def test_parse_number_collects_scattered_digits():
    assert parse_number("-u1x2") == 12


def test_parse_number_without_digits_raises():
    with pytest.raises(ValueError):
        parse_number("-l")


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_pack_writes_all_files(pack: Path, source_dir: Path):
    names = [entry.name for entry in read_entries(pack)]
    assert names == sorted(p.name for p in source_dir.iterdir())


def test_pack_missing_pack_path_fails(source_dir: Path):
    assert main([f"{source_dir}/*.*"]) == 1


def test_pack_nonexistent_directory_fails(tmp_path: Path, capsys):
    assert main([f"{tmp_path}/missing/*.*", str(tmp_path / "p.dat")]) == 1
    assert "error" in capsys.readouterr().err


def test_list_shows_every_file(pack: Path, capsys):
    capsys.readouterr()
    assert main(["-l", str(pack)]) == 0
    out = capsys.readouterr().out
    assert "a.txt" in out
    assert "b.bin" in out


def test_list_paged_pauses_between_pages(pack: Path, monkeypatch, capsys):
    calls = []
    monkeypatch.setattr("builtins.input", lambda *a: calls.append(a) or "")
    assert main(["-l1", str(pack)]) == 0
    assert len(calls) == len(read_entries(pack)) - 1
    assert "b.bin" in capsys.readouterr().out


def test_list_missing_pack_path_fails():
    assert main(["-l"]) == 1


def test_unpack_all_round_trip(pack: Path, source_dir: Path, tmp_path: Path):
    out_dir = tmp_path / "out"
    assert main(["-u", str(pack), str(out_dir)]) == 0
    for original in source_dir.iterdir():
        assert (out_dir / original.name).read_bytes() == original.read_bytes()


def test_unpack_single_file(pack: Path, source_dir: Path, tmp_path: Path):
    out_dir = tmp_path / "one"
    assert main(["-u1", str(pack), str(out_dir)]) == 0
    second = read_entries(pack)[1].name
    assert sorted(p.name for p in out_dir.iterdir()) == [second]
    assert (out_dir / second).read_bytes() == (source_dir / second).read_bytes()


def test_unpack_index_out_of_range_fails(pack: Path, tmp_path: Path, capsys):
    assert main(["-u9", str(pack), str(tmp_path / "none")]) == 1
    assert "out of range" in capsys.readouterr().err


def test_unpack_missing_target_fails(pack: Path):
    assert main(["-u", str(pack)]) == 1


def test_unknown_option_fails(capsys):
    assert main(["-x", "whatever"]) == 1
    assert "-x" in capsys.readouterr().err


def test_unreadable_pack_fails(tmp_path: Path):
    bad = tmp_path / "bad.dat"
    bad.write_bytes(b"\x01")
    assert main(["-l", str(bad)]) == 1