import json

import pytest

from johar.data_sources import SeedLoader


def test_bundled_seeds_load(seeds):
    assert len(seeds.load_sites()) == 4
    assert [i.id for i in seeds.load_market_items()] == ["prod_1", "prod_2"]


def test_missing_seed_dir_yields_nothing(tmp_path):
    loader = SeedLoader(str(tmp_path / "absent"))

    assert loader.load_sites() == []
    assert loader.load_market_items() == []


@pytest.mark.parametrize("content", [
    b"{}",
    b'{"sites": null}',
    b'{"sites": 5}',
    b'"just text"',
    b"{not json",
    b"\xff\xfe\x00bad",
])
def test_malformed_seed_file_yields_nothing(tmp_path, content):
    (tmp_path / "sites.json").write_bytes(content)

    assert SeedLoader(str(tmp_path)).load_sites() == []


def test_invalid_entries_are_skipped(tmp_path):
    (tmp_path / "sites.json").write_text(json.dumps({"sites": [
        {"id": "netarhat", "name": "Netarhat", "latitude": 23.47, "longitude": 84.27,
         "category": "viewpoint", "description": "Queen of Chotanagpur"},
        {"id": "broken"},
        "not an object",
    ]}), encoding="utf-8")

    assert [s.id for s in SeedLoader(str(tmp_path)).load_sites()] == ["netarhat"]
