from utils import extract_coordinates_from_url, read_json, write_json


def test_coordinates_from_place_data_segment():
    url = ("https://www.google.com/maps/place/Curug+Cigentis/data=!4m7!3m6!1s0x2e69:0x1!8m2"
           "!3d-6.5638418!4d107.3467381!16s%2Fg%2F1tf")

    assert extract_coordinates_from_url(url) == (-6.5638418, 107.3467381)


def test_coordinates_from_viewport():
    assert extract_coordinates_from_url("https://www.google.com/maps/@-6.3,107.3,12z") == (-6.3, 107.3)


def test_coordinates_missing():
    assert extract_coordinates_from_url("https://www.google.com/maps/place/Situ") == (None, None)
    assert extract_coordinates_from_url("") == (None, None)


def test_json_round_trip_creates_parent(tmp_path):
    path = str(tmp_path / "nested" / "data.json")

    write_json(path, ["KABUPATEN KARAWANG, PROVINSI JAWA BARAT"], indent=2)

    assert read_json(path) == ["KABUPATEN KARAWANG, PROVINSI JAWA BARAT"]
    assert read_json(str(tmp_path / "nope.json"), default=[]) == []
