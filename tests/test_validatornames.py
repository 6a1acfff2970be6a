import pytest
import requests
import responses

from lightexplorer.validatornames import ValidatorNames, parse_ranges

API_URL = "http://inventory.example.com/validator-ranges"


def test_parse_ranges_skips_bad_keys():
    names = parse_ranges({"3-5": "x", "-1": "y", "2-z": "w"})
    assert names == {3: "x", 4: "x", 5: "x"}


def test_parse_ranges_single_index_covers_next():
    names = parse_ranges({"7": "solo"})
    assert sorted(names) == [7, 8]
    assert set(names.values()) == {"solo"}


def test_empty_lookup():
    assert ValidatorNames().get_validator_name(0) == ""


def test_load_from_yaml(tmp_path):
    path = tmp_path / "names.yaml"
    path.write_text("0-2: alpha\n10: beta\nbad: gamma\n")
    vn = ValidatorNames()
    count = vn.load_from_yaml(str(path))
    assert [vn.get_validator_name(i) for i in (0, 1, 2)] == ["alpha"] * 3
    assert vn.get_validator_name(10) == "beta"
    assert vn.get_validator_name(11) == "beta"
    assert vn.get_validator_name(3) == ""
    assert count == 5


def test_load_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ValidatorNames().load_from_yaml(str(tmp_path / "absent.yaml"))


def test_load_from_yaml_not_mapping(tmp_path):
    path = tmp_path / "names.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="error decoding validator names file"):
        ValidatorNames().load_from_yaml(str(path))


def test_load_from_api():
    vn = ValidatorNames()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, API_URL, json={"ranges": {"0-1": "lido", "7": "solo"}}, status=200)
        count = vn.load_from_ranges_api(API_URL)
    assert vn.get_validator_name(0) == "lido"
    assert vn.get_validator_name(1) == "lido"
    assert vn.get_validator_name(8) == "solo"
    assert count == 4


def test_load_from_api_not_found():
    vn = ValidatorNames()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, API_URL, status=404)
        count = vn.load_from_ranges_api(API_URL)
    assert count == 0
    assert vn.get_validator_name(0) == ""


def test_load_from_api_server_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, API_URL, body="boom", status=500)
        with pytest.raises(requests.HTTPError, match="error-response: boom"):
            ValidatorNames().load_from_ranges_api(API_URL)


def test_load_from_api_bad_json():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, API_URL, body="not json", status=200)
        with pytest.raises(ValueError, match="error parsing validator ranges response"):
            ValidatorNames().load_from_ranges_api(API_URL)


def test_sources_merge(tmp_path):
    path = tmp_path / "names.yaml"
    path.write_text("100-101: from-file\n")
    vn = ValidatorNames()
    vn.load_from_yaml(str(path))
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, API_URL, json={"ranges": {"5-5": "from-api"}}, status=200)
        vn.load_from_ranges_api(API_URL)
    assert vn.get_validator_name(100) == "from-file"
    assert vn.get_validator_name(5) == "from-api"