"""Test reading share descriptors."""
import logging
import pytest
from sharerecover.names import *
from sharerecover.errors import DigitOutOfRange, InvalidDescriptor, InvalidRadix, InvalidThreshold
from sharerecover.descriptor import ShareDescriptor, load_descriptor, parse_descriptor, recover_from_descriptor
from sharerecover.interpolation import SharePoint


def test_parse_descriptor(descriptor_data):
    descriptor = parse_descriptor(descriptor_data)
    assert descriptor.n == 4
    assert descriptor.k == 3
    assert descriptor.points == [SharePoint(1, 4), SharePoint(2, 7), SharePoint(3, 12), SharePoint(6, 39)]


def test_load_and_recover(descriptor_data, write_descriptor, backend):
    descriptor = load_descriptor(write_descriptor(descriptor_data))
    assert isinstance(descriptor, ShareDescriptor)
    assert recover_from_descriptor(descriptor, backend=backend) == 3


def test_integer_base_and_negative_x():
    descriptor = parse_descriptor({KEYS: {N: 2, K: 2}, "-1": {BASE: 16, VALUE: "FF"}, "2": {BASE: "36", VALUE: "z"}})
    assert descriptor.points == [SharePoint(-1, 255), SharePoint(2, 35)]


@pytest.mark.parametrize("data", [
    {},
    [1, 2],
    {KEYS: {N: 3}},
    {KEYS: {K: 3}},
    {KEYS: {N: 3, K: "3"}},
    {KEYS: {N: 3, K: True}},
    {KEYS: {N: 3.5, K: 2}},
    {KEYS: {N: 3, K: 2.5}},
    {KEYS: [3, 2]},
])
def test_invalid_keys(data):
    with pytest.raises(InvalidDescriptor):
        parse_descriptor(data)


def test_integral_float_keys(descriptor_data):
    descriptor_data[KEYS] = {N: 4.0, K: 3.0}
    descriptor = parse_descriptor(descriptor_data)
    assert (descriptor.n, descriptor.k) == (4, 3)
    assert type(descriptor.k) is int
    assert recover_from_descriptor(descriptor) == 3


def test_invalid_threshold():
    with pytest.raises(InvalidThreshold):
        parse_descriptor({KEYS: {N: 3, K: 0}, "1": {BASE: "10", VALUE: "1"}})


@pytest.mark.parametrize("entry", [
    {BASE: "10"},
    {VALUE: "12"},
    {BASE: "", VALUE: "12"},
    {BASE: "10", VALUE: ""},
    {BASE: "ten", VALUE: "12"},
    {BASE: "10", VALUE: 12},
    "10:12",
])
def test_invalid_share_entry(entry):
    with pytest.raises(InvalidDescriptor):
        parse_descriptor({KEYS: {N: 1, K: 1}, "1": entry})


def test_invalid_x_coordinate():
    with pytest.raises(InvalidDescriptor):
        parse_descriptor({KEYS: {N: 1, K: 1}, "one": {BASE: "10", VALUE: "1"}})


def test_undecodable_values():
    with pytest.raises(InvalidRadix):
        parse_descriptor({KEYS: {N: 1, K: 1}, "1": {BASE: "37", VALUE: "1"}})
    with pytest.raises(DigitOutOfRange) as exc:
        parse_descriptor({KEYS: {N: 2, K: 1}, "1": {BASE: "10", VALUE: "1"}, "5": {BASE: "8", VALUE: "78"}})
    assert exc.value.point == 5


def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"keys": {"n": 1, "k": 1},')
    with pytest.raises(InvalidDescriptor):
        load_descriptor(str(path))


def test_not_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\xff\xfe"}}')
    with pytest.raises(InvalidDescriptor):
        load_descriptor(str(path))


def test_utf8_text_reaches_validation(tmp_path):
    path = tmp_path / "shares.json"
    path.write_bytes('{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "7"}, "note": "\u00e9"}'.encode("utf-8"))
    with pytest.raises(InvalidDescriptor) as exc:
        load_descriptor(str(path))
    assert "note" in str(exc.value)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_descriptor(str(tmp_path / "missing.json"))


def test_more_shares_than_declared(descriptor_data, caplog):
    descriptor_data[KEYS][N] = 3
    with caplog.at_level(logging.WARNING):
        descriptor = parse_descriptor(descriptor_data)
    assert len(descriptor.points) == 4
    assert "n=3" in caplog.text
