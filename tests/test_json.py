import pytest

import msgspec

import geocodec
from geocodec import (
    GeometryCollection,
    LineString,
    MissingField,
    MultiPolygon,
    NestingTooDeep,
    Point,
    Polygon,
    ShapeMismatch,
    UnknownGeometry,
)

from utils import GEOMETRIES, nested_collection


def test_module_dir():
    assert set(dir(geocodec.json)) == {"Decoder", "Encoder", "decode", "encode"}


class TestEncode:
    def test_encode_point(self):
        assert geocodec.json.encode(Point([1.0, 2.0])) == (
            b'{"type":"Point","coordinates":[1.0,2.0]}'
        )

    def test_encode_field_order(self):
        geom = Point(
            [1.0, 2.0], bbox=[1.0, 2.0, 1.0, 2.0], crs={"type": "name"}
        )
        assert geocodec.json.encode(geom) == (
            b'{"type":"Point","bbox":[1.0,2.0,1.0,2.0],'
            b'"coordinates":[1.0,2.0],"crs":{"type":"name"}}'
        )

    def test_encode_collection(self):
        geom = GeometryCollection([Point([1.0, 2.0])])
        assert geocodec.json.encode(geom) == (
            b'{"type":"GeometryCollection","geometries":'
            b'[{"type":"Point","coordinates":[1.0,2.0]}]}'
        )

    def test_encode_error_passed_through(self):
        class Oops:
            pass

        geom = Point([1.0, 2.0], crs={"oops": Oops()})
        with pytest.raises(TypeError, match="Encoding objects of type Oops is unsupported"):
            geocodec.json.encode(geom)

    def test_enc_hook(self):
        class Name:
            def __init__(self, name):
                self.name = name

        geom = Point([1.0, 2.0], crs={"name": Name("EPSG:4326")})
        msg = geocodec.json.encode(geom, enc_hook=lambda x: x.name)
        assert msg.endswith(b'"crs":{"name":"EPSG:4326"}}')

    def test_encoder_class(self):
        enc = geocodec.json.Encoder()
        assert enc.encode(Point([1.0, 2.0])) == geocodec.json.encode(Point([1.0, 2.0]))


class TestDecode:
    def test_decode_point(self):
        assert geocodec.json.decode(b'{"type":"Point","coordinates":[1,2.5]}') == Point(
            [1.0, 2.5]
        )

    def test_decode_str(self):
        res = geocodec.json.decode('{"type":"LineString","coordinates":[[0,0],[1,1]]}')
        assert res == LineString([[0.0, 0.0], [1.0, 1.0]])

    def test_decode_collection(self):
        msg = b"""
        {"type": "GeometryCollection",
         "geometries": [{"type": "Point", "coordinates": [1, 2]},
                        {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}]}
        """
        res = geocodec.json.decode(msg)
        assert res == GeometryCollection(
            [Point([1.0, 2.0]), LineString([[0.0, 0.0], [1.0, 1.0]])]
        )
        for child in res.geometries:
            assert geocodec.json.decode(geocodec.json.encode(child)) == child

    def test_decode_unknown(self):
        res = geocodec.json.decode(b'{"type":"Circle","coordinates":[0,0]}')
        assert res == UnknownGeometry("Circle")

    def test_decode_missing_type(self):
        with pytest.raises(MissingField):
            geocodec.json.decode(b'{"coordinates":[1,2]}')

    def test_decode_depth_mismatch(self):
        with pytest.raises(ShapeMismatch):
            geocodec.json.decode(b'{"type":"Polygon","coordinates":[[0,0],[1,1]]}')

    @pytest.mark.parametrize("msg", [b"{", b"", b'{"type": "Point",}'])
    def test_malformed_json(self, msg):
        with pytest.raises(msgspec.DecodeError) as rec:
            geocodec.json.decode(msg)
        assert not isinstance(rec.value, geocodec.GeometryError)

    def test_decoder_class(self):
        dec = geocodec.json.Decoder(max_depth=2)
        assert dec.max_depth == 2
        assert repr(dec) == "geocodec.json.Decoder(max_depth=2)"
        msg = msgspec.json.encode(nested_collection(2))
        assert isinstance(dec.decode(msg), GeometryCollection)

        msg = msgspec.json.encode(nested_collection(3))
        with pytest.raises(NestingTooDeep):
            dec.decode(msg)

    def test_decoder_default_max_depth(self):
        dec = geocodec.json.Decoder()
        assert dec.max_depth == geocodec.DEFAULT_MAX_DEPTH


@pytest.mark.parametrize("geom", GEOMETRIES)
def test_roundtrip(geom):
    assert geocodec.json.decode(geocodec.json.encode(geom)) == geom


def test_roundtrip_multipolygon_with_bbox_and_crs():
    geom = MultiPolygon(
        [[[[102.0, 2.0], [103.0, 2.0], [103.0, 3.0], [102.0, 3.0], [102.0, 2.0]]]],
        bbox=[102.0, 2.0, 103.0, 3.0],
        crs={"type": "name", "properties": {"name": "urn:ogc:def:crs:OGC:1.3:CRS84"}},
    )
    msg = geocodec.json.encode(geom)
    assert geocodec.json.decode(msg) == geom
    assert geocodec.json.encode(geocodec.json.decode(msg)) == msg


def test_decode_integer_coordinates_encode_as_floats():
    msg = b'{"type":"Polygon","coordinates":[[[0,0],[1,0],[1,1],[0,0]]]}'
    geom = geocodec.json.decode(msg)
    assert geom == Polygon([[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]])
    assert geocodec.json.encode(geom) == (
        b'{"type":"Polygon","coordinates":[[[0.0,0.0],[1.0,0.0],[1.0,1.0],[0.0,0.0]]]}'
    )


def test_decode_uses_msgspec_decode_directly(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("a new msgspec.json.Decoder was created")

    monkeypatch.setattr(msgspec.json, "Decoder", fail)
    assert geocodec.json.decode(b'{"type":"Point","coordinates":[1,2]}') == Point(
        [1.0, 2.0]
    )
    assert geocodec.scan('{"type":"Point","coordinates":[1,2]}') == Point([1.0, 2.0])
