"""Tests for JsonDocument and JsonObject."""

import io

import pytest

from jsondoc import Config, JsonDocument, JsonObject, StaleHandleError, UnknownMethodError
from jsondoc.values import VInteger


def test_construct_returns_bound_object():
    doc = JsonDocument()
    obj = doc.construct()
    assert isinstance(obj, JsonObject)
    assert obj.live
    assert doc.live_count == 1


def test_object_methods():
    doc = JsonDocument()
    obj = doc.construct()
    obj.set("a", "string", "hi")
    obj.set("b", "integer", "5")
    for n in ("1", "2", "3"):
        obj.add("c", "integer", n)
    assert obj.keys() == ["a", "b", "c"]
    assert obj.get("b") == [VInteger("5")]
    assert obj.encode_text() == '{ "a":"hi","b":5,"c":[ 1,2,3 ] }\n'


def test_call_entry_point():
    doc = JsonDocument()
    obj = doc.construct()
    child = obj("set", "child", "object")
    assert isinstance(child, JsonObject)
    child("set", "x", "integer", "1")
    out = io.StringIO()
    obj("encode", out)
    assert out.getvalue() == '{ "child":{ "x":1 } }\n'


def test_call_unknown_method():
    obj = JsonDocument().construct()
    with pytest.raises(UnknownMethodError):
        obj("explode")


def test_handle_level_api():
    doc = JsonDocument()
    h = doc.construct().handle
    kid = doc.set(h, "kid", "object")
    doc.add(h, "tags", "string", "x")
    assert kid is not None
    assert doc.encode_text(h) == '{ "kid":{  },"tags":[ "x" ] }\n'
    assert doc.destroy(h) == 2
    assert not doc.is_live(h)
    assert not kid.live


def test_destroyed_object_is_stale():
    obj = JsonDocument().construct()
    obj.destroy()
    with pytest.raises(StaleHandleError):
        obj.set("a", "integer", "1")
    with pytest.raises(StaleHandleError):
        obj.destroy()


def test_config_reaches_encoder():
    doc = JsonDocument(Config(escape_strings=True))
    obj = doc.construct()
    obj.set("q", "string", '"')
    assert obj.encode_text() == '{ "q":"\\"" }\n'


def test_documents_are_independent():
    a = JsonDocument()
    b = JsonDocument()
    oa = a.construct()
    ob = b.construct()
    assert oa.handle == ob.handle
    oa.set("x", "integer", "1")
    assert ob.keys() == []
    assert oa != ob
