from colorati.hashing import canonical_repr, hash_value, channels_from_hash
from dataclasses import dataclass

@dataclass
class Point:
    x: int
    y: int

def test_hash_is_deterministic():
    assert hash_value({"foo": "bar"}) == hash_value({"foo": "bar"})
    assert hash_value("abc") == hash_value("abc")

def test_hash_is_32_bit():
    for value in (None, 0, "", "abc", [1, 2, 3], {"a": {"b": [1, 2]}}, 3.14):
        assert 0 <= hash_value(value) < 2 ** 32

def test_dict_key_order_does_not_matter():
    assert hash_value({"a": 1, "b": 2}) == hash_value({"b": 2, "a": 1})
    assert hash_value({1, 2, 3}) == hash_value({3, 2, 1})

def test_types_are_distinguished():
    assert hash_value(1) != hash_value("1")
    assert hash_value([1, 2]) != hash_value((1, 2))
    assert canonical_repr(True) != canonical_repr(1)

def test_objects_use_attributes():
    assert hash_value(Point(1, 2)) == hash_value(Point(1, 2))
    assert hash_value(Point(1, 2)) != hash_value(Point(2, 1))

def test_channels_from_hash():
    channels, alpha = channels_from_hash(0x40F1F091)
    assert channels == (241, 240, 145)
    assert alpha == 64 / 255

def test_channels_from_hash_extremes():
    assert channels_from_hash(0) == ((0, 0, 0), 0.0)
    assert channels_from_hash(0xFFFFFFFF) == ((255, 255, 255), 1.0)

class Slotted:
    __slots__ = ("a", "b")

    def __init__(self, a, b):
        self.a = a
        self.b = b

class Opaque:
    __slots__ = ()

def helper():
    pass

def test_self_referencing_list():
    x = []
    x.append(x)
    assert canonical_repr(x) == "list[<cycle:0>]"
    assert hash_value(x) == hash_value(x)

def test_self_referencing_dict_and_object():
    d = {"name": "loop"}
    d["self"] = d
    assert "<cycle:0>" in canonical_repr(d)

    p = Point(1, 2)
    p.x = p
    assert "<cycle:0>" in canonical_repr(p)

def test_shared_reference_is_not_a_cycle():
    shared = [1, 2]
    assert "cycle" not in canonical_repr([shared, shared])

def test_slotted_objects_use_slot_values():
    assert hash_value(Slotted(1, 2)) == hash_value(Slotted(1, 2))
    assert hash_value(Slotted(1, 2)) != hash_value(Slotted(2, 1))
    assert "0x" not in canonical_repr(Slotted(1, 2))

def test_no_memory_addresses():
    for value in (Opaque(), object(), Slotted, Point, helper, len):
        assert "0x" not in canonical_repr(value)

def test_classes_and_functions_use_qualified_names():
    assert canonical_repr(Point) == f"type:{__name__}.Point"
    assert canonical_repr(helper) == f"function:{__name__}.helper"
    assert hash_value(Slotted) != hash_value(Point)
