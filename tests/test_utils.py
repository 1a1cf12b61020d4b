from colorati.utils import round_half_away, round_to, format_fixed, format_number, format_integer, is_unbounded

def test_round_half_away():
    assert round_half_away(0.5) == 1
    assert round_half_away(1.5) == 2
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.5) == -1
    assert round_half_away(-2.4) == -2
    assert round_half_away(59.375) == 59

def test_round_to():
    assert round_to(77.41935483870967) == 77.42
    assert round_to(0.25098039215686274) == 0.25
    assert round_to(1.005, 1) == 1.0
    assert round_to(12.345, 0) == 12.0

def test_round_to_keeps_zero_and_one():
    assert round_to(0) == 0.0
    assert round_to(1) == 1.0
    assert round_to(1, 0) == 1.0

def test_round_to_never_negative_zero():
    result = round_to(-0.001, 2)
    assert result == 0
    assert str(result) == "0.0"

def test_unbounded_precision():
    assert is_unbounded(101)
    assert not is_unbounded(100)
    assert round_to(0.123456789, 101) == 0.123456789

def test_format_fixed():
    assert format_fixed(77.41935483870967) == "77.42"
    assert format_fixed(47.8) == "47.80"
    assert format_fixed(5, 0) == "5"
    assert format_fixed(-0.001) == "0.00"
    assert format_fixed(-13.069756984708025) == "-13.07"

def test_format_fixed_unbounded():
    assert format_fixed(77.41935483870967, 101) == "77.41935483870967"
    assert format_fixed(1e-20, 101) == "0.00000000000000000001"
    assert format_fixed(3.0, 101) == "3"

def test_format_number():
    assert format_number(1) == "1"
    assert format_number(0.25098039215686274) == "0.25"
    assert format_number(0.5) == "0.5"
    assert format_number(0.65) == "0.65"
    assert format_number(0.0) == "0"
    assert format_number(0.25098039215686274, 4) == "0.251"

def test_format_integer():
    assert format_integer(59.375) == "59"
    assert format_integer(59.5) == "60"
    assert format_integer(241) == "241"

def test_round_to_negative_zero_input():
    assert str(round_to(-0.0)) == "0.0"
    assert str(round_to(-0.0, 0)) == "0.0"
    assert format_number(-0.0) == "0"
    assert str(round_to(-0.0, 101)) == "0.0"
