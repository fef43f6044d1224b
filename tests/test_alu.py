from lc3.alu import ALU


def test_add():
    assert ALU.execute("ADD", 2, 3) == 5


def test_add_wraps_to_16_bits():
    assert ALU.execute("ADD", 0xFFFF, 1) == 0
    assert ALU.execute("ADD", 5, -1) == 4


def test_and():
    assert ALU.execute("AND", 0b1100, 0b1010) == 0b1000


def test_and_with_negative_immediate_keeps_16_bits():
    assert ALU.execute("AND", 0x1234, -1) == 0x1234


def test_complement():
    assert ALU.complement(0x0000) == 0xFFFF
    assert ALU.complement(0x00FF) == 0xFF00
