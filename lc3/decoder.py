"""Bit-field helpers for LC-3 instruction words.

Every helper takes the raw 16-bit word and returns one field of it. Field
positions follow the ISA encoding:

    15..12  opcode
    11..9   DR / SR (store source) / nzp condition bits
     8..6   SR1 / BaseR
     5      immediate-mode flag for ADD and AND
     4..0   imm5, 2..0 SR2
    11      immediate-mode flag for JSR
"""
from enum import IntEnum

REG_MASK = 0x7


class Opcode(IntEnum):
    BR = 0b0000
    ADD = 0b0001
    LD = 0b0010
    ST = 0b0011
    JSR = 0b0100
    AND = 0b0101
    LDR = 0b0110
    STR = 0b0111
    RTI = 0b1000
    NOT = 0b1001
    LDI = 0b1010
    STI = 0b1011
    JMP = 0b1100
    RES = 0b1101
    LEA = 0b1110
    TRAP = 0b1111


class Trap(IntEnum):
    GETC = 0x20
    OUT = 0x21
    PUTS = 0x22
    IN = 0x23
    PUTSP = 0x24
    HALT = 0x25


def sign_extend(value: int, bits: int) -> int:
    """
    Widen a `bits`-wide two's-complement field to a Python int.
    e.g. sign_extend(0b11111, 5) == -1, sign_extend(0b01111, 5) == 15
    """
    sign = 1 << (bits - 1)
    return (value & (sign - 1)) - (value & sign)


def opcode(instr: int) -> Opcode:
    return Opcode((instr >> 12) & 0xF)


def dr(instr: int) -> int:
    """Destination register, also the source register of ST/STI/STR."""
    return (instr >> 9) & REG_MASK


def sr1(instr: int) -> int:
    """First source register, also BaseR of JMP/JSRR/LDR/STR."""
    return (instr >> 6) & REG_MASK


base_reg = sr1


def sr2(instr: int) -> int:
    return instr & REG_MASK


def bit(instr: int, n: int) -> int:
    return (instr >> n) & 1


def offset(instr: int, bits: int) -> int:
    """Low `bits` of the word as a signed offset (imm5, offset6/9/11)."""
    return sign_extend(instr & ((1 << bits) - 1), bits)


def trap_vector(instr: int) -> int:
    return instr & 0xFF
