from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

GENERAL_REGS = 8          # R0–R7
SPECIAL_REGS = ["PC", "IR", "COND"]


class Flag(IntEnum):
    POS = 0b001
    ZRO = 0b010
    NEG = 0b100


@dataclass
class Registers:
    gpr: List[int] = field(default_factory=lambda: [0]*GENERAL_REGS)
    pc: int = 0
    ir: int = 0               # word currently being executed
    cond: Flag = Flag.ZRO

    def __getitem__(self, idx: int) -> int:
        if 0 <= idx < GENERAL_REGS:
            return self.gpr[idx]
        raise IndexError("Invalid register index")

    def __setitem__(self, idx: int, value: int) -> None:
        if 0 <= idx < GENERAL_REGS:
            self.gpr[idx] = value & 0xFFFF
        else:
            raise IndexError("Invalid register index")

    def update_flags(self, idx: int) -> None:
        """Set COND from the sign/zero-ness of register `idx`."""
        value = self[idx]
        if value & 0x8000:
            self.cond = Flag.NEG
        elif value == 0:
            self.cond = Flag.ZRO
        else:
            self.cond = Flag.POS
