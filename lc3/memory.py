from typing import Iterable, Optional

from .console import BufferedInput

MEM_SIZE = 1 << 16  # Number of 16-bit words in memory

MR_KBSR = 0xFE00    # keyboard status
MR_KBDR = 0xFE02    # keyboard data


class Memory:
    def __init__(self, keyboard: Optional[object] = None):
        self.mem = [0]*MEM_SIZE
        self.keyboard = keyboard if keyboard is not None else BufferedInput()

    def read(self, addr: int) -> int:
        """Read a 16-bit word; reading KBSR polls the keyboard first."""
        addr &= 0xFFFF
        if addr == MR_KBSR:
            if self.keyboard.poll_available():
                self.mem[MR_KBSR] = 1 << 15
                self.mem[MR_KBDR] = self.keyboard.consume_byte() & 0xFFFF
            else:
                self.mem[MR_KBSR] = 0
        return self.mem[addr]

    def write(self, addr: int, value: int):
        """Write a 16-bit word to memory"""
        self.mem[addr & 0xFFFF] = value & 0xFFFF  # Mask to 16 bits

    def peek(self, addr: int) -> int:
        """Read without the keyboard side effect (trap routines, viewer)."""
        return self.mem[addr & 0xFFFF]

    def load(self, origin: int, words: Iterable[int]) -> int:
        """Store `words` from `origin` upward, stopping at the top of memory.
        Returns the number of words stored."""
        count = 0
        for addr, word in zip(range(origin & 0xFFFF, MEM_SIZE), words):
            self.mem[addr] = word & 0xFFFF
            count += 1
        return count
