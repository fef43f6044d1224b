"""Console service routines reached through the TRAP instruction.

The routines run natively instead of jumping through the trap vector table in
low memory, so an image does not need an operating-system image loaded first.
"""
import logging
from typing import Optional

from .decoder import Trap
from .memory import Memory
from .registers import Registers

logger = logging.getLogger(__name__)


class TrapDispatcher:
    def __init__(self, reg: Registers, mem: Memory, keyboard, display,
                 in_prompt: str = "Enter a character: "):
        self.reg = reg
        self.mem = mem
        self.keyboard = keyboard    # input source, see console.py
        self.display = display      # binary stream: write(bytes) / flush()
        self.in_prompt = in_prompt
        self.routines = {
            Trap.GETC:  self.getc,
            Trap.OUT:   self.out,
            Trap.PUTS:  self.puts,
            Trap.IN:    self.in_,
            Trap.PUTSP: self.putsp,
            Trap.HALT:  self.halt,
        }

    def dispatch(self, vector: int) -> Optional[Trap]:
        """Run the routine for `vector`; returns None for an unknown vector."""
        try:
            trap = Trap(vector)
        except ValueError:
            return None
        self.routines[trap]()
        return trap

    # ───────────────────────────── routines ─────────────────────────────
    def getc(self):
        self.reg[0] = self.keyboard.consume_byte()

    def out(self):
        self._emit(bytes([self.reg[0] & 0xFF]))

    def puts(self):
        """One character per word, up to the first zero word."""
        out = bytearray()
        addr = self.reg[0]
        word = self.mem.peek(addr)
        while word:
            out.append(word & 0xFF)
            addr = (addr + 1) & 0xFFFF
            word = self.mem.peek(addr)
        self._emit(bytes(out))

    def in_(self):
        self._emit(self.in_prompt.encode("latin-1"))
        self.getc()

    def putsp(self):
        """Two characters per word, low byte first; a zero high byte is skipped."""
        out = bytearray()
        addr = self.reg[0]
        word = self.mem.peek(addr)
        while word:
            out.append(word & 0xFF)
            hi = word >> 8
            if hi:
                out.append(hi)
            addr = (addr + 1) & 0xFFFF
            word = self.mem.peek(addr)
        self._emit(bytes(out))

    def halt(self):
        self.display.flush()
        logger.debug("HALT at 0x%04X", (self.reg.pc - 1) & 0xFFFF)

    def _emit(self, data: bytes):
        self.display.write(data)
        self.display.flush()
