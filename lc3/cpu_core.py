import logging
import sys
from enum import Enum

from . import decoder
from .alu import ALU
from .config import MachineConfig
from .decoder import Opcode, Trap
from .errors import UnknownTrap, UnsupportedOpcode
from .memory import Memory
from .registers import Registers
from .traps import TrapDispatcher

logger = logging.getLogger(__name__)


class State(Enum):
    RUNNING = "running"
    HALTED = "halted"
    ABORTED = "aborted"


class CPU:
    """
    Software LC-3 machine.
    ─────────────────────────────────────────────────────
    • fetch()  : read the word at PC into IR, PC++
    • decode_execute(): decode the opcode and run its handler
    • step()   : one fetch -> decode/execute cycle
    • run()    : step until HALT (returns State.HALTED) or an engine error
    • reset()  : zero registers and memory, PC back to the start address
    """

    def __init__(self, keyboard=None, display=None, config=None):
        self.config = config or MachineConfig()
        self.display = display if display is not None else sys.stdout.buffer
        self.reg = Registers()
        self.mem = Memory(keyboard)
        self.traps = TrapDispatcher(self.reg, self.mem, self.mem.keyboard,
                                    self.display, self.config.in_prompt)
        self.reg.pc = self.config.start_address
        self.state = State.RUNNING
        self.executed = 0
        self._handlers = {
            Opcode.BR:   self._br,
            Opcode.ADD:  self._add,
            Opcode.LD:   self._ld,
            Opcode.ST:   self._st,
            Opcode.JSR:  self._jsr,
            Opcode.AND:  self._and,
            Opcode.LDR:  self._ldr,
            Opcode.STR:  self._str,
            Opcode.RTI:  self._unsupported,
            Opcode.NOT:  self._not,
            Opcode.LDI:  self._ldi,
            Opcode.STI:  self._sti,
            Opcode.JMP:  self._jmp,
            Opcode.RES:  self._unsupported,
            Opcode.LEA:  self._lea,
            Opcode.TRAP: self._trap,
        }

    # ───────────────────────────── fetch ─────────────────────────────
    def fetch(self):
        """Read the word at PC into IR, then PC += 1"""
        self.reg.ir = self.mem.read(self.reg.pc)
        self.reg.pc = (self.reg.pc + 1) & 0xFFFF  # 16-bit wrap-around

    # ───────────────────────── decode / execute ──────────────────────
    def decode_execute(self):
        instr = self.reg.ir
        self._handlers[decoder.opcode(instr)](instr)

    def _pc_offset(self, instr: int, bits: int) -> int:
        """PC-relative effective address; PC already points past instr."""
        return (self.reg.pc + decoder.offset(instr, bits)) & 0xFFFF

    def _base_offset(self, instr: int) -> int:
        return (self.reg[decoder.base_reg(instr)] + decoder.offset(instr, 6)) & 0xFFFF

    # ───────────── ADD (0001) / AND (0101) ─────────────
    def _operand2(self, instr: int) -> int:
        if decoder.bit(instr, 5):               # imm5
            return decoder.offset(instr, 5)
        return self.reg[decoder.sr2(instr)]

    def _add(self, instr: int):
        rd = decoder.dr(instr)
        self.reg[rd] = ALU.execute("ADD", self.reg[decoder.sr1(instr)], self._operand2(instr))
        self.reg.update_flags(rd)

    def _and(self, instr: int):
        rd = decoder.dr(instr)
        self.reg[rd] = ALU.execute("AND", self.reg[decoder.sr1(instr)], self._operand2(instr))
        self.reg.update_flags(rd)

    # ───────────── NOT (1001) ─────────────
    def _not(self, instr: int):
        rd = decoder.dr(instr)
        self.reg[rd] = ALU.complement(self.reg[decoder.sr1(instr)])
        self.reg.update_flags(rd)

    # ───────────── BR (0000) ──────────────
    def _br(self, instr: int):
        nzp = (instr >> 9) & 0x7
        if nzp & self.reg.cond:
            self.reg.pc = self._pc_offset(instr, 9)

    # ───────────── JMP / RET (1100) ───────
    def _jmp(self, instr: int):
        self.reg.pc = self.reg[decoder.base_reg(instr)]   # RET == JMP R7

    # ───────────── JSR / JSRR (0100) ──────
    def _jsr(self, instr: int):
        self.reg[7] = self.reg.pc               # link (incremented PC)
        if decoder.bit(instr, 11):              # JSR (PC+off11)
            self.reg.pc = self._pc_offset(instr, 11)
        else:                                   # JSRR (BaseR), read after the link
            self.reg.pc = self.reg[decoder.base_reg(instr)]

    # ───────────── LD (0010) / LDI (1010) / LDR (0110) / LEA (1110) ─────────────
    def _ld(self, instr: int):
        rd = decoder.dr(instr)
        self.reg[rd] = self.mem.read(self._pc_offset(instr, 9))
        self.reg.update_flags(rd)

    def _ldi(self, instr: int):
        rd = decoder.dr(instr)
        ptr = self.mem.read(self._pc_offset(instr, 9))
        self.reg[rd] = self.mem.read(ptr)
        self.reg.update_flags(rd)

    def _ldr(self, instr: int):
        rd = decoder.dr(instr)
        self.reg[rd] = self.mem.read(self._base_offset(instr))
        self.reg.update_flags(rd)

    def _lea(self, instr: int):
        rd = decoder.dr(instr)
        self.reg[rd] = self._pc_offset(instr, 9)
        self.reg.update_flags(rd)

    # ───────────── ST (0011) / STI (1011) / STR (0111) ─────────────
    def _st(self, instr: int):
        self.mem.write(self._pc_offset(instr, 9), self.reg[decoder.dr(instr)])

    def _sti(self, instr: int):
        ptr = self.mem.read(self._pc_offset(instr, 9))
        self.mem.write(ptr, self.reg[decoder.dr(instr)])

    def _str(self, instr: int):
        self.mem.write(self._base_offset(instr), self.reg[decoder.dr(instr)])

    # ───────────── TRAP (1111) ────────────
    def _trap(self, instr: int):
        vector = decoder.trap_vector(instr)
        trap = self.traps.dispatch(vector)
        if trap is Trap.HALT:
            self.state = State.HALTED
        elif trap is None:
            address = (self.reg.pc - 1) & 0xFFFF
            if self.config.strict_traps:
                self.state = State.ABORTED
                raise UnknownTrap(vector, address)
            logger.warning("Ignoring unknown trap vector 0x%02X at 0x%04X", vector, address)

    # ───────────── RTI (1000) / reserved (1101) ──
    def _unsupported(self, instr: int):
        self.state = State.ABORTED
        address = (self.reg.pc - 1) & 0xFFFF
        logger.debug("Unsupported opcode 0x%04X at 0x%04X", instr, address)
        raise UnsupportedOpcode(decoder.opcode(instr), address, instr)

    # ───────────────────────────── runner ─────────────────────────────
    def step(self):
        """Run one instruction cycle (fetch-decode-exec)"""
        if self.state is not State.RUNNING:
            raise RuntimeError(f"CPU is {self.state.value}")
        self.fetch()
        self.decode_execute()
        self.executed += 1

    def run(self) -> State:
        logger.info("Starting at 0x%04X", self.reg.pc)
        while self.state is State.RUNNING:
            self.step()
        logger.info("Halted after %d instructions", self.executed)
        return self.state

    def reset(self):
        """Zero registers and memory; the keyboard and display are kept."""
        self.__init__(self.mem.keyboard, self.display, self.config)
