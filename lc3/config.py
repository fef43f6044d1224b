from dataclasses import dataclass

PC_START = 0x3000


@dataclass
class MachineConfig:
    start_address: int = PC_START
    strict_traps: bool = False          # unknown trap vector -> UnknownTrap
    in_prompt: str = "Enter a character: "
