class LC3Error(RuntimeError):
    """Base class for every error raised by the virtual machine."""


class UnsupportedOpcode(LC3Error):
    def __init__(self, opcode: int, address: int, instruction: int):
        self.opcode = opcode
        self.address = address
        self.instruction = instruction
        super().__init__(
            f"Unsupported opcode {opcode:04b} "
            f"(word 0x{instruction:04X} at 0x{address:04X})")


class UnknownTrap(LC3Error):
    def __init__(self, vector: int, address: int):
        self.vector = vector
        self.address = address
        super().__init__(f"Unknown trap vector 0x{vector:02X} at 0x{address:04X}")


class ImageLoadError(LC3Error):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image {path}: {reason}")
