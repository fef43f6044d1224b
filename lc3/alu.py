import operator


class ALU:
    OPS = {
        "ADD": operator.add,
        "AND": operator.and_,
    }

    @classmethod
    def execute(cls, op: str, a: int, b: int) -> int:
        return cls.OPS[op](a, b) & 0xFFFF

    @staticmethod
    def complement(a: int) -> int:
        return (~a) & 0xFFFF
