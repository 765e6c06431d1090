"""Arithmetic logic unit: find the largest model number MONAD accepts."""

from dataclasses import astuple, dataclass, replace
from enum import Enum

REGISTERS = "wxyz"
_DIGITS = range(9, 0, -1)


class Op(Enum):
    INP = "inp"
    ADD = "add"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    EQL = "eql"


@dataclass(frozen=True)
class Instruction:
    """One ALU instruction; val is a register name or an integer literal."""

    op: Op
    var: str
    val: str = "0"

    def __post_init__(self):
        if self.var not in REGISTERS or len(self.var) != 1:
            raise ValueError(f"unknown register {self.var!r}")


def _truncating_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass
class ALU:
    """Four integer registers."""

    w: int = 0
    x: int = 0
    y: int = 0
    z: int = 0

    def _operand(self, val):
        if val[:1] in REGISTERS and val[:1]:
            return getattr(self, val[0])
        return int(val)

    def execute(self, instruction):
        """Run one instruction against the registers."""
        a = getattr(self, instruction.var)
        b = self._operand(instruction.val)
        op = instruction.op
        if op is Op.INP:
            result = b
        elif op is Op.ADD:
            result = a + b
        elif op is Op.MUL:
            result = a * b
        elif op is Op.DIV:
            result = _truncating_div(a, b) if b != 0 else a
        elif op is Op.MOD:
            result = a % b if a >= 0 and b > 0 else a
        else:
            result = int(a == b)
        setattr(self, instruction.var, result)

    def state(self):
        """Registers as 'w x y z'."""
        return f"{self.w} {self.x} {self.y} {self.z}"


def parse(text):
    """Read one instruction per line; a missing operand reads as 0."""
    program = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) not in (2, 3):
            raise ValueError(f"malformed instruction: {line!r}")
        val = parts[2] if len(parts) == 3 else "0"
        program.append(Instruction(Op(parts[0]), parts[1], val))
    return program


def _chunks(program):
    chunks = []
    current = []
    for instruction in program:
        if instruction.op is Op.INP and any(i.op is Op.INP for i in current):
            chunks.append(current)
            current = []
        current.append(instruction)
    if any(i.op is Op.INP for i in current):
        chunks.append(current)
    elif chunks:
        chunks[-1].extend(current)
    return chunks


def part_one(text):
    """Largest number, one digit 1-9 per input, leaving z at zero."""
    chunks = _chunks(parse(text))
    if not chunks:
        raise ValueError("program reads no input")
    failed = set()

    def search(index, alu):
        key = (index, *astuple(alu))
        if key in failed:
            return None
        for digit in _DIGITS:
            trial = replace(alu)
            for instruction in chunks[index]:
                if instruction.op is Op.INP:
                    instruction = replace(instruction, val=str(digit))
                trial.execute(instruction)
            if index + 1 == len(chunks):
                if trial.z == 0:
                    return str(digit)
            else:
                rest = search(index + 1, trial)
                if rest is not None:
                    return str(digit) + rest
        failed.add(key)
        return None

    found = search(0, ALU())
    if found is None:
        raise ValueError("no model number is accepted")
    return int(found)