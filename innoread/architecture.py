"""Processor architectures a setup may run on or install in 64-bit mode for."""

from __future__ import annotations

import enum
import re
from typing import List, Optional, Tuple, Union


class Architecture(enum.IntFlag):
    """Architecture identifiers used since Inno Setup 6.3."""

    ARM32_COMPATIBLE = 1
    ARM64 = 1 << 1
    WIN64 = 1 << 2
    X64_COMPATIBLE = 1 << 3
    X64_OS = 1 << 4
    X86_COMPATIBLE = 1 << 5
    X86_OS = 1 << 6

    @classmethod
    def from_expression(cls, expression: str) -> Tuple[Architecture, Architecture]:
        """Evaluate an architecture expression into (allowed, disallowed) sets.

        An expression that allows nothing is treated as allowing x86compatible.
        """
        tokens = _tokenize(expression)
        stack: List[Tuple[Architecture, Architecture]] = []

        for token in _infix_to_postfix(tokens):
            if isinstance(token, str):
                stack.append((_IDENTIFIERS.get(token, cls(0)), cls(0)))
            elif token is _Op.NOT:
                if stack:
                    positive, negated = stack.pop()
                    stack.append((negated, positive))
            elif token in (_Op.AND, _Op.OR):
                right = stack.pop() if stack else None
                left = stack.pop() if stack else None
                if right is not None and left is not None:
                    positive = left[0] | right[0]
                    if token is _Op.AND:
                        negated = left[1] | right[1]
                    else:
                        negated = left[1] & right[1]
                    stack.append((positive, negated))

        positive, negated = stack.pop() if stack else (cls(0), cls(0))
        if not positive:
            positive |= cls.X86_COMPATIBLE
        return positive, negated


_IDENTIFIERS = {
    "arm32compatible": Architecture.ARM32_COMPATIBLE,
    "arm64": Architecture.ARM64,
    "win64": Architecture.WIN64,
    "x64compatible": Architecture.X64_COMPATIBLE,
    "x64os": Architecture.X64_OS,
    # Before Inno Setup 6.3, x64os was named x64 and x86os was named x86.
    "x64": Architecture.X64_OS,
    "x86compatible": Architecture.X86_COMPATIBLE,
    "x86os": Architecture.X86_OS,
    "x86": Architecture.X86_OS,
}


class _Op(enum.Enum):
    AND = "and"
    OR = "or"
    NOT = "not"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


_Token = Union[str, _Op]

_KEYWORDS = {"(": _Op.LEFT_PAREN, ")": _Op.RIGHT_PAREN, "and": _Op.AND, "or": _Op.OR, "not": _Op.NOT}


def _tokenize(expression: str) -> List[_Token]:
    tokens: List[_Token] = [
        _KEYWORDS.get(part, part) for part in re.split(r"[\s()]+", expression) if part
    ]
    # Adjacent identifiers have an implicit `and` between them.
    result: List[_Token] = []
    for token in tokens:
        if result and isinstance(result[-1], str) and isinstance(token, str):
            result.append(_Op.AND)
        result.append(token)
    return result


def _precedence(token: _Token) -> int:
    if token is _Op.AND:
        return 2
    if token is _Op.OR:
        return 1
    return 0


def _infix_to_postfix(tokens: List[_Token]) -> List[_Token]:
    postfix: List[_Token] = []
    operators: List[_Token] = []

    for token in tokens:
        if isinstance(token, str):
            postfix.append(token)
        elif token in (_Op.LEFT_PAREN, _Op.NOT):
            operators.append(token)
        elif token is _Op.RIGHT_PAREN:
            while operators:
                top = operators.pop()
                if top is _Op.LEFT_PAREN:
                    break
                postfix.append(top)
        else:
            while operators and _precedence(token) <= _precedence(operators[-1]):
                postfix.append(operators.pop())
            operators.append(token)

    postfix.extend(reversed(operators))
    return postfix


class StoredArchitecture(enum.IntFlag):
    """Architecture byte used before Inno Setup 6.3."""

    UNKNOWN = 1
    X86 = 1 << 1
    AMD64 = 1 << 2
    IA64 = 1 << 3
    ARM64 = 1 << 4

    def to_architecture(self) -> Architecture:
        """Convert to the newer architecture identifiers."""
        result = Architecture(0)
        if self & (StoredArchitecture.AMD64 | StoredArchitecture.IA64):
            result |= Architecture.X64_OS
        if self & StoredArchitecture.ARM64:
            result |= Architecture.ARM64
        if self & StoredArchitecture.X86:
            result |= Architecture.X86_OS
        return result


def _all_stored() -> Optional[StoredArchitecture]:
    result = StoredArchitecture(0)
    for member in StoredArchitecture:
        result |= member
    return result