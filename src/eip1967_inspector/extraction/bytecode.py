"""
Heuristic ABI recovery from deployed EVM bytecode.

This module walks runtime bytecode instruction by instruction and recovers:
- Function selectors from the Solidity dispatcher (PUSH4 <sel> EQ PUSHn JUMPI)
- Payability of each function from the shape of its entry block
- Event topics from PUSH32 values consumed by LOG1..LOG4

Nothing here is guaranteed complete: selectors dispatched through
non-standard jump tables (or compiled with leading-zero selectors) are missed.
"""

from typing import Dict, Iterator, List, NamedTuple, Optional

PUSH1 = 0x60
PUSH4 = 0x63
PUSH32 = 0x7f
DUP1 = 0x80
DUP16 = 0x8f
EQ = 0x14
JUMPI = 0x57
JUMPDEST = 0x5b
CALLVALUE = 0x34
LOG1 = 0xa1
LOG4 = 0xa4
STOP = 0x00
RETURN = 0xf3
REVERT = 0xfd
INVALID = 0xfe

HALTING_OPCODES = {STOP, RETURN, REVERT, INVALID}


class Instruction(NamedTuple):
    pc: int
    opcode: int
    data: bytes


def iter_instructions(code: bytes) -> Iterator[Instruction]:
    """
    Disassemble bytecode into instructions, skipping over PUSH immediates.

    A PUSH truncated by the end of the code yields whatever bytes remain.
    """
    pc = 0
    size = len(code)
    while pc < size:
        opcode = code[pc]
        if PUSH1 <= opcode <= PUSH32:
            width = opcode - PUSH1 + 1
            data = code[pc + 1:pc + 1 + width]
            yield Instruction(pc, opcode, data)
            pc += 1 + width
        else:
            yield Instruction(pc, opcode, b'')
            pc += 1


def _is_push(ins: Instruction) -> bool:
    return PUSH1 <= ins.opcode <= PUSH32


def _is_dup(ins: Instruction) -> bool:
    return DUP1 <= ins.opcode <= DUP16


def _dispatch_target(instructions: List[Instruction], index: int) -> Optional[int]:
    """
    Return the jump destination if instructions[index] opens a dispatcher entry.

    Matches both layouts emitted by solc:
        DUP1 PUSH4 <sel> EQ PUSH2 <dest> JUMPI
        PUSH4 <sel> DUP2 EQ PUSH2 <dest> JUMPI
    """
    cursor = index + 1
    if cursor < len(instructions) and _is_dup(instructions[cursor]):
        cursor += 1
    if cursor + 2 >= len(instructions):
        return None

    eq, push, jumpi = instructions[cursor:cursor + 3]
    if eq.opcode != EQ or jumpi.opcode != JUMPI:
        return None
    if not _is_push(push) or len(push.data) > 4:
        return None
    return int.from_bytes(push.data, 'big')


def _rejects_value(code: bytes, dest: int) -> bool:
    # Non-payable entry blocks open with JUMPDEST CALLVALUE
    return dest + 1 < len(code) and code[dest] == JUMPDEST and code[dest + 1] == CALLVALUE


def find_function_selectors(code: bytes) -> Dict[str, bool]:
    """
    Find dispatcher selectors in runtime bytecode.

    Args:
        code: Runtime bytecode

    Returns:
        Dict mapping selector hex (e.g., "0xa9059cbb") -> payable flag,
        in order of first appearance
    """
    instructions = list(iter_instructions(code))
    selectors: Dict[str, bool] = {}

    for index, ins in enumerate(instructions):
        if ins.opcode != PUSH4 or len(ins.data) != 4:
            continue
        dest = _dispatch_target(instructions, index)
        if dest is None:
            continue
        selector = '0x' + ins.data.hex()
        if selector not in selectors:
            selectors[selector] = not _rejects_value(code, dest)

    return selectors


def _looks_like_mask(value: bytes) -> bool:
    return value[:1] == b'\xff' or value[:4] == b'\x00' * 4


def find_event_topics(code: bytes) -> List[str]:
    """
    Find event topic hashes: PUSH32 values later consumed by a LOGn.

    solc pushes the topic before jumping into a shared emit routine, so
    candidates are carried across JUMP/JUMPDEST and only dropped when
    execution halts.

    Args:
        code: Runtime bytecode

    Returns:
        Topic hashes as 0x-prefixed hex, in order of first appearance
    """
    topics: List[str] = []
    pending: List[bytes] = []

    for ins in iter_instructions(code):
        if ins.opcode == PUSH32 and len(ins.data) == 32:
            if not _looks_like_mask(ins.data):
                pending.append(ins.data)
        elif LOG1 <= ins.opcode <= LOG4:
            for value in pending:
                topic = '0x' + value.hex()
                if topic not in topics:
                    topics.append(topic)
            pending = []
        elif ins.opcode in HALTING_OPCODES:
            pending = []

    return topics


def abi_from_bytecode(code: bytes) -> List[Dict]:
    """
    Build a skeleton ABI (unnamed functions and events) from runtime bytecode.

    Args:
        code: Runtime bytecode (empty for accounts without code)

    Returns:
        Function entries sorted by selector followed by event entries sorted by hash
    """
    functions = [
        {
            'type': 'function',
            'selector': selector,
            'payable': payable,
            'stateMutability': 'payable' if payable else 'nonpayable',
        }
        for selector, payable in sorted(find_function_selectors(code).items())
    ]
    events = [
        {'type': 'event', 'hash': topic}
        for topic in sorted(find_event_topics(code))
    ]
    return functions + events
