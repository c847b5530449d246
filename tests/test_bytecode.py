"""Tests for the bytecode dispatcher and event heuristics."""
from __future__ import annotations

from eip1967_inspector.extraction.bytecode import (
    abi_from_bytecode,
    find_event_topics,
    find_function_selectors,
    iter_instructions,
)

from .fakes import TRANSFER_TOPIC, dispatcher_bytecode, solc_emit_bytecode


def test_iter_instructions_skips_push_data():
    # PUSH2 0x6363 must not be read as two PUSH4 opcodes
    instructions = list(iter_instructions(bytes.fromhex("6163635b")))

    assert [(ins.pc, ins.opcode, ins.data) for ins in instructions] == [
        (0, 0x61, b"\x63\x63"),
        (3, 0x5b, b""),
    ]


def test_truncated_push_does_not_crash():
    instructions = list(iter_instructions(bytes.fromhex("63a905")))

    assert len(instructions) == 1
    assert instructions[0].data == b"\xa9\x05"
    assert find_function_selectors(bytes.fromhex("63a905")) == {}


def test_dispatcher_selectors_and_payability():
    selectors = find_function_selectors(dispatcher_bytecode())

    assert selectors == {"0xa9059cbb": False, "0xd0e30db0": True}


def test_binary_search_split_is_not_a_selector():
    assert "0x70a08231" not in find_function_selectors(dispatcher_bytecode())


def test_event_topics_ignore_masks():
    assert find_event_topics(dispatcher_bytecode()) == [TRANSFER_TOPIC]


def test_push32_dropped_when_execution_halts():
    code = bytes.fromhex("7f" + TRANSFER_TOPIC[2:] + "00" "5b" "6000" "80" "a1")

    assert find_event_topics(code) == []


def test_revert_discards_pending_topic():
    code = bytes.fromhex("7f" + TRANSFER_TOPIC[2:] + "6000" "80" "fd" "5b" "6000" "80" "a1")

    assert find_event_topics(code) == []


def test_topic_survives_jump_into_emit_routine():
    assert find_event_topics(solc_emit_bytecode()) == [TRANSFER_TOPIC]


def test_abi_from_bytecode_orders_functions_then_events():
    abi = abi_from_bytecode(dispatcher_bytecode())

    assert abi == [
        {"type": "function", "selector": "0xa9059cbb", "payable": False, "stateMutability": "nonpayable"},
        {"type": "function", "selector": "0xd0e30db0", "payable": True, "stateMutability": "payable"},
        {"type": "event", "hash": TRANSFER_TOPIC},
    ]


def test_empty_code_yields_empty_abi():
    assert abi_from_bytecode(b"") == []
