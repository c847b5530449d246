"""Tests for selector/topic lookups against signature databases."""
from __future__ import annotations

import pytest
import requests

from eip1967_inspector.clients.constants import (
    FOURBYTE_EVENT_URL,
    FOURBYTE_FUNCTION_URL,
    OPENCHAIN_LOOKUP_URL,
)
from eip1967_inspector.clients.signatures import SignatureLookup, signature_to_inputs, split_signature
from eip1967_inspector.errors import TransportError

from .fakes import TRANSFER_TOPIC, FakeResponse


def test_split_signature_keeps_tuples_together():
    assert split_signature("swap((address,uint256)[],bytes)") == ("swap", ["(address,uint256)[]", "bytes"])
    assert split_signature("deposit()") == ("deposit", [])
    assert split_signature("fallback") == ("fallback", [])


def test_signature_to_inputs():
    assert signature_to_inputs("transfer(address,uint256)") == [
        {"name": "", "type": "address"},
        {"name": "", "type": "uint256"},
    ]


def test_lookup_prefers_openchain_and_falls_back_to_fourbyte(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, dict(params or {})))
        if url == OPENCHAIN_LOOKUP_URL:
            return FakeResponse({
                "ok": True,
                "result": {
                    "function": {
                        "0xa9059cbb": [{"name": "transfer(address,uint256)", "filtered": False}],
                        "0xd0e30db0": None,
                    },
                    "event": {
                        TRANSFER_TOPIC: [{"name": "Transfer(address,address,uint256)", "filtered": False}],
                    },
                },
            })
        if url == FOURBYTE_FUNCTION_URL:
            return FakeResponse({"results": [
                {"id": 900, "text_signature": "collision_xyz()"},
                {"id": 12, "text_signature": "deposit()"},
            ]})
        raise AssertionError(f"unexpected url {url}")

    monkeypatch.setattr(requests, "get", fake_get)

    functions, events = SignatureLookup().lookup(["0xa9059cbb", "0xd0e30db0"], [TRANSFER_TOPIC])

    assert functions == {"0xa9059cbb": "transfer(address,uint256)", "0xd0e30db0": "deposit()"}
    assert events == {TRANSFER_TOPIC: "Transfer(address,address,uint256)"}
    assert calls[0][1]["function"] == "0xa9059cbb,0xd0e30db0"
    assert calls[0][1]["event"] == TRANSFER_TOPIC
    assert [url for url, _ in calls].count(FOURBYTE_EVENT_URL) == 0


def test_openchain_filtered_entries_are_last_resort(monkeypatch):
    payload = {"ok": True, "result": {"function": {"0x12345678": [
        {"name": "spam()", "filtered": True},
        {"name": "real(uint256)", "filtered": False},
    ]}, "event": {}}}
    monkeypatch.setattr(requests, "get", lambda url, params=None, timeout=None: FakeResponse(payload))

    functions, _ = SignatureLookup(use_fourbyte_fallback=False).lookup(["0x12345678"], [])

    assert functions == {"0x12345678": "real(uint256)"}


def test_lookup_without_inputs_makes_no_request(monkeypatch):
    def fail(*_args, **_kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(requests, "get", fail)

    assert SignatureLookup().lookup([], []) == ({}, {})


def test_lookup_network_failure_is_transport_error(monkeypatch):
    def fake_get(url, params=None, timeout=None):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(TransportError):
        SignatureLookup().lookup(["0xa9059cbb"], [])


def test_lookup_http_error_is_transport_error(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, params=None, timeout=None: FakeResponse({}, status_code=503))

    with pytest.raises(TransportError):
        SignatureLookup().lookup(["0xa9059cbb"], [])
