"""Selector and event topic lookup against public signature databases."""

import logging
from typing import Dict, List, Optional, Tuple

import requests

from ..errors import TransportError
from .constants import (
    FOURBYTE_EVENT_URL,
    FOURBYTE_FUNCTION_URL,
    HTTP_TIMEOUT,
    OPENCHAIN_LOOKUP_URL,
)

logger = logging.getLogger(__name__)


def split_signature(signature: str) -> Tuple[str, List[str]]:
    """
    Split a text signature into its name and top-level parameter types.

    Tuple parameters keep their parentheses:
        "swap((address,uint256)[],bytes)" -> ("swap", ["(address,uint256)[]", "bytes"])

    Args:
        signature: Canonical signature (e.g., "transfer(address,uint256)")

    Returns:
        (name, list of parameter types)
    """
    if '(' not in signature or not signature.endswith(')'):
        return signature, []

    name, _, rest = signature.partition('(')
    body = rest[:-1]
    types: List[str] = []
    depth = 0
    current = ''
    for char in body:
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
        if char == ',' and depth == 0:
            types.append(current)
            current = ''
        else:
            current += char
    if current:
        types.append(current)
    return name, types


def signature_to_inputs(signature: str) -> List[Dict[str, str]]:
    """Turn a text signature into anonymous ABI input entries."""
    _, types = split_signature(signature)
    return [{'name': '', 'type': param_type} for param_type in types]


class SignatureLookup:
    """
    Resolve 4-byte selectors and event topics to text signatures.

    Openchain is queried first in a single batch; selectors it cannot resolve
    are retried one by one against 4byte.directory.
    """

    def __init__(self, timeout: Optional[float] = HTTP_TIMEOUT, use_fourbyte_fallback: bool = True):
        self.timeout = timeout
        self.use_fourbyte_fallback = use_fourbyte_fallback

    def _get_json(self, url: str, params: Dict) -> Dict:
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise TransportError(f"Signature lookup at {url} failed: {e}") from e

    @staticmethod
    def _first_openchain_match(entries: Optional[List[Dict]]) -> Optional[str]:
        if not entries:
            return None
        for entry in entries:
            if not entry.get('filtered'):
                return entry.get('name')
        return entries[0].get('name')

    def _lookup_openchain(self, selectors: List[str], topics: List[str]) -> Tuple[Dict[str, str], Dict[str, str]]:
        params = {'filter': 'true'}
        if selectors:
            params['function'] = ','.join(selectors)
        if topics:
            params['event'] = ','.join(topics)

        data = self._get_json(OPENCHAIN_LOOKUP_URL, params)
        if not data.get('ok'):
            logger.warning(f"Openchain lookup returned an error: {data.get('error', 'unknown error')}")
            return {}, {}

        result = data.get('result') or {}
        functions = {}
        for selector, entries in (result.get('function') or {}).items():
            match = self._first_openchain_match(entries)
            if match:
                functions[selector.lower()] = match
        events = {}
        for topic, entries in (result.get('event') or {}).items():
            match = self._first_openchain_match(entries)
            if match:
                events[topic.lower()] = match
        return functions, events

    def _lookup_fourbyte(self, url: str, hex_signature: str) -> Optional[str]:
        data = self._get_json(url, {'hex_signature': hex_signature})
        results = data.get('results') or []
        if not results:
            return None
        # Oldest registration is the least likely to be a collision
        oldest = min(results, key=lambda item: item.get('id', 0))
        return oldest.get('text_signature')

    def lookup(self, selectors: List[str], topics: List[str]) -> Tuple[Dict[str, str], Dict[str, str]]:
        """
        Resolve selectors and topics.

        Args:
            selectors: 0x-prefixed 4-byte selectors
            topics: 0x-prefixed 32-byte event topics

        Returns:
            (selector -> signature, topic -> signature); unresolved keys are absent

        Raises:
            TransportError: If a signature database cannot be reached
        """
        if not selectors and not topics:
            return {}, {}

        logger.info(f"Looking up {len(selectors)} selector(s) and {len(topics)} event topic(s)")
        functions, events = self._lookup_openchain(selectors, topics)

        if self.use_fourbyte_fallback:
            for selector in selectors:
                if selector.lower() in functions:
                    continue
                match = self._lookup_fourbyte(FOURBYTE_FUNCTION_URL, selector)
                if match:
                    functions[selector.lower()] = match
            for topic in topics:
                if topic.lower() in events:
                    continue
                match = self._lookup_fourbyte(FOURBYTE_EVENT_URL, topic)
                if match:
                    events[topic.lower()] = match

        logger.info(f"  Resolved {len(functions)}/{len(selectors)} selector(s), {len(events)}/{len(topics)} topic(s)")
        return functions, events
