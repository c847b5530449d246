#!/usr/bin/env python3
"""
Main entry point for the EIP-1967 proxy inspector.

This script runs a single inspection:
1. Parse command-line arguments (falling back to environment variables)
2. Read the proxy's implementation slot
3. Discover the implementation's ABI
4. Print the implementation address and the ABI
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .core import InspectorConfig, ProxyInspector
from .errors import InspectorError
from .reporting import print_report, save_abi

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Resolve the implementation behind an EIP-1967 proxy and discover its ABI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  RPC_URL               JSON-RPC endpoint (default: BNB Smart Chain)
  PROXY_ADDRESS         Proxy contract to inspect
  IMPLEMENTATION_SLOT   Storage slot override (default: EIP-1967 implementation slot)
  CHAIN_ID              Chain ID used by the explorer source (default: 56)
  ABI_SOURCE            heuristic or explorer (default: heuristic)
  ETHERSCAN_API_KEY     Explorer API key (BSCSCAN_KEY is accepted too)
  RPC_TIMEOUT           Per-request timeout in seconds (default: none)
  STRICT_SLOT           Reject storage words with non-zero padding

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument('--rpc-url', dest='rpc_endpoint', help='JSON-RPC endpoint (env: RPC_URL)')
    parser.add_argument('--proxy', dest='proxy_address', help='Proxy contract address (env: PROXY_ADDRESS)')
    parser.add_argument('--slot', dest='implementation_slot', help='Implementation storage slot (env: IMPLEMENTATION_SLOT)')
    parser.add_argument('--chain-id', type=int, help='Chain ID (env: CHAIN_ID, default: 56)')
    parser.add_argument(
        '--abi-source',
        choices=['heuristic', 'explorer'],
        help='ABI acquisition strategy (env: ABI_SOURCE, default: heuristic)'
    )
    parser.add_argument('--api-key', dest='explorer_api_key', help='Explorer API key (env: ETHERSCAN_API_KEY)')
    parser.add_argument('--explorer-url', dest='explorer_base_url', help='Explorer API base URL (env: EXPLORER_URL)')
    parser.add_argument('--timeout', type=float, help='Per-request timeout in seconds (env: RPC_TIMEOUT)')
    parser.add_argument(
        '--strict',
        action='store_const',
        const=True,
        default=None,
        help='Fail if the upper 12 bytes of the storage word are not zero (env: STRICT_SLOT)'
    )
    parser.add_argument(
        '--no-signature-lookup',
        dest='lookup_signatures',
        action='store_const',
        const=False,
        default=None,
        help='Do not query signature databases for selector names'
    )
    parser.add_argument('--save-abi', type=Path, help='Also write the ABI JSON to this file')
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Log every pipeline step to stderr (default: False)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv(override=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            stream=sys.stderr,
        )
    else:
        # Only the final error line reaches stderr
        logging.basicConfig(
            level=logging.CRITICAL,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.NullHandler()
            ]
        )

    overrides = {
        'rpc_endpoint': args.rpc_endpoint,
        'proxy_address': args.proxy_address,
        'implementation_slot': args.implementation_slot,
        'chain_id': args.chain_id,
        'abi_source': args.abi_source,
        'explorer_api_key': args.explorer_api_key,
        'explorer_base_url': args.explorer_base_url,
        'timeout': args.timeout,
        'strict': args.strict,
        'lookup_signatures': args.lookup_signatures,
    }
    try:
        config = InspectorConfig.from_env(os.environ, **overrides)
    except ValidationError as e:
        parser.error(f"invalid configuration:\n{e}")

    try:
        inspector = ProxyInspector(config)
        result = inspector.inspect()
    except InspectorError as e:
        logger.error(f"❌ Inspection of {config.proxy_address} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print_report(result)

    if args.save_abi:
        save_abi(result.abi, args.save_abi)

    return 0


if __name__ == '__main__':
    sys.exit(main())
