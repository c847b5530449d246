"""Shared endpoint constants for RPC and explorer clients."""

DEFAULT_CHAIN_ID = 56  # BNB Smart Chain

# Four.meme TokenManager proxy on BNB Smart Chain
DEFAULT_PROXY_ADDRESS = "0x5c952063c7fc8610ffdb798152d69f0b9550762b"

RPC_URLS = {
    1: "https://eth.llamarpc.com",
    10: "https://mainnet.optimism.io",
    56: "https://bsc.blockrazor.xyz",
    100: "https://rpc.gnosischain.com",
    137: "https://polygon-rpc.com",
    8453: "https://mainnet.base.org",
}

# Etherscan v2 multichain API, chain selected with the chainid parameter
ETHERSCAN_V2_URL = "https://api.etherscan.io/v2/api"

OPENCHAIN_LOOKUP_URL = "https://api.openchain.xyz/signature-database/v1/lookup"
FOURBYTE_FUNCTION_URL = "https://www.4byte.directory/api/v1/signatures/"
FOURBYTE_EVENT_URL = "https://www.4byte.directory/api/v1/event-signatures/"

HTTP_TIMEOUT = 10
