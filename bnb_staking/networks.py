import dataclasses
import os
from typing import Dict


@dataclasses.dataclass(frozen=True)
class Network:
    key: str
    name: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    currency: str


# Only used to render deployment guidance; nothing here is ever contacted.
NETWORKS: Dict[str, Network] = {
    "bsc": Network(
        key="bsc",
        name="BNB Smart Chain",
        chain_id=56,
        rpc_url="https://bsc-dataseed.binance.org",
        explorer_url="https://bscscan.com",
        currency="BNB",
    ),
    "bsc-testnet": Network(
        key="bsc-testnet",
        name="BNB Smart Chain Testnet",
        chain_id=97,
        rpc_url="https://data-seed-prebsc-1-s1.binance.org:8545",
        explorer_url="https://testnet.bscscan.com",
        currency="tBNB",
    ),
}

RPC_ENV_VARS = {
    "bsc": "BSC_RPC",
    "bsc-testnet": "BSC_TESTNET_RPC",
}

DEFAULT_NETWORK = "bsc-testnet"


def get_network(key: str) -> Network:
    """Look up a network by key, case-insensitively.

    The RPC URL can be overridden per network through the environment
    (BSC_RPC, BSC_TESTNET_RPC).
    """
    normalized = (key or "").strip().lower()
    if normalized not in NETWORKS:
        supported = ", ".join(sorted(NETWORKS))
        raise ValueError(f"Unsupported network: {key!r} (choose one of: {supported})")
    net = NETWORKS[normalized]
    rpc_url = os.getenv(RPC_ENV_VARS[normalized])
    if rpc_url:
        net = dataclasses.replace(net, rpc_url=rpc_url)
    return net
