"""Deployment helper for the BNB staking contract.

Prints deployment guidance for BNB Chain and checks that the contract source
sits next to this script. It never compiles, signs or deploys anything.

Usage:
  python deploy/deploy_bnb_staking.py [--network bsc|bsc-testnet]
                                      [--contract BNBStaking.sol] [--simulate]
"""
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from bnb_staking.checker import check_contract_file, report_check
from bnb_staking.guidance import print_instructions
from bnb_staking.networks import DEFAULT_NETWORK, get_network

logger = logging.getLogger(__name__)

DEFAULT_CONTRACT_FILE = "BNBStaking.sol"
SNIPPET_LINES = 40


def script_dir() -> Path:
    return Path(__file__).resolve().parent


def configure_logging():
    level = os.getenv("DEPLOY_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def _option(argv, flag: str, default: str) -> str:
    if flag in argv:
        idx = argv.index(flag)
        if idx + 1 < len(argv):
            return argv[idx + 1]
    return default


def print_snippet(content: bytes):
    lines = content.decode("utf-8", errors="replace").splitlines()[:SNIPPET_LINES]
    print("--- Contract snippet ---")
    print("\n".join(lines))
    print("--- end snippet ---")


def main(argv=None, base_directory=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    load_dotenv()
    configure_logging()

    network_key = _option(argv, "--network", os.getenv("BNB_NETWORK", DEFAULT_NETWORK))
    filename = _option(argv, "--contract", os.getenv("CONTRACT_FILE", DEFAULT_CONTRACT_FILE))
    try:
        network = get_network(network_key)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    contract_name = Path(filename).stem
    print_instructions(network, contract_name)

    base = base_directory if base_directory is not None else script_dir()
    check = check_contract_file(base, filename)
    report_check(check)
    if check.ok and "--simulate" in argv:
        print_snippet(check.content)

    logger.info(f"Contract check finished for {check.path} (ok={check.ok})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
