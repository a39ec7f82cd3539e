"""Deployment guidance for the BNB staking contract.

Everything here is informational text. Nothing is compiled, signed or sent
to a network.
"""
import shutil
import sys
from typing import List

from bnb_staking.networks import Network


def has_hardhat() -> bool:
    return shutil.which("npx") is not None


def deployment_steps(network: Network) -> List[str]:
    return [
        f"1. Connect to the {network.name} network (chain id {network.chain_id})",
        "2. Compile the Solidity contract",
        f"3. Deploy the contract using a wallet with {network.currency} for gas fees",
        f"4. Verify the contract on {network.explorer_url}",
    ]


def hardhat_example(contract_name: str) -> str:
    return f"""
const {{ ethers }} = require("hardhat");

async function main() {{
  const {contract_name} = await ethers.getContractFactory("{contract_name}");
  console.log("Deploying {contract_name}...");
  const contract = await {contract_name}.deploy();
  await contract.deployed();
  console.log("{contract_name} deployed to:", contract.address);
}}

main()
  .then(() => process.exit(0))
  .catch((error) => {{
    console.error(error);
    process.exit(1);
  }});
"""


def print_instructions(network: Network, contract_name: str, out=None):
    out = out or sys.stdout
    title = f"BNB Chain Staking Contract Deployment Script ({contract_name})"
    print(title, file=out)
    print("-" * len(title), file=out)
    print("This is a placeholder script. In a real environment, you would:", file=out)
    for step in deployment_steps(network):
        print(step, file=out)
    print("", file=out)
    print(f"Network: {network.name}", file=out)
    print(f"  RPC URL:  {network.rpc_url}", file=out)
    print(f"  Explorer: {network.explorer_url}", file=out)
    print("\nExample deployment with Hardhat would look like:", file=out)
    print(hardhat_example(contract_name), file=out)
    if has_hardhat():
        print(f"npx detected. Run: npx hardhat run scripts/deploy.js --network {network.key}", file=out)
    else:
        print("npx not found on PATH. Install Node.js and Hardhat: `npm install --save-dev hardhat`", file=out)
