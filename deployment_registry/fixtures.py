# deployment_registry/fixtures.py
"""
Fixture Resolution Policy - reuse an existing deployment, else deploy fresh.

Flow:
1. Resolve the contract address from the deployment manifest
2. Address found  -> attach to the deployed instance (no deployment)
3. Address absent -> deploy a new instance through the runtime
4. Record the block number after binding

The decision depends only on the manifest on disk, so repeated loads against
an unchanged manifest always take the same branch.

Usage:
    fixture = DeploymentFixture(resolver, runtime, "CounterModule", "Counter")
    binding = await fixture.load()
    await binding.contract.inc()
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol

from .resolver import AddressResolver

logger = logging.getLogger(__name__)


class ContractRuntime(Protocol):
    """Chain client + artifact loader used to get live contract handles."""

    async def attach(self, contract_name: str, address: str) -> Any:
        """Handle for an already-deployed contract (artifact ABI + address)."""
        ...

    async def deploy(self, contract_name: str) -> Any:
        """Deploy a new instance and wait until it is mined."""
        ...

    async def address_of(self, contract: Any) -> str:
        ...

    async def block_number(self) -> int:
        ...


class FixtureAction(Enum):
    REUSE = "reuse"
    DEPLOY = "deploy"


@dataclass(frozen=True)
class FixtureDecision:
    """What load() is going to do, and with which address."""

    action: FixtureAction
    address: Optional[str] = None

    @property
    def reuse(self) -> bool:
        return self.action == FixtureAction.REUSE


@dataclass
class ContractBinding:
    """A live contract handle plus how it was obtained."""

    contract_name: str
    address: str
    contract: Any
    reused: bool
    deployment_block_number: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contract": self.contract_name,
            "address": self.address,
            "reused": self.reused,
            "deployment_block_number": self.deployment_block_number,
        }


class DeploymentFixture:
    """Bind a test fixture to a deployed contract, deploying only when needed."""

    def __init__(
        self,
        resolver: AddressResolver,
        runtime: ContractRuntime,
        module_name: str,
        contract_name: str,
        network_name: Optional[str] = None
    ):
        self.resolver = resolver
        self.runtime = runtime
        self.module_name = module_name
        self.contract_name = contract_name
        self.network_name = network_name

    def decide(self) -> FixtureDecision:
        """Reuse if the manifest has an address for the contract, else deploy."""
        address = self.resolver.resolve_address(
            self.module_name, self.contract_name, self.network_name
        )
        if address:
            return FixtureDecision(FixtureAction.REUSE, address)
        return FixtureDecision(FixtureAction.DEPLOY)

    async def load(self) -> ContractBinding:
        """
        Resolve and bind the contract.

        Returns:
            ContractBinding with the live handle

        Raises:
            Whatever the runtime raises while attaching or deploying
        """
        decision = self.decide()

        if decision.reuse:
            contract = await self.runtime.attach(self.contract_name, decision.address)
            address = decision.address
            logger.info(f"Using deployed {self.contract_name} at: {address}")
        else:
            contract = await self.runtime.deploy(self.contract_name)
            address = await self.runtime.address_of(contract)
            logger.info(f"Deployed new {self.contract_name} at: {address}")

        block_number = await self.runtime.block_number()

        return ContractBinding(
            contract_name=self.contract_name,
            address=address,
            contract=contract,
            reused=decision.reuse,
            deployment_block_number=block_number,
        )


async def resolve_or_deploy(
    resolver: AddressResolver,
    runtime: ContractRuntime,
    module_name: str,
    contract_name: str,
    network_name: Optional[str] = None
) -> ContractBinding:
    """One-shot DeploymentFixture(...).load()."""
    fixture = DeploymentFixture(resolver, runtime, module_name, contract_name, network_name)
    return await fixture.load()
