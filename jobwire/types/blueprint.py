"""Blueprint definition.

A blueprint is a namespace of jobs served by one on-chain service, plus
the metadata needed to present and address it.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Self

from jobwire.types.schema import JobCategory, JobSchema


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for one job category."""

    key: JobCategory
    label: str
    icon: str = ""


@dataclass(frozen=True)
class BlueprintDefinition:
    """A namespace of jobs and its metadata."""

    # The namespace id jobs are registered under
    id: str
    name: str
    version: str
    description: str = ""
    icon: str = ""
    color: str = ""
    # Contract address per chain id
    contracts: Mapping[int, str] = field(default_factory=dict)
    jobs: tuple[JobSchema, ...] = ()
    # Category ordering for display
    categories: tuple[CategoryInfo, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "contracts", MappingProxyType(dict(self.contracts)))
        if isinstance(self.jobs, Sequence) and not isinstance(self.jobs, tuple):
            object.__setattr__(self, "jobs", tuple(self.jobs))
        if isinstance(self.categories, Sequence) and not isinstance(self.categories, tuple):
            object.__setattr__(self, "categories", tuple(self.categories))

    def with_contracts(self, addresses: Mapping[int, str]) -> Self:
        """Get a copy of this blueprint deployed at the given per-chain addresses.

        @param addresses: Contract address per chain id
        """

        return replace(self, contracts=addresses)

    def contract_for(self, chain_id: int) -> str | None:
        return self.contracts.get(chain_id)
