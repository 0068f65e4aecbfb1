"""Built-in blueprints.

Nothing registers itself on import; build_default_registry registers the
built-in blueprints explicitly and freezes the result.
"""

from collections.abc import Mapping

from jobwire.blueprints.instance import INSTANCE_BLUEPRINT, INSTANCE_BLUEPRINT_ID, create_instance_jobs
from jobwire.blueprints.job_ids import InstanceJob, SandboxJob
from jobwire.blueprints.sandbox import SANDBOX_BLUEPRINT, SANDBOX_BLUEPRINT_ID
from jobwire.blueprints.tee_instance import TEE_INSTANCE_BLUEPRINT, TEE_INSTANCE_BLUEPRINT_ID
from jobwire.registries.local import FrozenJobRegistry, RegistryBuilder
from jobwire.types.blueprint import BlueprintDefinition

BUILTIN_BLUEPRINTS: tuple[BlueprintDefinition, ...] = (
    SANDBOX_BLUEPRINT,
    INSTANCE_BLUEPRINT,
    TEE_INSTANCE_BLUEPRINT,
)


def register_builtin_blueprints(
    builder: RegistryBuilder,
    contracts: Mapping[str, Mapping[int, str]] | None = None,
) -> RegistryBuilder:
    """Register the built-in blueprints with a builder.

    @param builder: The registry builder
    @param contracts: Per-chain contract addresses, keyed by blueprint id
    """

    contracts = contracts or {}

    for blueprint in BUILTIN_BLUEPRINTS:
        if blueprint.id in contracts:
            blueprint = blueprint.with_contracts(contracts[blueprint.id])
        builder.register_blueprint(blueprint)

    return builder


def build_default_registry(contracts: Mapping[str, Mapping[int, str]] | None = None) -> FrozenJobRegistry:
    """Build a frozen registry holding the built-in blueprints.

    @param contracts: Per-chain contract addresses, keyed by blueprint id
    """

    return register_builtin_blueprints(RegistryBuilder(), contracts).freeze()


__all__ = [
    "BUILTIN_BLUEPRINTS",
    "INSTANCE_BLUEPRINT",
    "INSTANCE_BLUEPRINT_ID",
    "InstanceJob",
    "SANDBOX_BLUEPRINT",
    "SANDBOX_BLUEPRINT_ID",
    "SandboxJob",
    "TEE_INSTANCE_BLUEPRINT",
    "TEE_INSTANCE_BLUEPRINT_ID",
    "build_default_registry",
    "create_instance_jobs",
    "register_builtin_blueprints",
]
