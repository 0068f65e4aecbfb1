"""AI Agent TEE Instance blueprint.

The instance jobs, provisioned through a TEE backend: same wire layouts,
higher pricing, TEE fields enabled by default.
"""

from jobwire.blueprints.instance import create_instance_jobs
from jobwire.blueprints.job_ids import TEE_INSTANCE_PRICING_MULTIPLIERS
from jobwire.types.blueprint import BlueprintDefinition, CategoryInfo
from jobwire.types.schema import JobCategory

TEE_INSTANCE_BLUEPRINT_ID = "ai-agent-tee-instance-blueprint"

TEE_INSTANCE_BLUEPRINT = BlueprintDefinition(
    id=TEE_INSTANCE_BLUEPRINT_ID,
    name="AI Agent TEE Instance",
    version="0.3.0",
    description="TEE-enforced AI agent instance with hardware-level isolation, attestation, and sealed secrets.",
    icon="i-ph:shield-check",
    color="violet",
    jobs=create_instance_jobs(pricing_overrides=TEE_INSTANCE_PRICING_MULTIPLIERS, tee_defaults=True),
    categories=(
        CategoryInfo(JobCategory.LIFECYCLE, "TEE Lifecycle", "i-ph:shield-check"),
        CategoryInfo(JobCategory.EXECUTION, "Execution", "i-ph:terminal"),
        CategoryInfo(JobCategory.SSH, "SSH Management", "i-ph:key"),
        CategoryInfo(JobCategory.MANAGEMENT, "Management", "i-ph:gear"),
    ),
)
