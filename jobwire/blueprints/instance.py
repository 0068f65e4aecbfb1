"""AI Agent Instance blueprint.

One service instance owns exactly one sandbox, so none of these jobs take a
sidecar URL or sandbox id from the context: the service already knows them.
"""

from collections.abc import Mapping

from jobwire.blueprints.fields import (
    exec_fields,
    prompt_fields,
    sandbox_config_fields,
    snapshot_fields,
    ssh_key_fields,
    task_fields,
    tee_fields,
)
from jobwire.blueprints.job_ids import INSTANCE_PRICING_MULTIPLIERS, InstanceJob
from jobwire.types.blueprint import BlueprintDefinition, CategoryInfo
from jobwire.types.schema import FieldKind, FieldSchema, JobCategory, JobSchema
from jobwire.types.wire_type import WireType

INSTANCE_BLUEPRINT_ID = "ai-agent-instance-blueprint"


def create_instance_jobs(
    pricing_overrides: Mapping[int, int] | None = None,
    tee_defaults: bool = False,
) -> tuple[JobSchema, ...]:
    """Build the eight instance jobs.

    @param pricing_overrides: Pricing multiplier per job id, replacing the standard ones
    @param tee_defaults: Default provisioning to a required TDX enclave
    @return: The jobs, in id order
    """

    multipliers = {**INSTANCE_PRICING_MULTIPLIERS, **(pricing_overrides or {})}

    return (
        JobSchema(
            id=InstanceJob.PROVISION,
            name="provision",
            label="Provision Instance",
            description="Provision the sandbox backing this instance.",
            category=JobCategory.LIFECYCLE,
            icon="i-ph:plus-circle",
            pricing_multiplier=multipliers[InstanceJob.PROVISION],
            fields=(
                *sandbox_config_fields(name_label="Instance Name", name_placeholder="my-agent-instance"),
                # issued by the operator, never typed in
                FieldSchema(name="sidecarToken", label="Sidecar Token", kind=FieldKind.TEXT, internal=True,
                            wire_type=WireType.STRING, wire_name="sidecar_token"),
                *tee_fields(enabled_by_default=tee_defaults),
            ),
        ),
        JobSchema(
            id=InstanceJob.EXEC,
            name="exec",
            label="Execute Command",
            description="Run a shell command inside the instance.",
            category=JobCategory.EXECUTION,
            icon="i-ph:terminal",
            pricing_multiplier=multipliers[InstanceJob.EXEC],
            fields=exec_fields(),
        ),
        JobSchema(
            id=InstanceJob.PROMPT,
            name="prompt",
            label="AI Prompt",
            description="Send a prompt to the AI agent running in the instance.",
            category=JobCategory.EXECUTION,
            icon="i-ph:robot",
            pricing_multiplier=multipliers[InstanceJob.PROMPT],
            fields=prompt_fields(),
        ),
        JobSchema(
            id=InstanceJob.TASK,
            name="task",
            label="Agent Task",
            description="Submit an autonomous task for the agent to complete.",
            category=JobCategory.EXECUTION,
            icon="i-ph:lightning",
            pricing_multiplier=multipliers[InstanceJob.TASK],
            fields=task_fields(),
        ),
        JobSchema(
            id=InstanceJob.SSH_PROVISION,
            name="ssh_provision",
            label="Provision SSH",
            description="Add an SSH public key to the instance.",
            category=JobCategory.SSH,
            icon="i-ph:key",
            pricing_multiplier=multipliers[InstanceJob.SSH_PROVISION],
            fields=ssh_key_fields(),
        ),
        JobSchema(
            id=InstanceJob.SSH_REVOKE,
            name="ssh_revoke",
            label="Revoke SSH",
            description="Remove an SSH public key from the instance.",
            category=JobCategory.SSH,
            icon="i-ph:key",
            pricing_multiplier=multipliers[InstanceJob.SSH_REVOKE],
            fields=ssh_key_fields(),
        ),
        JobSchema(
            id=InstanceJob.SNAPSHOT,
            name="snapshot",
            label="Snapshot",
            description="Create a snapshot of the instance state.",
            category=JobCategory.MANAGEMENT,
            icon="i-ph:camera",
            pricing_multiplier=multipliers[InstanceJob.SNAPSHOT],
            fields=snapshot_fields(),
        ),
        JobSchema(
            id=InstanceJob.DEPROVISION,
            name="deprovision",
            label="Deprovision",
            description="Tear down the instance and release its resources.",
            category=JobCategory.LIFECYCLE,
            icon="i-ph:trash",
            pricing_multiplier=multipliers[InstanceJob.DEPROVISION],
            warning="This action is irreversible. The instance and its data will be deleted.",
            fields=(
                FieldSchema(name="json", label="Request (JSON)", kind=FieldKind.JSON, internal=True,
                            default_value="{}", wire_type=WireType.STRING),
            ),
        ),
    )


INSTANCE_CATEGORIES = (
    CategoryInfo(JobCategory.LIFECYCLE, "Instance Lifecycle", "i-ph:hard-drives"),
    CategoryInfo(JobCategory.EXECUTION, "Execution", "i-ph:terminal"),
    CategoryInfo(JobCategory.SSH, "SSH Management", "i-ph:key"),
    CategoryInfo(JobCategory.MANAGEMENT, "Management", "i-ph:gear"),
)

INSTANCE_BLUEPRINT = BlueprintDefinition(
    id=INSTANCE_BLUEPRINT_ID,
    name="AI Agent Instance",
    version="0.3.0",
    description="A dedicated AI agent instance with a single long-lived sandbox.",
    icon="i-ph:cube",
    color="blue",
    jobs=create_instance_jobs(),
    categories=INSTANCE_CATEGORIES,
)
