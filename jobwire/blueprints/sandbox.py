"""AI Agent Sandbox blueprint.

Seventeen jobs across lifecycle, execution, batch, workflow and SSH
categories. Every encoded layout matches the service's request struct for
that job; batch_create nests a full SandboxCreateRequest and so carries its
own encoder.
"""

from collections.abc import Mapping
import json
from typing import Any

from jobwire.abi import AbiParam, encode_parameters
from jobwire.blueprints.fields import (
    SANDBOX_ID_CONTEXT,
    SIDECAR_URL_CONTEXT,
    exec_fields,
    prompt_fields,
    sandbox_config_fields,
    snapshot_fields,
    ssh_key_fields,
    task_fields,
    tee_fields,
)
from jobwire.blueprints.job_ids import SandboxJob
from jobwire.coercion import coerce_address_array, coerce_number, coerce_string
from jobwire.encoder import FullOverride
from jobwire.types.blueprint import BlueprintDefinition, CategoryInfo
from jobwire.types.schema import FieldKind, FieldSchema, JobCategory, JobSchema, SelectOption
from jobwire.types.wire_type import WireType

SANDBOX_BLUEPRINT_ID = "ai-agent-sandbox-blueprint"

SANDBOX_CREATE_REQUEST = (
    AbiParam("name", "string"),
    AbiParam("image", "string"),
    AbiParam("stack", "string"),
    AbiParam("agent_identifier", "string"),
    AbiParam("env_json", "string"),
    AbiParam("metadata_json", "string"),
    AbiParam("ssh_enabled", "bool"),
    AbiParam("ssh_public_key", "string"),
    AbiParam("web_terminal_enabled", "bool"),
    AbiParam("max_lifetime_seconds", "uint64"),
    AbiParam("idle_timeout_seconds", "uint64"),
    AbiParam("cpu_cores", "uint64"),
    AbiParam("memory_mb", "uint64"),
    AbiParam("disk_gb", "uint64"),
    AbiParam("tee_required", "bool"),
    AbiParam("tee_type", "uint8"),
)

BATCH_CREATE_REQUEST = (
    AbiParam("count", "uint32"),
    AbiParam("template_request", "tuple", components=SANDBOX_CREATE_REQUEST),
    AbiParam("operators", "address[]"),
    AbiParam("distribution", "string"),
)

DEFAULT_BATCH_COUNT = 3


def _text(config: Mapping[str, Any], key: str, default: str) -> str:
    value = config.get(key)
    return coerce_string(value) if value else default


def _number(config: Mapping[str, Any], key: str, default: int) -> int | float:
    return coerce_number(config.get(key)) or default


def batch_create_template(config: Mapping[str, Any]) -> tuple[Any, ...]:
    """Build the nested SandboxCreateRequest values from a template config.

    Missing keys fall back to the standard sandbox defaults.

    @param config: The template config, keyed by request field name
    @return: The template values in SANDBOX_CREATE_REQUEST order
    """

    return (
        _text(config, "name", "batch"),
        _text(config, "image", "ubuntu:22.04"),
        _text(config, "stack", "default"),
        _text(config, "agent_identifier", ""),
        _text(config, "env_json", "{}"),
        _text(config, "metadata_json", "{}"),
        bool(config.get("ssh_enabled")),
        _text(config, "ssh_public_key", ""),
        # on unless explicitly disabled
        config.get("web_terminal_enabled") is not False,
        _number(config, "max_lifetime_seconds", 86400),
        _number(config, "idle_timeout_seconds", 3600),
        _number(config, "cpu_cores", 2),
        _number(config, "memory_mb", 2048),
        _number(config, "disk_gb", 10),
        bool(config.get("tee_required")),
        _number(config, "tee_type", 0),
    )


def encode_batch_create(values: Mapping[str, Any], context: Mapping[str, Any] | None = None) -> bytes:
    """Encode a BatchCreateRequest.

    The template config arrives as JSON text in configJson; malformed JSON
    raises json.JSONDecodeError.
    """

    config_json = values.get("configJson")
    if isinstance(config_json, Mapping):
        config: Any = config_json
    else:
        config = json.loads(coerce_string(config_json) or "{}")

    if not isinstance(config, Mapping):
        config = {}

    return encode_parameters(
        BATCH_CREATE_REQUEST,
        [
            coerce_number(values.get("count")) or DEFAULT_BATCH_COUNT,
            batch_create_template(config),
            coerce_address_array(values.get("operators")),
            coerce_string(values.get("distribution")) or "round_robin",
        ],
    )


_SIDECAR_URLS = FieldSchema(
    name="sidecarUrls", label="Sidecar URLs", kind=FieldKind.TEXTAREA, required=True,
    placeholder="http://sidecar-1:3000\nhttp://sidecar-2:3000", helper_text="One URL per line",
    wire_type=WireType.STRING_ARRAY, wire_name="sidecar_urls",
)

_PARALLEL = FieldSchema(
    name="parallel", label="Parallel Execution", kind=FieldKind.BOOLEAN, default_value=True,
    wire_type=WireType.BOOL,
)

_WORKFLOW_ID = FieldSchema(
    name="workflowId", label="Workflow ID", kind=FieldKind.NUMBER, required=True, minimum=0,
    wire_type=WireType.UINT64, wire_name="workflow_id",
)

SANDBOX_JOBS = (
    # Lifecycle
    JobSchema(
        id=SandboxJob.SANDBOX_CREATE,
        name="sandbox_create",
        label="Create Sandbox",
        description="Provision a new AI agent sandbox with Docker isolation, optional SSH, and sidecar.",
        category=JobCategory.LIFECYCLE,
        icon="i-ph:plus-circle",
        pricing_multiplier=50,
        fields=sandbox_config_fields() + tee_fields(),
    ),
    JobSchema(
        id=SandboxJob.SANDBOX_STOP,
        name="sandbox_stop",
        label="Stop Sandbox",
        description="Stop a running sandbox. The container stays on disk for quick resume.",
        category=JobCategory.LIFECYCLE,
        icon="i-ph:stop",
        requires_sandbox=True,
        context_params=SANDBOX_ID_CONTEXT,
    ),
    JobSchema(
        id=SandboxJob.SANDBOX_RESUME,
        name="sandbox_resume",
        label="Resume Sandbox",
        description="Resume a stopped sandbox from its last state.",
        category=JobCategory.LIFECYCLE,
        icon="i-ph:play",
        requires_sandbox=True,
        context_params=SANDBOX_ID_CONTEXT,
    ),
    JobSchema(
        id=SandboxJob.SANDBOX_DELETE,
        name="sandbox_delete",
        label="Delete Sandbox",
        description="Permanently delete a sandbox and its data.",
        category=JobCategory.LIFECYCLE,
        icon="i-ph:trash",
        requires_sandbox=True,
        context_params=SANDBOX_ID_CONTEXT,
        warning="This action is irreversible. All sandbox data will be permanently deleted.",
    ),
    JobSchema(
        id=SandboxJob.SANDBOX_SNAPSHOT,
        name="sandbox_snapshot",
        label="Snapshot",
        description="Create a snapshot of the current sandbox state.",
        category=JobCategory.LIFECYCLE,
        icon="i-ph:camera",
        pricing_multiplier=5,
        requires_sandbox=True,
        context_params=SIDECAR_URL_CONTEXT,
        fields=snapshot_fields(),
    ),
    # Execution
    JobSchema(
        id=SandboxJob.EXEC,
        name="exec",
        label="Execute Command",
        description="Run a shell command inside the sandbox.",
        category=JobCategory.EXECUTION,
        icon="i-ph:terminal",
        requires_sandbox=True,
        context_params=SIDECAR_URL_CONTEXT,
        fields=exec_fields(),
    ),
    JobSchema(
        id=SandboxJob.PROMPT,
        name="prompt",
        label="AI Prompt",
        description="Send a prompt to the AI agent running in the sandbox.",
        category=JobCategory.EXECUTION,
        icon="i-ph:robot",
        pricing_multiplier=20,
        requires_sandbox=True,
        context_params=SIDECAR_URL_CONTEXT,
        fields=prompt_fields(),
    ),
    JobSchema(
        id=SandboxJob.TASK,
        name="task",
        label="Agent Task",
        description="Submit an autonomous task for the agent to complete.",
        category=JobCategory.EXECUTION,
        icon="i-ph:lightning",
        pricing_multiplier=250,
        requires_sandbox=True,
        context_params=SIDECAR_URL_CONTEXT,
        fields=task_fields(),
    ),
    # Batch
    JobSchema(
        id=SandboxJob.BATCH_CREATE,
        name="batch_create",
        label="Batch Create",
        description="Create multiple sandboxes from a shared configuration template.",
        category=JobCategory.BATCH,
        icon="i-ph:copy",
        pricing_multiplier=100,
        fields=(
            FieldSchema(name="count", label="Count", kind=FieldKind.NUMBER, required=True,
                        default_value=DEFAULT_BATCH_COUNT, minimum=1, helper_text="Number of sandboxes to create",
                        wire_type=WireType.UINT32),
            FieldSchema(name="configJson", label="Template Config (JSON)", kind=FieldKind.JSON, required=True,
                        placeholder='{"name":"batch","image":"ubuntu:22.04","stack":"default"}',
                        wire_type=WireType.STRING, wire_name="config_json"),
            FieldSchema(name="operators", label="Operators", kind=FieldKind.TEXTAREA,
                        placeholder="0xabc...\n0xdef...", helper_text="One address per line",
                        wire_type=WireType.ADDRESS_ARRAY),
            FieldSchema(name="distribution", label="Distribution", kind=FieldKind.SELECT,
                        default_value="round_robin", wire_type=WireType.STRING,
                        options=(SelectOption("Round Robin", "round_robin"), SelectOption("Random", "random"))),
        ),
        custom_encoder=FullOverride(encode_batch_create),
    ),
    JobSchema(
        id=SandboxJob.BATCH_TASK,
        name="batch_task",
        label="Batch Task",
        description="Run an autonomous task across multiple sandboxes in parallel.",
        category=JobCategory.BATCH,
        icon="i-ph:lightning",
        pricing_multiplier=500,
        fields=(
            _SIDECAR_URLS,
            FieldSchema(name="prompt", label="Task Prompt", kind=FieldKind.TEXTAREA, required=True,
                        wire_type=WireType.STRING),
            *task_fields()[1:],
            _PARALLEL,
            FieldSchema(name="aggregation", label="Aggregation Strategy", kind=FieldKind.SELECT,
                        default_value="collect", wire_type=WireType.STRING,
                        options=(SelectOption("Collect All", "collect"), SelectOption("First Success", "first"))),
        ),
    ),
    JobSchema(
        id=SandboxJob.BATCH_EXEC,
        name="batch_exec",
        label="Batch Exec",
        description="Execute a command across multiple sandboxes.",
        category=JobCategory.BATCH,
        icon="i-ph:terminal",
        pricing_multiplier=50,
        fields=(_SIDECAR_URLS, *exec_fields(), _PARALLEL),
    ),
    JobSchema(
        id=SandboxJob.BATCH_COLLECT,
        name="batch_collect",
        label="Batch Collect",
        description="Collect results from a batch operation.",
        category=JobCategory.BATCH,
        icon="i-ph:receipt",
        fields=(
            FieldSchema(name="batchId", label="Batch ID", kind=FieldKind.TEXT, required=True,
                        wire_type=WireType.STRING, wire_name="batch_id"),
        ),
    ),
    # Workflows
    JobSchema(
        id=SandboxJob.WORKFLOW_CREATE,
        name="workflow_create",
        label="Create Workflow",
        description="Define a scheduled or event-driven workflow with sandbox automation.",
        category=JobCategory.WORKFLOW,
        icon="i-ph:flow-arrow",
        pricing_multiplier=2,
        fields=(
            FieldSchema(name="name", label="Workflow Name", kind=FieldKind.TEXT, required=True,
                        wire_type=WireType.STRING),
            FieldSchema(name="workflowJson", label="Workflow Definition (JSON)", kind=FieldKind.JSON, required=True,
                        wire_type=WireType.STRING, wire_name="workflow_json"),
            FieldSchema(name="triggerType", label="Trigger Type", kind=FieldKind.SELECT, required=True,
                        wire_type=WireType.STRING, wire_name="trigger_type",
                        options=(
                            SelectOption("Cron Schedule", "cron"),
                            SelectOption("Webhook", "webhook"),
                            SelectOption("Manual", "manual"),
                        )),
            FieldSchema(name="triggerConfig", label="Trigger Config", kind=FieldKind.TEXT, placeholder="0 */6 * * *",
                        helper_text="Cron expression or webhook URL",
                        wire_type=WireType.STRING, wire_name="trigger_config"),
            FieldSchema(name="sandboxConfigJson", label="Sandbox Config (JSON)", kind=FieldKind.JSON,
                        placeholder="{}", wire_type=WireType.STRING, wire_name="sandbox_config_json"),
        ),
    ),
    JobSchema(
        id=SandboxJob.WORKFLOW_TRIGGER,
        name="workflow_trigger",
        label="Trigger Workflow",
        description="Manually trigger an existing workflow.",
        category=JobCategory.WORKFLOW,
        icon="i-ph:play",
        pricing_multiplier=5,
        fields=(_WORKFLOW_ID,),
    ),
    JobSchema(
        id=SandboxJob.WORKFLOW_CANCEL,
        name="workflow_cancel",
        label="Cancel Workflow",
        description="Deactivate a workflow. Can be re-triggered later.",
        category=JobCategory.WORKFLOW,
        icon="i-ph:stop",
        fields=(_WORKFLOW_ID,),
    ),
    # SSH
    JobSchema(
        id=SandboxJob.SSH_PROVISION,
        name="ssh_provision",
        label="Provision SSH",
        description="Add an SSH public key to a sandbox for remote access.",
        category=JobCategory.SSH,
        icon="i-ph:key",
        pricing_multiplier=2,
        requires_sandbox=True,
        context_params=SIDECAR_URL_CONTEXT,
        fields=ssh_key_fields(),
    ),
    JobSchema(
        id=SandboxJob.SSH_REVOKE,
        name="ssh_revoke",
        label="Revoke SSH",
        description="Remove an SSH public key from a sandbox.",
        category=JobCategory.SSH,
        icon="i-ph:key",
        requires_sandbox=True,
        context_params=SIDECAR_URL_CONTEXT,
        fields=ssh_key_fields(),
    ),
)

SANDBOX_BLUEPRINT = BlueprintDefinition(
    id=SANDBOX_BLUEPRINT_ID,
    name="AI Agent Sandbox",
    version="0.4.0",
    description=(
        "Provision isolated AI agent sandboxes with Docker, SSH, sidecar AI execution, "
        "batch operations, and scheduled workflows."
    ),
    icon="i-ph:cloud",
    color="teal",
    jobs=SANDBOX_JOBS,
    categories=(
        CategoryInfo(JobCategory.LIFECYCLE, "Sandbox Lifecycle", "i-ph:hard-drives"),
        CategoryInfo(JobCategory.EXECUTION, "Execution", "i-ph:terminal"),
        CategoryInfo(JobCategory.BATCH, "Batch Operations", "i-ph:copy"),
        CategoryInfo(JobCategory.WORKFLOW, "Workflows", "i-ph:flow-arrow"),
        CategoryInfo(JobCategory.SSH, "SSH Management", "i-ph:key"),
    ),
)
