"""Field groups shared between blueprints.

Sandbox creation and instance provisioning decode the same leading
parameters, and the sidecar jobs share their request shapes, so those
fields are defined once here.
"""

from jobwire.types.schema import ContextParam, FieldKind, FieldSchema, SelectOption
from jobwire.types.wire_type import WireType

SIDECAR_URL_CONTEXT = (ContextParam(wire_name="sidecar_url", wire_type=WireType.STRING),)
SANDBOX_ID_CONTEXT = (ContextParam(wire_name="sandbox_id", wire_type=WireType.STRING),)

TEE_TYPE_OPTIONS = (
    SelectOption(label="None", value="0"),
    SelectOption(label="TDX (Intel)", value="1"),
    SelectOption(label="Nitro (AWS)", value="2"),
    SelectOption(label="SEV (AMD)", value="3"),
)

IMAGE_OPTIONS = (
    SelectOption(label="Ubuntu 22.04", value="ubuntu:22.04"),
    SelectOption(label="Ubuntu 24.04", value="ubuntu:24.04"),
    SelectOption(label="Debian Bookworm", value="debian:bookworm"),
    SelectOption(label="Python 3.12", value="python:3.12"),
    SelectOption(label="Node 22", value="node:22"),
    SelectOption(label="Rust (latest)", value="rust:latest"),
    SelectOption(label="Alpine 3.20", value="alpine:3.20"),
)

STACK_OPTIONS = (
    SelectOption(label="Default", value="default"),
    SelectOption(label="Python", value="python"),
    SelectOption(label="Node.js", value="nodejs"),
    SelectOption(label="Rust", value="rust"),
)


def sandbox_config_fields(name_label: str = "Sandbox Name", name_placeholder: str = "my-agent-sandbox") -> tuple[FieldSchema, ...]:
    """The container configuration fields, name through disk_gb."""

    return (
        FieldSchema(name="name", label=name_label, kind=FieldKind.TEXT, placeholder=name_placeholder,
                    required=True, wire_type=WireType.STRING),
        FieldSchema(name="image", label="Docker Image", kind=FieldKind.COMBOBOX, placeholder="ubuntu:22.04",
                    required=True, default_value="ubuntu:22.04", wire_type=WireType.STRING, options=IMAGE_OPTIONS,
                    helper_text="Select a preset or enter any Docker Hub image"),
        FieldSchema(name="stack", label="Stack", kind=FieldKind.SELECT, default_value="default",
                    wire_type=WireType.STRING, options=STACK_OPTIONS),
        FieldSchema(name="agentIdentifier", label="Agent Identifier", kind=FieldKind.TEXT, placeholder="agent-1",
                    helper_text="Unique identifier for the agent in this sandbox",
                    wire_type=WireType.STRING, wire_name="agent_identifier"),
        FieldSchema(name="envJson", label="Environment Variables (JSON)", kind=FieldKind.JSON, placeholder="{}",
                    default_value="{}", wire_type=WireType.STRING, wire_name="env_json"),
        FieldSchema(name="metadataJson", label="Metadata (JSON)", kind=FieldKind.JSON, placeholder="{}",
                    default_value="{}", wire_type=WireType.STRING, wire_name="metadata_json"),
        FieldSchema(name="sshEnabled", label="Enable SSH", kind=FieldKind.BOOLEAN, default_value=False,
                    wire_type=WireType.BOOL, wire_name="ssh_enabled"),
        FieldSchema(name="sshPublicKey", label="SSH Public Key", kind=FieldKind.TEXTAREA,
                    placeholder="ssh-ed25519 AAAA...", helper_text="Required if SSH is enabled",
                    wire_type=WireType.STRING, wire_name="ssh_public_key"),
        FieldSchema(name="webTerminalEnabled", label="Web Terminal", kind=FieldKind.BOOLEAN, default_value=True,
                    wire_type=WireType.BOOL, wire_name="web_terminal_enabled"),
        FieldSchema(name="maxLifetimeSeconds", label="Max Lifetime (s)", kind=FieldKind.NUMBER, default_value=86400,
                    minimum=0, helper_text="0 = unlimited, 3600 = 1h, 86400 = 24h",
                    wire_type=WireType.UINT64, wire_name="max_lifetime_seconds"),
        FieldSchema(name="idleTimeoutSeconds", label="Idle Timeout (s)", kind=FieldKind.NUMBER, default_value=3600,
                    minimum=0, helper_text="0 = disabled, 300 = 5min, 3600 = 1h",
                    wire_type=WireType.UINT64, wire_name="idle_timeout_seconds"),
        FieldSchema(name="cpuCores", label="CPU Cores", kind=FieldKind.NUMBER, default_value=2, minimum=1, maximum=16,
                    helper_text="Typical: 1-4 for dev, 8-16 for production",
                    wire_type=WireType.UINT64, wire_name="cpu_cores"),
        FieldSchema(name="memoryMb", label="Memory (MB)", kind=FieldKind.NUMBER, default_value=2048, minimum=512,
                    maximum=32768, step=512, helper_text="512 = 0.5 GB, 2048 = 2 GB, 8192 = 8 GB",
                    wire_type=WireType.UINT64, wire_name="memory_mb"),
        FieldSchema(name="diskGb", label="Disk (GB)", kind=FieldKind.NUMBER, default_value=10, minimum=1, maximum=100,
                    helper_text="10 GB typical for dev, 50+ for large models",
                    wire_type=WireType.UINT64, wire_name="disk_gb"),
    )


def tee_fields(enabled_by_default: bool = False) -> tuple[FieldSchema, ...]:
    """The trailing tee_required / tee_type pair.

    @param enabled_by_default: Default to a required TDX enclave
    """

    return (
        FieldSchema(name="teeRequired", label="TEE Required", kind=FieldKind.BOOLEAN,
                    default_value=enabled_by_default, wire_type=WireType.BOOL, wire_name="tee_required"),
        FieldSchema(name="teeType", label="TEE Type", kind=FieldKind.SELECT,
                    default_value="1" if enabled_by_default else "0",
                    wire_type=WireType.UINT8, wire_name="tee_type", options=TEE_TYPE_OPTIONS),
    )


def exec_fields() -> tuple[FieldSchema, ...]:
    return (
        FieldSchema(name="command", label="Command", kind=FieldKind.TEXT, placeholder="ls -la", required=True,
                    wire_type=WireType.STRING),
        FieldSchema(name="cwd", label="Working Directory", kind=FieldKind.TEXT, placeholder="/workspace",
                    wire_type=WireType.STRING),
        FieldSchema(name="envJson", label="Environment (JSON)", kind=FieldKind.JSON, placeholder="{}",
                    default_value="{}", wire_type=WireType.STRING, wire_name="env_json"),
        FieldSchema(name="timeoutMs", label="Timeout (ms)", kind=FieldKind.NUMBER, default_value=30000, minimum=0,
                    wire_type=WireType.UINT64, wire_name="timeout_ms"),
    )


def prompt_fields() -> tuple[FieldSchema, ...]:
    return (
        FieldSchema(name="message", label="Message", kind=FieldKind.TEXTAREA,
                    placeholder="What files are in the workspace?", required=True, wire_type=WireType.STRING),
        FieldSchema(name="sessionId", label="Session ID", kind=FieldKind.TEXT, placeholder="auto-generated if empty",
                    wire_type=WireType.STRING, wire_name="session_id"),
        FieldSchema(name="model", label="Model", kind=FieldKind.TEXT, placeholder="default", wire_type=WireType.STRING),
        FieldSchema(name="contextJson", label="Context (JSON)", kind=FieldKind.JSON, placeholder="{}",
                    default_value="{}", wire_type=WireType.STRING, wire_name="context_json"),
        FieldSchema(name="timeoutMs", label="Timeout (ms)", kind=FieldKind.NUMBER, default_value=60000, minimum=0,
                    wire_type=WireType.UINT64, wire_name="timeout_ms"),
    )


def task_fields() -> tuple[FieldSchema, ...]:
    return (
        FieldSchema(name="prompt", label="Task Prompt", kind=FieldKind.TEXTAREA,
                    placeholder="Build a REST API with Express...", required=True, wire_type=WireType.STRING),
        FieldSchema(name="sessionId", label="Session ID", kind=FieldKind.TEXT, placeholder="auto-generated if empty",
                    wire_type=WireType.STRING, wire_name="session_id"),
        FieldSchema(name="maxTurns", label="Max Turns", kind=FieldKind.NUMBER, default_value=10, minimum=1,
                    wire_type=WireType.UINT64, wire_name="max_turns"),
        FieldSchema(name="model", label="Model", kind=FieldKind.TEXT, placeholder="default", wire_type=WireType.STRING),
        FieldSchema(name="contextJson", label="Context (JSON)", kind=FieldKind.JSON, placeholder="{}",
                    default_value="{}", wire_type=WireType.STRING, wire_name="context_json"),
        FieldSchema(name="timeoutMs", label="Timeout (ms)", kind=FieldKind.NUMBER, default_value=300000, minimum=0,
                    wire_type=WireType.UINT64, wire_name="timeout_ms"),
    )


def ssh_key_fields() -> tuple[FieldSchema, ...]:
    return (
        FieldSchema(name="username", label="Username", kind=FieldKind.TEXT, placeholder="agent", required=True,
                    wire_type=WireType.STRING),
        FieldSchema(name="publicKey", label="SSH Public Key", kind=FieldKind.TEXTAREA,
                    placeholder="ssh-ed25519 AAAA...", required=True, wire_type=WireType.STRING,
                    wire_name="public_key"),
    )


def snapshot_fields() -> tuple[FieldSchema, ...]:
    return (
        FieldSchema(name="destination", label="Destination", kind=FieldKind.TEXT,
                    placeholder="registry/path or s3://bucket/key", wire_type=WireType.STRING),
        FieldSchema(name="includeWorkspace", label="Include Workspace", kind=FieldKind.BOOLEAN, default_value=True,
                    wire_type=WireType.BOOL, wire_name="include_workspace"),
        FieldSchema(name="includeState", label="Include State", kind=FieldKind.BOOLEAN, default_value=True,
                    wire_type=WireType.BOOL, wire_name="include_state"),
    )
