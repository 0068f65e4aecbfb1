"""Request layouts as the blueprint services decode them, plus typical form values.

Round-trip tests decode encoder output against these layouts. They are
written out independently of the blueprint definitions so that a drift in
either one shows up as a decode mismatch.
"""

from jobwire.abi import AbiParam


def layout(*pairs: tuple[str, str]) -> tuple[AbiParam, ...]:
    return tuple(AbiParam(name, type_) for name, type_ in pairs)


SANDBOX_CREATE = layout(
    ("name", "string"),
    ("image", "string"),
    ("stack", "string"),
    ("agent_identifier", "string"),
    ("env_json", "string"),
    ("metadata_json", "string"),
    ("ssh_enabled", "bool"),
    ("ssh_public_key", "string"),
    ("web_terminal_enabled", "bool"),
    ("max_lifetime_seconds", "uint64"),
    ("idle_timeout_seconds", "uint64"),
    ("cpu_cores", "uint64"),
    ("memory_mb", "uint64"),
    ("disk_gb", "uint64"),
    ("tee_required", "bool"),
    ("tee_type", "uint8"),
)

SANDBOX_ID = layout(("sandbox_id", "string"))

SANDBOX_SNAPSHOT = layout(
    ("sidecar_url", "string"),
    ("destination", "string"),
    ("include_workspace", "bool"),
    ("include_state", "bool"),
)

SANDBOX_EXEC = layout(
    ("sidecar_url", "string"),
    ("command", "string"),
    ("cwd", "string"),
    ("env_json", "string"),
    ("timeout_ms", "uint64"),
)

SANDBOX_PROMPT = layout(
    ("sidecar_url", "string"),
    ("message", "string"),
    ("session_id", "string"),
    ("model", "string"),
    ("context_json", "string"),
    ("timeout_ms", "uint64"),
)

SANDBOX_TASK = layout(
    ("sidecar_url", "string"),
    ("prompt", "string"),
    ("session_id", "string"),
    ("max_turns", "uint64"),
    ("model", "string"),
    ("context_json", "string"),
    ("timeout_ms", "uint64"),
)

BATCH_CREATE = (
    AbiParam("count", "uint32"),
    AbiParam("template_request", "tuple", components=SANDBOX_CREATE),
    AbiParam("operators", "address[]"),
    AbiParam("distribution", "string"),
)

BATCH_TASK = layout(
    ("sidecar_urls", "string[]"),
    ("prompt", "string"),
    ("session_id", "string"),
    ("max_turns", "uint64"),
    ("model", "string"),
    ("context_json", "string"),
    ("timeout_ms", "uint64"),
    ("parallel", "bool"),
    ("aggregation", "string"),
)

BATCH_EXEC = layout(
    ("sidecar_urls", "string[]"),
    ("command", "string"),
    ("cwd", "string"),
    ("env_json", "string"),
    ("timeout_ms", "uint64"),
    ("parallel", "bool"),
)

BATCH_COLLECT = layout(("batch_id", "string"))

WORKFLOW_CREATE = layout(
    ("name", "string"),
    ("workflow_json", "string"),
    ("trigger_type", "string"),
    ("trigger_config", "string"),
    ("sandbox_config_json", "string"),
)

WORKFLOW_CONTROL = layout(("workflow_id", "uint64"))

SSH_REQUEST = layout(
    ("sidecar_url", "string"),
    ("username", "string"),
    ("public_key", "string"),
)

INSTANCE_PROVISION = SANDBOX_CREATE[:14] + layout(("sidecar_token", "string")) + SANDBOX_CREATE[14:]

INSTANCE_EXEC = SANDBOX_EXEC[1:]
INSTANCE_PROMPT = SANDBOX_PROMPT[1:]
INSTANCE_TASK = SANDBOX_TASK[1:]
INSTANCE_SSH = SSH_REQUEST[1:]
INSTANCE_SNAPSHOT = SANDBOX_SNAPSHOT[1:]

JSON_REQUEST = layout(("json", "string"))

# Typical form values

SANDBOX_CREATE_VALUES = {
    "name": "test-sandbox",
    "image": "ubuntu:22.04",
    "stack": "default",
    "agentIdentifier": "agent-1",
    "envJson": '{"KEY":"val"}',
    "metadataJson": "{}",
    "sshEnabled": False,
    "sshPublicKey": "",
    "webTerminalEnabled": True,
    "maxLifetimeSeconds": 86400,
    "idleTimeoutSeconds": 3600,
    "cpuCores": 2,
    "memoryMb": 2048,
    "diskGb": 10,
    "teeRequired": False,
    "teeType": "0",
}

INSTANCE_PROVISION_VALUES = {
    **SANDBOX_CREATE_VALUES,
    "name": "test-instance",
    "sidecarToken": "",
}

EXEC_VALUES = {
    "command": "ls -la /workspace",
    "cwd": "/workspace",
    "envJson": "{}",
    "timeoutMs": 30000,
}

PROMPT_VALUES = {
    "message": "What files are in the workspace?",
    "sessionId": "sess-123",
    "model": "claude-3",
    "contextJson": "{}",
    "timeoutMs": 60000,
}

TASK_VALUES = {
    "prompt": "Build a REST API",
    "sessionId": "sess-456",
    "maxTurns": 10,
    "model": "claude-3",
    "contextJson": "{}",
    "timeoutMs": 300000,
}

SSH_VALUES = {
    "username": "agent",
    "publicKey": "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAITest",
}

SNAPSHOT_VALUES = {
    "destination": "s3://bucket/snapshot-001",
    "includeWorkspace": True,
    "includeState": True,
}

WORKFLOW_CREATE_VALUES = {
    "name": "daily-backup",
    "workflowJson": '{"steps":[]}',
    "triggerType": "cron",
    "triggerConfig": "0 */6 * * *",
    "sandboxConfigJson": '{"image":"ubuntu:22.04"}',
}

SIDECAR_CONTEXT = {"sidecar_url": "http://localhost:8080"}
SANDBOX_ID_CONTEXT = {"sandbox_id": "sb-test-001"}

ADDRESS_A = "0x1234567890abcdef1234567890abcdef12345678"
ADDRESS_B = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"
