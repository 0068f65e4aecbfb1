"""Numeric job ids, as dispatched by the on-chain services."""

from enum import IntEnum


class SandboxJob(IntEnum):
    """Jobs served by the sandbox blueprint"""

    # Lifecycle
    SANDBOX_CREATE = 0
    SANDBOX_STOP = 1
    SANDBOX_RESUME = 2
    SANDBOX_DELETE = 3
    SANDBOX_SNAPSHOT = 4

    # Execution
    EXEC = 10
    PROMPT = 11
    TASK = 12

    # Batch
    BATCH_CREATE = 20
    BATCH_TASK = 21
    BATCH_EXEC = 22
    BATCH_COLLECT = 23

    # Workflows
    WORKFLOW_CREATE = 30
    WORKFLOW_TRIGGER = 31
    WORKFLOW_CANCEL = 32

    # SSH
    SSH_PROVISION = 40
    SSH_REVOKE = 41


class InstanceJob(IntEnum):
    """Jobs served by the instance and TEE instance blueprints"""

    PROVISION = 0
    EXEC = 1
    PROMPT = 2
    TASK = 3
    SSH_PROVISION = 4
    SSH_REVOKE = 5
    SNAPSHOT = 6
    DEPROVISION = 7


INSTANCE_PRICING_MULTIPLIERS: dict[int, int] = {
    InstanceJob.PROVISION: 50,
    InstanceJob.EXEC: 1,
    InstanceJob.PROMPT: 20,
    InstanceJob.TASK: 250,
    InstanceJob.SSH_PROVISION: 2,
    InstanceJob.SSH_REVOKE: 1,
    InstanceJob.SNAPSHOT: 5,
    InstanceJob.DEPROVISION: 1,
}

# TEE provisioning and execution carry extra overhead
TEE_INSTANCE_PRICING_MULTIPLIERS: dict[int, int] = {
    InstanceJob.PROVISION: 100,
    InstanceJob.EXEC: 2,
    InstanceJob.PROMPT: 25,
    InstanceJob.TASK: 300,
    InstanceJob.SSH_PROVISION: 2,
    InstanceJob.SSH_REVOKE: 1,
    InstanceJob.SNAPSHOT: 5,
    InstanceJob.DEPROVISION: 2,
}
