"""Tests for the built-in blueprint definitions"""

import re

import pytest

from jobwire.blueprints import (
    INSTANCE_BLUEPRINT_ID,
    SANDBOX_BLUEPRINT_ID,
    TEE_INSTANCE_BLUEPRINT_ID,
    InstanceJob,
    SandboxJob,
    build_default_registry,
)
from jobwire.encoder import FullOverride, SchemaDriven
from jobwire.registries.local import RegistryBuilder
from jobwire.types.schema import JobCategory

SNAKE_CASE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")

CONTRACT = "0x1111111111111111111111111111111111111111"


def test_blueprint_counts(default_registry):
    """Test that each built-in blueprint registers its full job set."""

    assert default_registry.namespaces() == (SANDBOX_BLUEPRINT_ID, INSTANCE_BLUEPRINT_ID, TEE_INSTANCE_BLUEPRINT_ID)
    assert len(default_registry.list_by_namespace(SANDBOX_BLUEPRINT_ID)) == 17
    assert len(default_registry.list_by_namespace(INSTANCE_BLUEPRINT_ID)) == 8
    assert len(default_registry.list_by_namespace(TEE_INSTANCE_BLUEPRINT_ID)) == 8
    assert len(default_registry) == 33


def test_job_ids_match_enums(default_registry):
    assert [job.id for job in default_registry.list_by_namespace(SANDBOX_BLUEPRINT_ID)] == list(SandboxJob)
    assert [job.id for job in default_registry.list_by_namespace(INSTANCE_BLUEPRINT_ID)] == list(InstanceJob)
    assert [job.id for job in default_registry.list_by_namespace(TEE_INSTANCE_BLUEPRINT_ID)] == list(InstanceJob)


def test_sandbox_create(default_registry):
    """Test the sandbox create job's encoded fields."""

    create = default_registry.require(SANDBOX_BLUEPRINT_ID, SandboxJob.SANDBOX_CREATE)

    assert create.name == "sandbox_create"
    assert create.category == JobCategory.LIFECYCLE
    assert len(create.encoded_fields) == 16
    assert create.context_params == ()
    assert not create.requires_sandbox


@pytest.mark.parametrize("job_id", [SandboxJob.SANDBOX_STOP, SandboxJob.SANDBOX_RESUME, SandboxJob.SANDBOX_DELETE])
def test_sandbox_id_jobs(default_registry, job_id):
    """Test that stop, resume and delete encode only the sandbox id."""

    job = default_registry.require(SANDBOX_BLUEPRINT_ID, job_id)

    assert [param.wire_name for param in job.context_params] == ["sandbox_id"]
    assert job.encoded_fields == ()


@pytest.mark.parametrize(
    "job_id",
    [
        SandboxJob.SANDBOX_SNAPSHOT,
        SandboxJob.EXEC,
        SandboxJob.PROMPT,
        SandboxJob.TASK,
        SandboxJob.SSH_PROVISION,
        SandboxJob.SSH_REVOKE,
    ],
)
def test_sidecar_jobs(default_registry, job_id):
    job = default_registry.require(SANDBOX_BLUEPRINT_ID, job_id)

    assert [param.wire_name for param in job.context_params] == ["sidecar_url"]
    assert job.requires_sandbox


def test_context_params_imply_requires_sandbox(default_registry):
    for namespace in default_registry.namespaces():
        for job in default_registry.list_by_namespace(namespace):
            assert bool(job.context_params) == job.requires_sandbox, job.name


def test_instance_jobs_take_no_context(default_registry):
    """Test that instance jobs never read from the calling context."""

    for namespace in (INSTANCE_BLUEPRINT_ID, TEE_INSTANCE_BLUEPRINT_ID):
        for job in default_registry.list_by_namespace(namespace):
            assert job.context_params == ()


def test_sandbox_categories(default_registry):
    counts = {
        category: len(default_registry.list_by_category(SANDBOX_BLUEPRINT_ID, category)) for category in JobCategory
    }

    assert counts == {
        JobCategory.LIFECYCLE: 5,
        JobCategory.EXECUTION: 3,
        JobCategory.BATCH: 4,
        JobCategory.WORKFLOW: 3,
        JobCategory.SSH: 2,
        JobCategory.MANAGEMENT: 0,
    }


def test_every_job_category_is_declared(default_registry):
    """Test that each job's category is one its blueprint displays."""

    for blueprint in default_registry.blueprints():
        declared = {info.key for info in blueprint.categories}
        assert {job.category for job in blueprint.jobs} <= declared, blueprint.id


def test_wire_names_are_snake_case(default_registry):
    """Test that every encoded parameter name matches the service's struct naming."""

    for namespace in default_registry.namespaces():
        for job in default_registry.list_by_namespace(namespace):
            for param in job.wire_layout():
                assert SNAKE_CASE.match(param.name), f"{job.name}.{param.name}"


def test_only_batch_create_has_custom_encoder(default_registry):
    for namespace in default_registry.namespaces():
        for job in default_registry.list_by_namespace(namespace):
            if namespace == SANDBOX_BLUEPRINT_ID and job.id == SandboxJob.BATCH_CREATE:
                assert isinstance(job.encoder, FullOverride)
            else:
                assert isinstance(job.encoder, SchemaDriven), job.name


def test_provision_sidecar_token_is_internal(default_registry):
    """Test that the provision sidecar token is encoded but never shown."""

    provision = default_registry.require(INSTANCE_BLUEPRINT_ID, InstanceJob.PROVISION)
    token = provision.get_field("sidecarToken")

    assert token is not None
    assert token.internal
    assert token.encoded_name == "sidecar_token"
    assert token not in provision.form_fields
    assert token in provision.encoded_fields
    assert len(provision.encoded_fields) == 17


def test_deprovision_has_no_form_fields(default_registry):
    deprovision = default_registry.require(INSTANCE_BLUEPRINT_ID, InstanceJob.DEPROVISION)

    assert deprovision.form_fields == ()
    assert [param.name for param in deprovision.wire_layout()] == ["json"]
    assert deprovision.warning


def test_tee_instance_defaults(default_registry):
    """Test that TEE instances provision into an enclave by default."""

    standard = default_registry.require(INSTANCE_BLUEPRINT_ID, InstanceJob.PROVISION)
    tee = default_registry.require(TEE_INSTANCE_BLUEPRINT_ID, InstanceJob.PROVISION)

    assert standard.get_field("teeRequired").default_value is False
    assert tee.get_field("teeRequired").default_value is True
    assert tee.get_field("teeType").default_value == "1"
    assert tee.wire_layout() == standard.wire_layout()


def test_instance_snapshot_is_management(default_registry):
    snapshot = default_registry.require(INSTANCE_BLUEPRINT_ID, InstanceJob.SNAPSHOT)

    assert snapshot.category == JobCategory.MANAGEMENT


def test_contract_addresses():
    """Test that contract addresses are attached per blueprint and chain."""

    registry = build_default_registry(contracts={SANDBOX_BLUEPRINT_ID: {31337: CONTRACT}})

    assert registry.get_blueprint(SANDBOX_BLUEPRINT_ID).contract_for(31337) == CONTRACT
    assert registry.get_blueprint(SANDBOX_BLUEPRINT_ID).contract_for(1) is None
    assert registry.get_blueprint(INSTANCE_BLUEPRINT_ID).contract_for(31337) is None


def test_blueprint_contracts_are_read_only(default_registry):
    with pytest.raises(TypeError):
        default_registry.get_blueprint(SANDBOX_BLUEPRINT_ID).contracts[1] = CONTRACT


def test_builtin_registration_is_explicit():
    """Test that importing the blueprints registers nothing by itself."""

    assert len(RegistryBuilder().freeze()) == 0
