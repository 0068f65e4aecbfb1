"""Tests for price estimates"""

from conftest import make_job
from jobwire.blueprints import INSTANCE_BLUEPRINT, SANDBOX_BLUEPRINT, TEE_INSTANCE_BLUEPRINT, InstanceJob, SandboxJob
from jobwire.constants import BASE_RATE_WEI
from jobwire.pricing import estimate_price_wei


def test_price_is_multiplier_times_base_rate():
    assert estimate_price_wei(make_job(pricing_multiplier=1)) == 10**15
    assert estimate_price_wei(make_job(pricing_multiplier=250)) == 250 * BASE_RATE_WEI


def test_custom_base_rate():
    assert estimate_price_wei(make_job(pricing_multiplier=3), base_rate_wei=7) == 21


def test_builtin_multipliers():
    """Test the multipliers the built-in blueprints charge."""

    sandbox = {job.id: job.pricing_multiplier for job in SANDBOX_BLUEPRINT.jobs}
    instance = {job.id: job.pricing_multiplier for job in INSTANCE_BLUEPRINT.jobs}
    tee = {job.id: job.pricing_multiplier for job in TEE_INSTANCE_BLUEPRINT.jobs}

    assert sandbox[SandboxJob.SANDBOX_CREATE] == 50
    assert sandbox[SandboxJob.TASK] == 250
    assert sandbox[SandboxJob.BATCH_TASK] == 500
    assert instance[InstanceJob.PROVISION] == 50
    assert tee[InstanceJob.PROVISION] == 100
    assert all(tee[job_id] >= instance[job_id] for job_id in instance)
