"""Price estimates for job submission."""

from jobwire.constants import BASE_RATE_WEI
from jobwire.types.schema import JobSchema


def estimate_price_wei(job: JobSchema, base_rate_wei: int = BASE_RATE_WEI) -> int:
    """Estimate a job's price from its pricing multiplier.

    Used when no operator quote is available.
    """

    return job.pricing_multiplier * base_rate_wei
