"""Exceptions used throughout jobwire."""


class JobwireError(Exception):
    """Base exception for jobwire-related errors."""


class SchemaError(JobwireError):
    """A job schema could not be registered or used."""


class InvalidSchemaError(SchemaError):
    """A job schema is malformed."""


class RegistryFrozenError(JobwireError):
    """A registration was attempted after the registry was frozen."""


class SchemaNotFoundError(SchemaError):
    """No job schema is registered for a namespace and id."""

    def __init__(self, namespace: str, job_id: int) -> None:
        super().__init__(f"No job {job_id} registered in namespace '{namespace}'. Did you register it?")
        self.namespace = namespace
        self.job_id = job_id
