"""Registry abstract type.

Contains the JobRegistry ABC: read-only access to job schemas by
namespace and id.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from jobwire.exception import SchemaNotFoundError
from jobwire.types.blueprint import BlueprintDefinition
from jobwire.types.schema import JobCategory, JobSchema

type JobPredicate = Callable[[JobSchema], bool]


class JobRegistry(ABC):
    """Looks up job schemas by namespace and numeric id."""

    @abstractmethod
    def lookup(self, namespace: str, job_id: int) -> JobSchema | None:
        """Get a job schema, or None if it is not registered.

        Callers must treat None as a hard stop: there is no default schema.

        @param namespace: The blueprint id
        @param job_id: The job id within the blueprint
        """

        raise NotImplementedError

    @abstractmethod
    def list_by_namespace(self, namespace: str, predicate: JobPredicate | None = None) -> tuple[JobSchema, ...]:
        """List the jobs in a namespace, in registration order.

        @param namespace: The blueprint id
        @param predicate: Optional filter
        @return: The matching jobs; empty for an unknown namespace
        """

        raise NotImplementedError

    @abstractmethod
    def namespaces(self) -> tuple[str, ...]:
        """List the namespaces that have jobs or blueprint metadata."""

        raise NotImplementedError

    @abstractmethod
    def get_blueprint(self, namespace: str) -> BlueprintDefinition | None:
        """Get the blueprint metadata for a namespace, if one was registered."""

        raise NotImplementedError

    @abstractmethod
    def blueprints(self) -> tuple[BlueprintDefinition, ...]:
        raise NotImplementedError

    def require(self, namespace: str, job_id: int) -> JobSchema:
        """Get a job schema, raising if it is not registered.

        @raises SchemaNotFoundError: If no such job is registered
        """

        job = self.lookup(namespace, job_id)
        if job is None:
            raise SchemaNotFoundError(namespace, job_id)

        return job

    def list_by_category(self, namespace: str, category: JobCategory) -> tuple[JobSchema, ...]:
        return self.list_by_namespace(namespace, lambda job: job.category == category)
