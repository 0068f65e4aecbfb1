"""In-process job registry.

Registration happens once, at start-up, against a RegistryBuilder. Freezing
the builder hands out an immutable FrozenJobRegistry that every later lookup
goes through, so no lookup can race a registration and no locking is needed.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Self

from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from jobwire.encoder import FullOverride
from jobwire.exception import InvalidSchemaError, RegistryFrozenError
from jobwire.types.blueprint import BlueprintDefinition
from jobwire.types.registry import JobPredicate, JobRegistry
from jobwire.types.schema import ContextParam, FieldSchema, JobSchema
from jobwire.utils.logging_config import get_logger

log = get_logger(__name__)


def validate_schema(job: JobSchema) -> None:
    """Check a job schema's shape before it is registered.

    @param job: The job schema to check
    @raises InvalidSchemaError: If the schema is malformed
    """

    try:
        check_type(job, JobSchema)
        check_type(job.id, int)
        check_type(job.name, str)
        check_type(
            job.fields,
            tuple[FieldSchema, ...],
            collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS,
        )
        check_type(
            job.context_params,
            tuple[ContextParam, ...],
            collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS,
        )
        check_type(job.custom_encoder, FullOverride | None)

        for fld in job.fields:
            check_type(fld.wire_type, str | None)
        for param in job.context_params:
            check_type(param.wire_type, str)
    except TypeCheckError as err:
        exc = InvalidSchemaError(f"Job schema '{getattr(job, 'name', job)}' is malformed")
        raise exc from err

    if isinstance(job.id, bool) or job.id < 0:
        raise InvalidSchemaError(f"Job schema '{job.name}' has invalid id {job.id!r}; ids are non-negative integers")


class FrozenJobRegistry(JobRegistry):
    """An immutable snapshot of registered jobs."""

    def __init__(
        self,
        jobs: Mapping[str, Mapping[int, JobSchema]],
        blueprints: Mapping[str, BlueprintDefinition] | None = None,
    ) -> None:
        self._jobs: Mapping[str, Mapping[int, JobSchema]] = MappingProxyType(
            {namespace: MappingProxyType(dict(entries)) for namespace, entries in jobs.items()}
        )
        self._blueprints: Mapping[str, BlueprintDefinition] = MappingProxyType(dict(blueprints or {}))

    def lookup(self, namespace: str, job_id: int) -> JobSchema | None:
        entries = self._jobs.get(namespace)
        if entries is None:
            return None

        return entries.get(job_id)

    def list_by_namespace(self, namespace: str, predicate: JobPredicate | None = None) -> tuple[JobSchema, ...]:
        entries = self._jobs.get(namespace, {})
        if predicate is None:
            return tuple(entries.values())

        return tuple(job for job in entries.values() if predicate(job))

    def namespaces(self) -> tuple[str, ...]:
        names = list(self._jobs)
        names.extend(namespace for namespace in self._blueprints if namespace not in self._jobs)
        return tuple(names)

    def get_blueprint(self, namespace: str) -> BlueprintDefinition | None:
        return self._blueprints.get(namespace)

    def blueprints(self) -> tuple[BlueprintDefinition, ...]:
        return tuple(self._blueprints.values())

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._jobs.values())


class RegistryBuilder:
    """Collects job registrations, then freezes them into a FrozenJobRegistry."""

    def __init__(self) -> None:
        self.jobs: dict[str, dict[int, JobSchema]] = {}
        self.blueprints: dict[str, BlueprintDefinition] = {}
        self.frozen = False

    def _check_not_frozen(self) -> None:
        if self.frozen:
            raise RegistryFrozenError("Registry has been frozen; register every job before calling freeze()")

    def register(self, namespace: str, job: JobSchema) -> Self:
        """Register a job schema under a namespace.

        A later registration for the same (namespace, id) replaces the earlier
        one in place.

        @param namespace: The blueprint id
        @param job: The job schema
        @raises InvalidSchemaError: If the schema is malformed
        @raises RegistryFrozenError: If the registry was already frozen
        """

        self._check_not_frozen()
        validate_schema(job)

        entries = self.jobs.setdefault(namespace, {})
        previous = entries.get(job.id)
        if previous is not None:
            log.warning(
                f"Job {job.id} in namespace '{namespace}' re-registered: '{previous.name}' replaced by '{job.name}'"
            )
        else:
            log.debug(f"Registering job {job.id} ('{job.name}') in namespace '{namespace}'")

        entries[job.id] = job
        return self

    def register_blueprint(self, blueprint: BlueprintDefinition) -> Self:
        """Register a blueprint's metadata and every one of its jobs.

        @param blueprint: The blueprint to register
        """

        self._check_not_frozen()
        self.blueprints[blueprint.id] = blueprint

        for job in blueprint.jobs:
            self.register(blueprint.id, job)
        return self

    def freeze(self) -> FrozenJobRegistry:
        """Stop accepting registrations and return the registry snapshot."""

        self._check_not_frozen()
        self.frozen = True

        registry = FrozenJobRegistry(self.jobs, self.blueprints)
        log.debug(f"Froze job registry with {len(registry)} jobs across {len(registry.namespaces())} namespaces")

        return registry
