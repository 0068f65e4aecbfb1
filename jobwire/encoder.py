"""Job argument encoding.

Turns a job schema, the form values and the calling context into the ABI
bytes the job expects. Each job carries one of two strategies:

- SchemaDriven: coerce every context param and encoded field in declared
  order, then ABI-encode the flat parameter list.
- FullOverride: hand the raw values to a job-specific function, for
  layouts a flat list cannot express (nested structs, dependent counts).

Neither strategy catches anything. Coercion does not raise; errors from
eth_abi or from an override function reach the caller unchanged.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from jobwire.abi import AbiParam, encode_parameters, to_hex
from jobwire.coercion import coerce_value
from jobwire.types.schema import ContextParam, FieldSchema, JobSchema
from jobwire.utils.logging_config import get_logger

log = get_logger(__name__)

type FormValues = Mapping[str, Any]
type JobContext = Mapping[str, Any]
type OverrideFn = Callable[[FormValues, JobContext | None], bytes]


@dataclass(frozen=True)
class EncodedParam:
    """One parameter of the flat wire layout, with its coerced value."""

    name: str
    type: str
    value: Any


class JobEncoder(ABC):
    """Encodes form values and context into a job's ABI payload."""

    @abstractmethod
    def encode(self, values: FormValues, context: JobContext | None = None) -> bytes:
        """Encode the job arguments.

        @param values: Form values, keyed by field name
        @param context: Values supplied by the calling environment, keyed by wire name
        @return: The ABI-encoded payload
        """

        raise NotImplementedError


class SchemaDriven(JobEncoder):
    """Encodes the flat parameter list declared by a job schema."""

    def __init__(self, context_params: Sequence[ContextParam], fields: Sequence[FieldSchema]) -> None:
        self.context_params = tuple(context_params)
        self.fields = tuple(fields)

    def parameters(self, values: FormValues, context: JobContext | None = None) -> list[EncodedParam]:
        """Build the ordered (name, type, value) list: context params first,
        then every field with a wire type."""

        context = context or {}
        params: list[EncodedParam] = []

        for param in self.context_params:
            params.append(
                EncodedParam(
                    name=param.wire_name,
                    type=str(param.wire_type),
                    value=coerce_value(context.get(param.wire_name), param.wire_type),
                )
            )

        for fld in self.fields:
            if fld.wire_type is None:
                continue

            params.append(
                EncodedParam(
                    name=fld.encoded_name,
                    type=str(fld.wire_type),
                    value=coerce_value(values.get(fld.name), fld.wire_type),
                )
            )

        return params

    def encode(self, values: FormValues, context: JobContext | None = None) -> bytes:
        params = self.parameters(values, context)
        log.debug(f"Encoding {len(params)} ABI parameters: {[param.name for param in params]}")

        return encode_parameters(
            [AbiParam(name=param.name, type=param.type) for param in params],
            [param.value for param in params],
        )


class FullOverride(JobEncoder):
    """Delegates encoding entirely to a job-specific function."""

    def __init__(self, fn: OverrideFn) -> None:
        self.fn = fn

    def encode(self, values: FormValues, context: JobContext | None = None) -> bytes:
        return self.fn(values, context)

    def __repr__(self) -> str:
        return f"FullOverride({getattr(self.fn, '__name__', self.fn)!r})"


def encode_job_args(job: JobSchema, values: FormValues, context: JobContext | None = None) -> bytes:
    """Encode a job's arguments with the job's own strategy.

    The result depends only on the three arguments. Look the job up first:
    a missing schema is the caller's error to report, never a default.

    @param job: The job schema
    @param values: Form values, keyed by field name
    @param context: Values supplied by the calling environment, keyed by wire name
    @return: The ABI-encoded payload
    """

    return job.encoder.encode(values, context)


def encode_job_args_hex(job: JobSchema, values: FormValues, context: JobContext | None = None) -> str:
    """Like encode_job_args, rendered as 0x-prefixed hex for submission."""

    return to_hex(encode_job_args(job, values, context))
