"""Job schema types.

Contains FieldSchema, ContextParam and JobSchema: the declarative
description of one callable job and of how its form values map onto
the job's ABI parameter list.

Field order is the wire order. Reordering, inserting or removing an
encoded field changes the encoding and must be coordinated with the
owner of the remote decoder.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from jobwire.abi import AbiParam
from jobwire.types.wire_type import WireType

if TYPE_CHECKING:
    from jobwire.encoder import FullOverride, JobEncoder


class JobCategory(StrEnum):
    """Groups jobs for display"""

    LIFECYCLE = "lifecycle"
    EXECUTION = "execution"
    BATCH = "batch"
    WORKFLOW = "workflow"
    SSH = "ssh"
    MANAGEMENT = "management"


class FieldKind(StrEnum):
    """The form control used to edit a field"""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SELECT = "select"
    COMBOBOX = "combobox"
    JSON = "json"


@dataclass(frozen=True)
class SelectOption:
    """One choice offered by a select or combobox field."""

    label: str
    value: str


@dataclass(frozen=True)
class FieldSchema:
    """One form input, optionally mapped to an ABI parameter."""

    # Key used to read the value from the form values
    name: str
    # Form control
    kind: FieldKind = FieldKind.TEXT
    # Human-readable label; defaults to the capitalised name
    label: str = ""
    # ABI type tag. None marks a form-only field that is never encoded.
    wire_type: WireType | str | None = None
    # ABI parameter name, when it differs from the form name
    wire_name: str | None = None
    # Encoded, but never shown in a form
    internal: bool = False
    # Must be filled in before submission
    required: bool = False
    # Initial form value
    default_value: Any = None

    placeholder: str | None = None
    helper_text: str | None = None
    options: tuple[SelectOption, ...] = ()
    minimum: int | None = None
    maximum: int | None = None
    step: int | None = None

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.name[:1].upper() + self.name[1:])
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def encoded_name(self) -> str:
        """The ABI parameter name this field encodes under."""
        return self.wire_name or self.name

    @property
    def is_encoded(self) -> bool:
        return self.wire_type is not None


@dataclass(frozen=True)
class ContextParam:
    """An ABI parameter supplied by the calling environment
    (a sidecar URL, a sandbox id) rather than by the form."""

    wire_name: str
    wire_type: WireType | str


@dataclass(frozen=True)
class JobSchema:
    """Describes one job: its identity, its form fields, and how to encode them.

    Context params are always encoded first, in declared order, followed by
    every field that has a wire type. A custom encoder replaces that whole
    layout for jobs the flat parameter list cannot express.
    """

    # Numeric job id, unique within a blueprint
    id: int
    # Stable machine identifier
    name: str
    label: str = ""
    description: str = ""
    category: JobCategory = JobCategory.EXECUTION
    fields: tuple[FieldSchema, ...] = ()
    context_params: tuple[ContextParam, ...] = ()
    custom_encoder: "FullOverride | None" = None

    # Whether the job targets an existing sandbox
    requires_sandbox: bool = False
    # Multiple of the base rate charged for this job
    pricing_multiplier: int = 1
    # Shown before submission
    warning: str | None = None
    icon: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.name)
        if isinstance(self.fields, Sequence) and not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        if isinstance(self.context_params, Sequence) and not isinstance(self.context_params, tuple):
            object.__setattr__(self, "context_params", tuple(self.context_params))

    @property
    def encoder(self) -> "JobEncoder":
        """The encoding strategy for this job."""

        from jobwire.encoder import SchemaDriven

        if self.custom_encoder is not None:
            return self.custom_encoder

        return SchemaDriven(self.context_params, self.fields)

    @property
    def encoded_fields(self) -> tuple[FieldSchema, ...]:
        return tuple(fld for fld in self.fields if fld.is_encoded)

    @property
    def form_fields(self) -> tuple[FieldSchema, ...]:
        """Fields a form should render."""
        return tuple(fld for fld in self.fields if not fld.internal)

    def wire_layout(self) -> tuple[AbiParam, ...]:
        """The declarative ABI parameter list: context params, then encoded fields.

        Jobs with a custom encoder may encode a different layout.
        """

        context = [AbiParam(name=param.wire_name, type=str(param.wire_type)) for param in self.context_params]
        fields = [AbiParam(name=fld.encoded_name, type=str(fld.wire_type)) for fld in self.encoded_fields]

        return tuple(context + fields)

    def get_field(self, name: str) -> FieldSchema | None:
        """Get a field by its form name."""

        for fld in self.fields:
            if fld.name == name:
                return fld
        return None
