from jobwire.encoder import FullOverride, JobEncoder, SchemaDriven, encode_job_args, encode_job_args_hex
from jobwire.registries.local import FrozenJobRegistry, RegistryBuilder
from jobwire.types import ContextParam, FieldSchema, JobRegistry, JobSchema, WireType

__version__ = "0.1.0"

__all__ = [
    "ContextParam",
    "FieldSchema",
    "FrozenJobRegistry",
    "FullOverride",
    "JobEncoder",
    "JobRegistry",
    "JobSchema",
    "RegistryBuilder",
    "SchemaDriven",
    "WireType",
    "encode_job_args",
    "encode_job_args_hex",
]
