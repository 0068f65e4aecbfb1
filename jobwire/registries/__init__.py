from jobwire.registries.local import FrozenJobRegistry, RegistryBuilder, validate_schema

__all__ = ["FrozenJobRegistry", "RegistryBuilder", "validate_schema"]
