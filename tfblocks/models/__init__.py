from .blocks import Block
from .registry import ANONYMOUS_TYPE, AnonymousEntry, NamedEntry, Registry, RegistryEntry

__all__ = ["Block", "ANONYMOUS_TYPE", "AnonymousEntry", "NamedEntry", "Registry", "RegistryEntry"]
