"""Protocol definitions for avrflash adapters.

These protocols use typing.Protocol with @runtime_checkable so adapters can
be checked statically and with isinstance() at runtime.
"""

from .cargo_adapter_protocol import (
    BuildOutput,
    CargoAdapterProtocol,
    MetadataProviderProtocol,
)
from .programmer_adapter_protocol import ProgrammerAdapterProtocol, ProgrammerResult


__all__ = [
    "BuildOutput",
    "CargoAdapterProtocol",
    "MetadataProviderProtocol",
    "ProgrammerAdapterProtocol",
    "ProgrammerResult",
]
