"""Configuration for content stream walks."""

from __future__ import annotations

from dataclasses import dataclass

from .handlers import SUPPRESSED_OPERATIONS
from .operations import Operation

ERROR_POLICIES = ("raise", "skip")


@dataclass
class WalkerConfig:
    """Holds the settings shared by the walker and the CLI.

    ``on_error`` selects what happens when a single instruction fails to
    decode: ``"raise"`` stops the walk, ``"skip"`` logs the failure, records
    it in the summary and moves on to the next instruction. Backend failures
    always stop the walk.
    """

    on_error: str = "raise"
    suppressed: frozenset[type[Operation]] = SUPPRESSED_OPERATIONS

    def __post_init__(self) -> None:
        if self.on_error not in ERROR_POLICIES:
            raise ValueError(
                f"Unsupported error policy: {self.on_error!r} (expected one of {', '.join(ERROR_POLICIES)})"
            )
        suppressed = frozenset(self.suppressed)
        for item in suppressed:
            if not (isinstance(item, type) and issubclass(item, Operation)):
                raise ValueError(f"Suppressed entries must be operation types, got {item!r}")
        self.suppressed = suppressed
