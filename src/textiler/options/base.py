"""Base classes for textiler options.

Options are frozen dataclasses. A modified copy is made with
``create_updated`` instead of mutating an existing instance, so a single
options object can be shared between conversions.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the option values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def field_help(cls) -> dict[str, str]:
        """Return the ``help`` metadata of every field that declares one."""
        return {f.name: f.metadata["help"] for f in fields(cls) if "help" in f.metadata}
