from __future__ import annotations

import warnings
from typing import Optional


def deprecation_message(
    method_name: str, removal_version: str, alternative: Optional[str] = None
) -> str:
    message = (
        f"[DEPRECATION] `{method_name}` is deprecated and will be removed "
        f"in v{removal_version}."
    )
    if alternative:
        message += f" Use `{alternative}` instead."
    return message


def warn_deprecated(
    method_name: str, removal_version: str, alternative: Optional[str] = None
) -> None:
    """Emit a DeprecationWarning attributed to the caller of the deprecated function."""
    warnings.warn(
        deprecation_message(method_name, removal_version, alternative),
        DeprecationWarning,
        stacklevel=3,
    )


__all__ = ["deprecation_message", "warn_deprecated"]
