"""pass_audit — mnemonic password generator and strength checker."""

__all__ = [
    "__version__",
    "check",
    "edit",
    "generate",
    "variations",
    "validate_instance",
    "AuditConfig",
    "InputValidationError",
    "PasswordStyle",
]
__version__ = "0.1.0"

# Programmatic entrypoints, see pass_audit.api.
from pass_audit.api import (  # noqa: E402, F401
    check,
    edit,
    generate,
    variations,
    validate_instance,
)
from pass_audit.core.config import AuditConfig  # noqa: E402, F401
from pass_audit.model import PasswordStyle  # noqa: E402, F401
from pass_audit.model.facts import InputValidationError  # noqa: E402, F401
