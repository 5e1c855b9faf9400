"""Exception hierarchy for fatal register generation failures."""

from __future__ import annotations


class SoupRegisterError(RuntimeError):
    """Base error for failures that abort a register run."""


class ManifestError(SoupRegisterError):
    """Raised when a manifest file cannot be read or parsed."""


class ConfigError(SoupRegisterError):
    """Raised when the run configuration is invalid."""


class RegisterWriteError(SoupRegisterError):
    """Raised when the register file cannot be written."""
