"""Error taxonomy for the bridge.

Configuration errors subclass :class:`ValueError` so they read like any other
bad-argument error; runtime authentication failures do not.
"""


class BridgeError(Exception):
    """Base class for every error raised by adomcp."""


class UnknownDomainError(BridgeError, ValueError):
    """A requested domain is not part of the known registry."""

    def __init__(self, value: str, valid: list[str]) -> None:
        self.value = value
        self.valid = valid
        super().__init__(
            f"Unknown domain {value!r}. Valid options are: 'all', "
            + ", ".join(repr(v) for v in valid)
            + "."
        )


class MissingCredentialError(BridgeError, ValueError):
    """The selected strategy has no credential to work with."""


class AuthFailedError(BridgeError):
    """The identity mechanism failed to produce a token."""
