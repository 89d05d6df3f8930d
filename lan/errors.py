class LanError(Exception):
    pass


class StructuralError(LanError):
    """Raised when a ring cannot be built from the given nodes."""
    pass


class PreconditionViolation(LanError):
    """
    Raised when a protocol operation is called on a network that does not meet its contract.
    These point at caller misuse and are never handled inside the package.
    """


class InconsistentNetworkError(PreconditionViolation):
    """Raised when the ring fails one of its consistency checks."""

    def __init__(self, reason: str):
        super().__init__(f"Inconsistent network: {reason}")
        self.reason = reason


class UnknownWorkstationError(PreconditionViolation):
    """Raised when a print request comes from a name that is not a registered workstation."""

    def __init__(self, workstation: str):
        super().__init__(f"Unknown workstation: '{workstation}'")
        self.workstation = workstation
