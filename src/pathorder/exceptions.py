"""Exception hierarchy for pathorder."""


class PathOrderError(Exception):
    """Base exception for all pathorder errors."""

    pass


class ContractViolationError(PathOrderError):
    """The caller broke the optimizer's usage contract.

    These indicate a bug in the calling pipeline, not a data condition, and
    are raised immediately at the offending call.
    """

    pass


class EmptyFeatureError(ContractViolationError):
    """A contour or line without vertices was added."""

    def __init__(self, kind: str, index: int) -> None:
        self.kind = kind
        self.index = index
        super().__init__(f"Cannot add empty {kind} at index {index}: at least one vertex is required")


class OptimizerStateError(ContractViolationError):
    """Optimizer used out of sequence (add after optimize, optimize twice)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid optimizer state: {reason}")


class ResultNotReadyError(ContractViolationError):
    """Optimizer output read before optimize() completed."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"'{attribute}' is not available until optimize() has been called")


class GeometryError(PathOrderError):
    """Invalid input to a geometric collaborator."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class LayerFileError(PathOrderError):
    """Error reading or validating a layer file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read layer file '{path}': {reason}")
