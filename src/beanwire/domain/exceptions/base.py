"""Base exceptions for beanwire domain."""


class BeanwireError(Exception):
    """Root exception for all beanwire errors.

    All domain exceptions inherit from this.
    Allows catching all beanwire-specific errors.
    """


class MissingClassFactsError(BeanwireError, TypeError):
    """Class facts were not supplied at all.

    Programmer error, not a data-quality issue: the only fault
    allowed to escape a detection entry point.
    Inherits TypeError for semantic correctness (expected ClassFacts, got None).

    Attributes:
        operation: Entry point that received no class facts
    """

    def __init__(self, operation: str) -> None:
        """Initialize with the name of the failing entry point."""
        self.operation = operation
        super().__init__(f"{operation}: class facts must not be None")
