"""Exception type shared by the graph and data-structure modules."""


class GraphError(Exception):
    """Raised when a graph or container operation cannot be carried out."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message