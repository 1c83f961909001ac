"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to register a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidPostSpecError(ValueError):
    """Raised when a partial post specification fails validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class UnknownQueryFlagError(KeyError):
    """Raised when a flag name is not one of the query's request-type flags."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown query flag '{self.name}'"


class InvalidQueryFlagError(TypeError):
    """Raised when a query flag is given a non-boolean value."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(
            f"Query flag '{name}' expects a bool, got {type(value).__name__}"
        )


class VirtualPageDefinitionError(Exception):
    """Raised when a virtual page definitions file cannot be used.

    Covers unreadable YAML as well as documents that do not match the
    expected structure.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")
