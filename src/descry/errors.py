"""Descry exception hierarchy.

Shared across the collaborator models, the descriptor and the CLI so
every module raises and catches the same types.
"""


class DescryError(Exception):
    """Base for all descry-specific errors."""


class ConfigurationError(DescryError):
    """Raised when a route or container model is malformed.

    Typically surfaces when a route pattern is compiled.
    """


class NotDescribableError(DescryError):
    """Raised when a subject, callable or factory has no text rendering.

    Aborts the render in progress. Output already written stays written.
    """


class MissingOptionError(DescryError):
    """Raised when a describe operation needs an option that was not given."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f'An "{option}" option must be provided.')


class ServiceNotFoundError(DescryError, KeyError):
    """No definition, alias or instantiated service carries this id."""

    def __init__(self, service_id: str) -> None:
        self.service_id = service_id
        super().__init__(f"You have requested a non-existent service {service_id!r}.")

    def __str__(self) -> str:
        return self.args[0]


class ParameterNotFoundError(DescryError, KeyError):
    """The container parameter bag has no such name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"You have requested a non-existent parameter {name!r}.")

    def __str__(self) -> str:
        return self.args[0]
