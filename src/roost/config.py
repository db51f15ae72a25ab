"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(base_path="/home", strict=True)
    """

    # Path the navigator starts at
    base_path: str = "/"

    # Send every resolution diagnostic to the ``roost.router`` logger
    log_diagnostics: bool = True

    # Raise ConfigurationError for error-severity diagnostics instead of degrading
    strict: bool = False
