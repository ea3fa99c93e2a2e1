"""
Configuration for the mutation engine.

A single `MutationConfig` is created once per process and carried inside the
`MutationContext`; nothing in the engine reads configuration from globals.
"""

from dataclasses import dataclass


@dataclass
class MutationConfig:
    """Configuration for conversion, reporting and history behavior."""

    max_listed_members: int = 10  # Names listed when a member is not found
    broadcast_scalar_vectors: bool = True  # "2" -> (2, 2, 2)
    log_fallbacks: bool = True  # Log a warning whenever a fallback is used
    history_size: int = 50  # Records kept by OperationHistory

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "MutationConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)


def create_mutation_config(
    config: MutationConfig | dict | None = None,
) -> MutationConfig:
    """
    Factory function for creating MutationConfig with flexible input types.

    Args:
        config: MutationConfig instance, dict to override defaults, or None for defaults

    Returns:
        MutationConfig instance
    """
    if isinstance(config, MutationConfig):
        return config
    elif isinstance(config, dict):
        return MutationConfig.from_dict(config)
    else:
        return MutationConfig()
