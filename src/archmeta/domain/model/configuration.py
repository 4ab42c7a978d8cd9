"""Augmentation configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AugmentationConfig:
    """Configuration of the service stereotype capabilities.

    Immutable configuration object with FAIL-FIRST validation.
    All fields have defaults matching the generated service layer.

    Attributes:
        service_stereotype: Stereotype of classes receiving service capabilities
        dao_stereotype: Stereotype classified as data access dependency
        external_access_tag: Tag that can switch external access off
        validation_namespace: Identifier prefixing generated rules
        mock_seed: Seed of the default type catalog's mock generators
    """

    service_stereotype: str = "Service"
    dao_stereotype: str = "Entity"
    external_access_tag: str = "externalAccess"
    validation_namespace: str = "Joi"
    mock_seed: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.service_stereotype:
            raise ValueError("service_stereotype must not be empty")

        if not self.dao_stereotype:
            raise ValueError("dao_stereotype must not be empty")

        if self.service_stereotype == self.dao_stereotype:
            raise ValueError(
                f"service and dao stereotypes must differ, both are {self.service_stereotype!r}"
            )

        if not self.external_access_tag:
            raise ValueError("external_access_tag must not be empty")

        if not self.validation_namespace.isidentifier():
            raise ValueError(
                f"validation_namespace must be an identifier, got {self.validation_namespace!r}"
            )

        if self.mock_seed < 0:
            raise ValueError(f"mock_seed must be >= 0, got {self.mock_seed}")
