"""Domain layer: model graph, exceptions and ports."""
