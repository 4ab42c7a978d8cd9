"""Dependency classifier.

Classifies the far ends of a class's outgoing dependencies by
stereotype. The one traversal every role-specific alias routes through.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archmeta.domain.model.enums import TargetKind

if TYPE_CHECKING:
    from archmeta.domain.model.class_ import Class
    from archmeta.domain.model.model import Model

logger = logging.getLogger(__name__)


def get_dependent_classes(cls: Class, stereotype_name: str, model: Model) -> tuple[Class, ...]:
    """Classes ``cls`` depends on that carry a stereotype.

    Keeps declaration order and duplicate edges. Primitive ends are
    ignored. Malformed edges (unknown kind, or an object end whose
    class is not in the model) are skipped so partial results survive.

    Args:
        cls: Class whose dependencies are traversed
        stereotype_name: Stereotype the target class must carry
        model: Model resolving dependency back-references

    Returns:
        Target classes in declaration order, duplicates included
    """
    found: list[Class] = []
    for index, dependency in enumerate(cls.dependencies):
        target = dependency.target
        if target.kind is TargetKind.PRIMITIVE:
            continue
        if target.kind is not TargetKind.OBJECT or target.class_id is None:
            logger.debug(
                "%s: skipping malformed dependency #%d (%s)", cls.name, index, target.kind.name
            )
            continue

        target_class = model.get_class(target.class_id)
        if target_class is None:
            logger.debug(
                "%s: skipping dependency #%d to unknown class %r", cls.name, index, target.class_id
            )
            continue

        if target_class.stereotype_name == stereotype_name:
            found.append(target_class)
    return tuple(found)
