"""Type-system collaborator exceptions."""

from archmeta.domain.exceptions.base import ArchMetaError


class MissingCollaboratorError(ArchMetaError, LookupError):
    """Parameter type cannot be resolved by the type system.

    Never defaulted: emitting a wrong validation rule is worse than
    stopping the pass.

    Attributes:
        class_name: Owning class
        operation_name: Owning operation
        parameter_name: Parameter whose type is unresolved
        type_name: Unresolved type name
    """

    def __init__(
        self,
        class_name: str,
        operation_name: str,
        parameter_name: str,
        type_name: str,
    ) -> None:
        if not parameter_name:
            raise ValueError("parameter_name must not be empty")

        self.class_name = class_name
        self.operation_name = operation_name
        self.parameter_name = parameter_name
        self.type_name = type_name
        super().__init__(
            f"No type descriptor for '{type_name}' "
            f"(parameter {class_name}.{operation_name}.{parameter_name})"
        )
