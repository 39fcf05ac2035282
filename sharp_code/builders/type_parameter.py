"""
Builder for generic type parameters.
"""

from __future__ import annotations

from ..errors import MissingBuilderSettingError
from ..nodes import TypeParameter
from .base import collect_names, is_blank, require_not_blank, require_not_none


class TypeParameterBuilder:
    """Builds a type parameter such as ``TKey`` together with its constraints.

    Constraints are free-form: a base type, an interface or one of the
    ``TypeParameterConstraint`` keywords. Duplicates are kept as given.
    """

    def __init__(self, name: str | None = None, constraints: list[str] | None = None):
        self._name = name
        self._constraints: list[str] = list(constraints or [])

    @property
    def name(self) -> str | None:
        return self._name

    def with_name(self, name: str) -> TypeParameterBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_constraint(self, constraint: str) -> TypeParameterBuilder:
        self._constraints.append(require_not_blank(constraint, "constraint"))
        return self

    def with_constraints(self, *constraints: str) -> TypeParameterBuilder:
        self._constraints.extend(collect_names(constraints, "constraints"))
        return self

    def build(self) -> TypeParameter:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the type parameter is required when building a type parameter.")
        return TypeParameter(name=self._name, constraints=list(self._constraints))


def build_type_parameters(builders: list[TypeParameterBuilder]) -> list[TypeParameter]:
    return [builder.build() for builder in builders]
