from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from trustytypes.models.ecosystem import Ecosystem


class Dependency(BaseModel):
    """
    A single package dependency.

    Codes outside `Ecosystem` are kept as plain ints.
    """
    name: str
    version: str
    ecosystem: Ecosystem | int = Field(union_mode='left_to_right')

    model_config = ConfigDict(frozen=True, extra='ignore')

    @field_validator('ecosystem', mode='before')
    @classmethod
    def parse_ecosystem(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = int(v) if v.isdigit() else Ecosystem.from_string(v)
        if isinstance(v, int) and not isinstance(v, Ecosystem):
            try:
                return Ecosystem(v)
            except ValueError:
                return v
        return v


def deps_to_map(dependencies: Iterable[Dependency]) -> dict[str, str]:
    """
    Convert dependencies to a name -> version mapping for comparison.

    When a name appears more than once the last version wins.
    """
    dep_map: dict[str, str] = {}
    for dep in dependencies:
        dep_map[dep.name] = dep.version
    return dep_map


def diff_dependencies(
    old_deps: Mapping[str, str],
    new_deps: Mapping[str, str],
) -> dict[str, str]:
    """
    Return the entries of `new_deps` whose names are not in `old_deps`.

    Only additions are reported: a name present in both mappings is left
    out even if its version changed, and removed names never show up.
    """
    return {
        name: version
        for name, version in new_deps.items()
        if name not in old_deps
    }
