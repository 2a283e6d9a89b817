"""Authority objects consumed by the permission feature.

Pydantic models for the role bindings, roles and access reviews returned by
the RBAC authority. Models accept both the authority's camelCase wire names
(``roleRef``, ``apiGroups``) and snake_case field names, and treat ``null``
lists as empty.
"""

from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....config.constants import SubjectKinds


class AuthorityModel(BaseModel):
    """Base model with common configuration for authority payloads."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


def _none_to_empty(value):
    return [] if value is None else value


class Subject(AuthorityModel):
    """Principal referenced by a role binding."""

    kind: str
    name: str
    namespace: Optional[str] = None

    def designates(self, name: str, kind: str = SubjectKinds.USER) -> bool:
        """Check whether this subject is the principal ``name`` of the given ``kind``."""
        return self.kind == kind and self.name == name


class RoleRef(AuthorityModel):
    """Reference from a binding to the role it grants."""

    name: str
    kind: str = "ClusterRole"
    api_group: str = Field(default="rbac.authorization.k8s.io", alias="apiGroup")


class ClusterRoleBinding(AuthorityModel):
    """Grants a cluster role to a list of subjects."""

    name: Optional[str] = None
    subjects: List[Subject] = Field(default_factory=list)
    role_ref: RoleRef = Field(alias="roleRef")

    @field_validator("subjects", mode="before")
    @classmethod
    def validate_subjects(cls, v):
        """A binding without subjects is reported as null by the authority."""
        return _none_to_empty(v)


class PolicyRule(AuthorityModel):
    """A single (apiGroups, resources, verbs) grant inside a role."""

    api_groups: List[str] = Field(default_factory=list, alias="apiGroups")
    resources: List[str] = Field(default_factory=list)
    verbs: List[str] = Field(default_factory=list)

    @field_validator("api_groups", "resources", "verbs", mode="before")
    @classmethod
    def validate_lists(cls, v):
        return _none_to_empty(v)


class ClusterRole(AuthorityModel):
    """Named set of policy rules."""

    name: Optional[str] = None
    rules: List[PolicyRule] = Field(default_factory=list)

    @field_validator("rules", mode="before")
    @classmethod
    def validate_rules(cls, v):
        return _none_to_empty(v)


class AccessReviewStatus(AuthorityModel):
    """Outcome of a live self-review for one (resource, verb)."""

    allowed: bool
    reason: Optional[str] = None


M = TypeVar("M", bound=AuthorityModel)


def coerce(model: Type[M], value: Any) -> M:
    """Return ``value`` as an instance of ``model``.

    Accepts an instance of the model, a mapping decoded from the authority's
    JSON, or an object exposing the fields as attributes. Raises pydantic's
    ValidationError when the payload does not fit the model.
    """
    if isinstance(value, model):
        return value
    return model.model_validate(value)
