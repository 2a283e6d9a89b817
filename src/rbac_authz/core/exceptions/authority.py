"""Exceptions raised when the RBAC authority cannot answer.

Denial is never an exception: a principal that lacks a permission gets a
``False`` result. An AuthorityError means the answer is unknown.
"""

from typing import Any, Optional

from .base import RbacAuthzError


class AuthorityError(RbacAuthzError):
    """Raised when a call to the RBAC authority fails.

    Wraps transport, authorization, not-found and malformed-payload failures
    from the access reviewer, the role binding lister and the role getter.
    The original exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        principal: Optional[str] = None,
        resource: Optional[str] = None,
        verb: Optional[str] = None,
        role: Optional[str] = None,
        **extra: Any,
    ):
        details = {"operation": operation}
        for key, value in (("principal", principal), ("resource", resource), ("verb", verb), ("role", role)):
            if value is not None:
                details[key] = value
        details.update(extra)
        super().__init__(message, "AUTHORITY_ERROR", details)
        self.operation = operation
        self.principal = principal
        self.resource = resource
        self.verb = verb
        self.role = role
