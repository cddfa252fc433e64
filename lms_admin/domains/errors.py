# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions raised by the domain services.

Constraint violations are not represented here: SQLAlchemy's
IntegrityError propagates from the services unchanged.
"""


class ServiceError(Exception):
    """Base exception for domain service errors."""

    pass


class EntityNotFoundError(ServiceError):
    """Raised when a referenced row does not exist.

    Parent lookups before an insert read "<Entity> with id <id> does not
    exist"; the target row of an update reads "... not found".

    Attributes:
        entity: Entity name, e.g. "Organization".
        entity_id: The id that was looked up.
    """

    def __init__(self, entity: str, entity_id: int, *, is_target: bool = False) -> None:
        self.entity = entity
        self.entity_id = entity_id
        suffix = "not found" if is_target else "does not exist"
        super().__init__(f"{entity} with id {entity_id} {suffix}")


class AlreadyEnrolledError(ServiceError):
    """Raised when a user already has an enrollment for the course."""

    def __init__(self, user_id: int, course_id: int) -> None:
        self.user_id = user_id
        self.course_id = course_id
        super().__init__(f"User {user_id} is already enrolled in course {course_id}")


class OrganizationMismatchError(ServiceError):
    """Raised when an organization role targets a user of another organization."""

    def __init__(self, user_id: int, organization_id: int) -> None:
        self.user_id = user_id
        self.organization_id = organization_id
        super().__init__(f"User {user_id} does not belong to organization {organization_id}")
