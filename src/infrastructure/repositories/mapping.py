"""Shared model-to-entity mapping helpers."""

from src.domain.entities import AuditInfo


def audit_from_model(model) -> AuditInfo:
    """Copy audit columns from an ORM row into an ``AuditInfo``."""
    return AuditInfo(
        created_at=model.created_at,
        created_by=model.created_by,
        updated_at=model.updated_at,
        updated_by=model.updated_by,
    )
