"""Application services."""

from globcrm.application.services.merge_field_service import MergeFieldService

__all__ = ["MergeFieldService"]
