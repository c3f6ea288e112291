"""Validation rules, in the order the orchestrator runs them."""
from c4studio.validation.rules.ids import validate_ids
from c4studio.validation.rules.references import validate_references
from c4studio.validation.rules.hierarchy import validate_hierarchy
from c4studio.validation.rules.views_layout import validate_views_layout

__all__ = ["validate_ids", "validate_references", "validate_hierarchy", "validate_views_layout"]
