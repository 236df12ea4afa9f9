"""Domain Types: enum members and wire values."""

from folio.core.domain_types import ProjectCategory, PublishStatus, ReorderDirection


def test_project_category_has_five_values():
    assert {c.value for c in ProjectCategory} == {
        "frontend", "backend", "fullstack", "mobile", "ai",
    }


def test_reorder_direction_values():
    assert ReorderDirection("up") is ReorderDirection.UP
    assert ReorderDirection("down") is ReorderDirection.DOWN


def test_publish_status_values():
    assert PublishStatus.PUBLISHED.value == "published"
    assert PublishStatus.DRAFT.value == "draft"
