# app/services/bk/category_service.py
import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import not_found, conflict, domain_rule_violation
from ...models.tenant_specific.violation_category import ViolationCategory, DEFAULT_VIOLATION_CATEGORIES
from ...schemas.bk import ViolationCategoryCreate, ViolationCategoryUpdate
from ..base_service import BaseService
from .validation import require_text, validate_level, validate_category_point

logger = logging.getLogger(__name__)


class ViolationCategoryService(BaseService[ViolationCategory]):
    def __init__(self, db: AsyncSession):
        super().__init__(ViolationCategory, db)

    async def _ensure_unique_name(self, school_id: UUID, name: str, exclude_id: Optional[UUID] = None) -> None:
        stmt = select(ViolationCategory.id).where(
            ViolationCategory.school_id == school_id,
            func.lower(ViolationCategory.name) == name.lower()
        )
        if exclude_id is not None:
            stmt = stmt.where(ViolationCategory.id != exclude_id)
        if await self.scalar(stmt.limit(1)) is not None:
            raise conflict("CATEGORY_NAME_EXISTS", f"A category named '{name}' already exists")

    async def create_category(self, school_id: UUID, data: ViolationCategoryCreate) -> ViolationCategory:
        name = require_text(data.name, "name")
        default_point = validate_category_point(data.default_point)
        default_level = validate_level(data.default_level, field="default_level")
        await self._ensure_unique_name(school_id, name)

        category = await self.add(ViolationCategory(
            school_id=school_id,
            name=name,
            default_point=default_point,
            default_level=default_level.value,
            description=(data.description or "").strip() or None,
            is_active=True,
        ))
        logger.info(f"Violation category '{name}' created for school {school_id}")
        return category

    async def get_categories(self, school_id: UUID, active_only: bool = False) -> List[ViolationCategory]:
        stmt = select(ViolationCategory).where(ViolationCategory.school_id == school_id)
        if active_only:
            stmt = stmt.where(ViolationCategory.is_active == True)
        stmt = stmt.order_by(ViolationCategory.name.asc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_category(self, category_id: UUID, school_id: UUID) -> ViolationCategory:
        stmt = select(ViolationCategory).where(
            ViolationCategory.id == category_id,
            ViolationCategory.school_id == school_id
        )
        result = await self.db.execute(stmt)
        category = result.scalar_one_or_none()
        if not category:
            raise not_found("violation_category")
        return category

    async def update_category(self, category_id: UUID, school_id: UUID, data: ViolationCategoryUpdate) -> ViolationCategory:
        """Partial update. Deactivation leaves existing violations untouched."""
        category = await self.get_category(category_id, school_id)
        changes = {}

        if data.name is not None and data.name.strip():
            name = data.name.strip()
            await self._ensure_unique_name(school_id, name, exclude_id=category.id)
            changes["name"] = name
        if data.default_point is not None:
            changes["default_point"] = validate_category_point(data.default_point)
        if data.default_level is not None and data.default_level.strip():
            changes["default_level"] = validate_level(data.default_level, field="default_level").value
        if data.description is not None:
            changes["description"] = data.description.strip() or None
        if data.is_active is not None:
            changes["is_active"] = data.is_active

        if not changes:
            raise domain_rule_violation("No changes supplied")
        return await self.update(category, changes)

    async def delete_category(self, category_id: UUID, school_id: UUID) -> None:
        category = await self.get_category(category_id, school_id)
        await self.hard_delete(category)
        logger.info(f"Violation category {category_id} deleted")

    async def initialize_default_categories(self, school_id: UUID) -> int:
        """Seed the fixed category set once. Returns how many were created."""
        existing = await self.scalar(
            select(func.count(ViolationCategory.id)).where(ViolationCategory.school_id == school_id)
        )
        if existing:
            return 0

        for name, point, level, description in DEFAULT_VIOLATION_CATEGORIES:
            self.db.add(ViolationCategory(
                school_id=school_id,
                name=name,
                default_point=point,
                default_level=level.value,
                description=description,
                is_active=True,
            ))
        await self.db.commit()
        logger.info(f"Seeded {len(DEFAULT_VIOLATION_CATEGORIES)} default violation categories for school {school_id}")
        return len(DEFAULT_VIOLATION_CATEGORIES)
