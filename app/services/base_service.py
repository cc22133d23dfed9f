# app/services/base_service.py
"""Base service with common CRUD operations."""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import Type, Any, Dict, Optional, TypeVar, Generic

# Define generic type
T = TypeVar('T')

class BaseService(Generic[T]):
    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def get(self, id: Any, reload: bool = False) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        if reload:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, obj: T) -> T:
        """Persist an already-built instance and reload it with its relations"""
        self.db.add(obj)
        await self.db.commit()
        return await self.get(obj.id, reload=True)

    async def create(self, obj_in: Dict) -> T:
        return await self.add(self.model(**obj_in))

    async def update(self, obj: T, obj_in: Dict) -> T:
        for key, value in obj_in.items():
            setattr(obj, key, value)
        await self.db.commit()
        return await self.get(obj.id, reload=True)

    async def hard_delete(self, obj: T) -> None:
        """Permanently delete record from database"""
        await self.db.delete(obj)
        await self.db.commit()

    async def scalar(self, stmt) -> Any:
        result = await self.db.execute(stmt)
        return result.scalar()

    async def count(self, stmt) -> int:
        """Count rows of an arbitrary select"""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        return await self.scalar(count_stmt) or 0
