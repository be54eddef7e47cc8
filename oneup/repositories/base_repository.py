"""
Base Repository class providing common CRUD operations.
Implements the Repository pattern for data access abstraction.
"""
from typing import TypeVar, Generic, Optional, List
from sqlalchemy.orm import Session
from ..extensions import db

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """Base repository providing common data operations.

    Repositories never commit; the caller's transaction boundary does.
    """

    def __init__(self, model_class: type[T], session: Optional[Session] = None):
        self.model_class = model_class
        self.session = session or db.session

    def create(self, **kwargs) -> T:
        """Create a new entity."""
        entity = self.model_class(**kwargs)
        self.session.add(entity)
        return entity

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get entity by ID."""
        return self.session.get(self.model_class, entity_id)

    def get_all(self) -> List[T]:
        """Get all entities ordered by ID."""
        return self.session.query(self.model_class).order_by(self.model_class.id.asc()).all()

    def save(self, entity: T) -> T:
        """Insert a new entity or fully replace the stored one with the same ID."""
        if getattr(entity, 'id', None) is None:
            self.session.add(entity)
        else:
            entity = self.session.merge(entity)
        self.session.flush()
        return entity

    def find_by(self, **kwargs) -> List[T]:
        """Find entities by arbitrary criteria."""
        query = self.session.query(self.model_class)
        for key, value in kwargs.items():
            if hasattr(self.model_class, key):
                if value is None:
                    query = query.filter(getattr(self.model_class, key).is_(None))
                else:
                    query = query.filter(getattr(self.model_class, key) == value)
        return query.all()

    def find_one_by(self, **kwargs) -> Optional[T]:
        """Find single entity by criteria."""
        results = self.find_by(**kwargs)
        return results[0] if results else None

    def delete(self, entity: T) -> None:
        """Delete entity."""
        self.session.delete(entity)

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        entity = self.get_by_id(entity_id)
        if entity:
            self.delete(entity)
            self.session.flush()
            return True
        return False

    def count(self, **kwargs) -> int:
        """Count entities matching criteria."""
        query = self.session.query(self.model_class)
        for key, value in kwargs.items():
            if hasattr(self.model_class, key):
                if value is None:
                    query = query.filter(getattr(self.model_class, key).is_(None))
                else:
                    query = query.filter(getattr(self.model_class, key) == value)
        return query.count()
