"""Category management utilities."""

import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from config import DEFAULT_CATEGORIES
from core.exceptions import CategoryNotFoundError
from models.category import CategoryModel

logger = logging.getLogger(__name__)


class CategoryManager:
    """Manages blog post categories."""

    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> List[CategoryModel]:
        return self.db.query(CategoryModel).order_by(CategoryModel.name).all()

    def get_category(self, category_id: int) -> CategoryModel:
        model = (
            self.db.query(CategoryModel)
            .filter(CategoryModel.category_id == category_id)
            .first()
        )
        if not model:
            raise CategoryNotFoundError(category_id)
        return model

    def ensure_default_categories(self, names: Iterable[str] = DEFAULT_CATEGORIES) -> None:
        """Seed the default categories when the table is empty."""
        if self.db.query(CategoryModel).first():
            return
        names = list(names)
        self.db.add_all([CategoryModel(name=name) for name in names])
        self.db.commit()
        logger.info("Seeded %d categories", len(names))
