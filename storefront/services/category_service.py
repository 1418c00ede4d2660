from sqlalchemy.orm import Session
from typing import Any, Dict, Iterable, List, Optional
import logging

from storefront.models.category import Category
from storefront.models.product import Product

logger = logging.getLogger(__name__)

CATEGORY_FIELDS = ("id", "name", "description", "image", "parent_id")


def _as_node(row: Any) -> Dict[str, Any]:
    if isinstance(row, dict):
        node = {field: row.get(field) for field in CATEGORY_FIELDS}
    else:
        node = {field: getattr(row, field, None) for field in CATEGORY_FIELDS}
    node["children"] = []
    return node


def build_category_tree(rows: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Turn flat category rows into root nodes carrying nested ``children``.

    A row whose parent id matches no fetched row is left out of the result
    along with anything below it.
    """
    nodes: Dict[Any, Dict[str, Any]] = {}
    ordered: List[Dict[str, Any]] = []
    for row in rows:
        node = _as_node(row)
        nodes[node["id"]] = node
        ordered.append(node)

    for node in ordered:
        parent_id = node["parent_id"]
        if parent_id is None:
            continue
        parent = nodes.get(parent_id)
        if parent is None:
            logger.debug(
                f"Category {node['id']} dropped: parent {parent_id} not found"
            )
            continue
        parent["children"].append(node)

    return [node for node in ordered if node["parent_id"] is None]


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def get_hierarchy(self) -> List[Dict[str, Any]]:
        rows = self.db.query(Category).order_by(Category.id).all()
        return build_category_tree(rows)

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def get_category_products(self, category_id: int) -> List[Product]:
        return (
            self.db.query(Product)
            .filter(Product.categoryid == category_id)
            .order_by(Product.id)
            .all()
        )
