"""
CRUD (Create, Read, Update, Delete) operations for the Inventory service.

Each function issues a single SQL statement against the items table.
"""
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from . import models, schemas

logger = logging.getLogger(__name__)


def get_item(db: Session, item_id: int) -> Optional[models.Item]:
    """
    Retrieve a single item by ID.

    Args:
        db: Database session
        item_id: ID of the item to retrieve

    Returns:
        Item object or None if not found
    """
    return db.query(models.Item).filter(models.Item.id == item_id).first()


def get_items(db: Session) -> List[models.Item]:
    """
    Retrieve every item, ordered by ID.

    Args:
        db: Database session

    Returns:
        List of Item objects (empty when the table is empty)
    """
    return db.query(models.Item).order_by(models.Item.id).all()


def create_item(db: Session, item: schemas.ItemCreate) -> models.Item:
    """
    Insert a new item. The database assigns its ID.

    Args:
        db: Database session
        item: Item data to create

    Returns:
        Created Item object with its ID populated
    """
    db_item = models.Item(name=item.name, quantity=item.quantity, price=item.price)
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    logger.info(f"Created item #{db_item.id} '{db_item.name}'")
    return db_item


def update_item(db: Session, item_id: int, item: schemas.ItemUpdate) -> Optional[models.Item]:
    """
    Replace every mutable column of an existing item.

    Args:
        db: Database session
        item_id: ID of the item to update
        item: New values for name, quantity and price

    Returns:
        The updated Item as stored, or None if the item does not exist
    """
    matched = (
        db.query(models.Item)
        .filter(models.Item.id == item_id)
        .update(
            {
                models.Item.name: item.name,
                models.Item.quantity: item.quantity,
                models.Item.price: item.price,
            },
            synchronize_session=False,
        )
    )
    db.commit()
    if not matched:
        return None
    logger.info(f"Updated item #{item_id}")
    return get_item(db, item_id)


def delete_item(db: Session, item_id: int) -> bool:
    """
    Delete an item from the database.

    Args:
        db: Database session
        item_id: ID of the item to delete

    Returns:
        True if item was deleted, False if not found
    """
    deleted = (
        db.query(models.Item)
        .filter(models.Item.id == item_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info(f"Deleted item #{item_id}")
    return deleted > 0
