"""
    Inventory Service API

    This module implements a FastAPI-based microservice for tracking inventory items
    with full CRUD operations backed by a single MySQL table.

    Endpoints:
        GET /health: Liveness probe, verifies the database answers
        GET /items: List all items
        POST /items: Create a new item
        GET /items/{item_id}: Get a single item by ID
        PUT /items/{item_id}: Replace an existing item
        DELETE /items/{item_id}: Delete an item

    Attributes:
        app (FastAPI): The FastAPI application instance configured with the title "inventory-service"
"""
from contextlib import asynccontextmanager
from typing import List
import logging

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import crud, database, schemas
from .database import get_db
from .errors import register_exception_handlers

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Verify the database and create tables before serving requests.

    A failed connection check is fatal: the exception propagates and the
    server does not start.
    """
    logger.info(f"Connecting to database: {database.describe_target(database.engine)}")
    try:
        database.check_connection(database.engine)
    except Exception:
        logger.critical("Database connection failed")
        raise
    logger.info("Successfully connected to database")
    database.init_db(database.engine)
    try:
        yield
    finally:
        database.engine.dispose()


app = FastAPI(title="inventory-service", lifespan=lifespan)
register_exception_handlers(app)


@app.get(
    "/health",
    response_model=schemas.HealthStatus,
    responses={503: {"model": schemas.ErrorResponse}},
)
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint for the inventory service.

    Used by orchestrators (like Kubernetes) to verify that the process is up
    and its database connection is responsive.

    Returns:
        dict: {"status": "healthy"} when the database answers, otherwise a
        503 with {"error": "Database connection failed"}
    """
    if not database.ping(db):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Database connection failed"},
        )
    return {"status": "healthy"}


@app.get("/items", response_model=List[schemas.Item])
def list_items(db: Session = Depends(get_db)):
    """
    List all items.

    Returns:
        List of item objects ordered by ID, empty when there are none
    """
    return crud.get_items(db)


@app.post("/items", response_model=schemas.Item, status_code=status.HTTP_201_CREATED)
def create_item(item: schemas.ItemCreate, db: Session = Depends(get_db)):
    """
    Create a new item.

    Args:
        item: Item data to create
        db: Database session (injected)

    Returns:
        Created item object including its database-assigned ID
    """
    return crud.create_item(db=db, item=item)


@app.get("/items/{item_id}", response_model=schemas.Item)
def get_item(item_id: int, db: Session = Depends(get_db)):
    """
    Get a single item by ID.

    Raises:
        HTTPException: 404 if item not found
    """
    db_item = crud.get_item(db, item_id=item_id)
    if db_item is None:
        raise HTTPException(status_code=404, detail=ITEM_NOT_FOUND)
    return db_item


@app.put("/items/{item_id}", response_model=schemas.Item)
def update_item(item_id: int, item: schemas.ItemUpdate, db: Session = Depends(get_db)):
    """
    Replace an existing item.

    The ID always comes from the path; IDs are immutable once assigned.

    Args:
        item_id: ID of the item to update
        item: New name, quantity and price
        db: Database session (injected)

    Returns:
        The item as stored

    Raises:
        HTTPException: 404 if item not found
    """
    db_item = crud.update_item(db, item_id=item_id, item=item)
    if db_item is None:
        raise HTTPException(status_code=404, detail=ITEM_NOT_FOUND)
    return db_item


@app.delete(
    "/items/{item_id}",
    response_model=schemas.DeleteResult,
    responses={404: {"model": schemas.ErrorResponse}},
)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    """
    Delete an item.

    Returns:
        dict: {"result": "success"}

    Raises:
        HTTPException: 404 if item not found
    """
    if not crud.delete_item(db, item_id=item_id):
        raise HTTPException(status_code=404, detail=ITEM_NOT_FOUND)
    return {"result": "success"}
