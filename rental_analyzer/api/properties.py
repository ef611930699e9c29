"""
Property management API endpoints.

Stores property records keyed by an opaque id and runs the calculation
engine over them on request.
"""

import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from rental_analyzer.calculations import analysis
from rental_analyzer.calculations.record import PropertyRecord
from rental_analyzer.db.database import get_db
from rental_analyzer.db.models import Property

logger = logging.getLogger(__name__)

router = APIRouter()


class PropertyCreate(BaseModel):
    """Schema for creating a property."""

    name: str
    address: Optional[str] = None
    record: PropertyRecord


class PropertyUpdate(BaseModel):
    """Schema for updating a property."""

    name: Optional[str] = None
    address: Optional[str] = None
    record: Optional[PropertyRecord] = None


class PropertyResponse(BaseModel):
    """Schema for property response."""

    id: str
    name: str
    address: Optional[str]
    property_type: Optional[str]
    purchase_price: Optional[float]
    record: PropertyRecord
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PropertyListResponse(BaseModel):
    """Response for listing properties."""

    properties: List[PropertyResponse]
    total: int


def property_to_response(prop: Property) -> PropertyResponse:
    """Convert Property model to response schema."""
    return PropertyResponse(
        id=prop.id,
        name=prop.name,
        address=prop.address,
        property_type=prop.property_type,
        purchase_price=prop.purchase_price,
        record=load_record(prop),
        created_at=prop.created_at.isoformat() if prop.created_at else None,
        updated_at=prop.updated_at.isoformat() if prop.updated_at else None,
    )


def load_record(prop: Property) -> PropertyRecord:
    """Validate the stored JSON back into a PropertyRecord."""
    return PropertyRecord.model_validate(prop.record)


def apply_record(prop: Property, record: PropertyRecord) -> None:
    """Store a record and refresh the columns derived from it."""
    prop.record = record.model_dump(mode="json")
    prop.property_type = record.property_type.value
    prop.purchase_price = record.purchase_price


def get_property_or_404(db: Session, property_id: str) -> Property:
    """Fetch a live property or raise 404."""
    db_property = (
        db.query(Property)
        .filter(Property.id == property_id, Property.is_deleted == False)
        .first()
    )

    if not db_property:
        raise HTTPException(status_code=404, detail="Property not found")

    return db_property


@router.get("/", response_model=PropertyListResponse)
async def list_properties(
    skip: int = 0,
    limit: int = 100,
    property_type: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """List all properties with optional filtering."""
    query = db.query(Property).filter(Property.is_deleted == False)

    if property_type:
        query = query.filter(Property.property_type == property_type)

    total = query.count()
    properties = query.order_by(Property.created_at).offset(skip).limit(limit).all()

    return PropertyListResponse(
        properties=[property_to_response(p) for p in properties],
        total=total,
    )


@router.post("/", response_model=PropertyResponse, status_code=201)
async def create_property(
    property_data: PropertyCreate,
    db: Session = Depends(get_db),
):
    """Create a new property."""
    db_property = Property(name=property_data.name, address=property_data.address)
    apply_record(db_property, property_data.record)

    db.add(db_property)
    db.commit()
    db.refresh(db_property)

    logger.info("Created property %s (%s)", db_property.id, db_property.name)
    return property_to_response(db_property)


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    db: Session = Depends(get_db),
):
    """Get a property by ID."""
    return property_to_response(get_property_or_404(db, property_id))


@router.put("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: str,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
):
    """Update a property. Only provided fields change."""
    db_property = get_property_or_404(db, property_id)

    if property_data.name is not None:
        db_property.name = property_data.name
    if "address" in property_data.model_fields_set:
        db_property.address = property_data.address
    if property_data.record is not None:
        apply_record(db_property, property_data.record)

    db.commit()
    db.refresh(db_property)

    logger.info("Updated property %s", property_id)
    return property_to_response(db_property)


@router.delete("/{property_id}")
async def delete_property(
    property_id: str,
    db: Session = Depends(get_db),
):
    """Soft delete a property."""
    db_property = get_property_or_404(db, property_id)

    db_property.is_deleted = True
    db.commit()

    logger.info("Deleted property %s", property_id)
    return {"deleted": True, "id": property_id}


@router.post("/{property_id}/duplicate", response_model=PropertyResponse, status_code=201)
async def duplicate_property(
    property_id: str,
    db: Session = Depends(get_db),
):
    """Copy a property under a new id."""
    source = get_property_or_404(db, property_id)

    copy = Property(name=f"{source.name} (Copy)", address=source.address)
    apply_record(copy, load_record(source))

    db.add(copy)
    db.commit()
    db.refresh(copy)

    logger.info("Duplicated property %s as %s", property_id, copy.id)
    return property_to_response(copy)


@router.get("/{property_id}/analysis")
async def get_property_analysis(
    property_id: str,
    db: Session = Depends(get_db),
):
    """Analysis snapshot for a stored property."""
    record = load_record(get_property_or_404(db, property_id))
    return asdict(analysis.analyze_property(record))


@router.get("/{property_id}/projections")
async def get_property_projections(
    property_id: str,
    db: Session = Depends(get_db),
):
    """Year-by-year projections for a stored property."""
    record = load_record(get_property_or_404(db, property_id))
    return asdict(analysis.project_property(record))
