"""Team member endpoints"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.database import fits_id_column, get_db
from taskboard.models import Member
from taskboard.schemas import MemberCreate, MemberResponse, MemberUpdate

router = APIRouter()


def get_member_or_404(member_id: int, db: Session) -> Member:
    member = None
    if fits_id_column(member_id):
        member = db.query(Member).filter(Member.id == member_id).first()
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return member


def _ensure_email_available(email: str, db: Session, exclude_id: Optional[int] = None) -> None:
    query = db.query(Member).filter(Member.email == email)
    if exclude_id is not None:
        query = query.filter(Member.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")


@router.get("", response_model=List[MemberResponse])
def list_members(db: Session = Depends(get_db)):
    return db.query(Member).order_by(Member.name.asc(), Member.id.asc()).all()


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(member_data: MemberCreate, db: Session = Depends(get_db)):
    _ensure_email_available(member_data.email, db)
    member = Member(**member_data.model_dump())
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


@router.put("/{member_id}", response_model=MemberResponse)
def update_member(member_id: int, member_update: MemberUpdate, db: Session = Depends(get_db)):
    member = get_member_or_404(member_id, db)

    update_data = member_update.model_dump(exclude_unset=True)
    if update_data.get("email"):
        _ensure_email_available(update_data["email"], db, exclude_id=member.id)

    for field, value in update_data.items():
        if value is None and field != "avatar_url":
            continue
        setattr(member, field, value)

    db.commit()
    db.refresh(member)
    return member


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_member(member_id: int, db: Session = Depends(get_db)):
    member = get_member_or_404(member_id, db)
    db.delete(member)
    db.commit()
