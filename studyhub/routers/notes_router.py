# /studyhub/routers/notes_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List, Optional

from ..models import planner_model
from ..services import note_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- NOTE COLLECTION ENDPOINTS (/api/notes) ---

@router.get("", response_model=List[planner_model.NoteRecord], summary="List Lecture Notes")
def list_notes(
    class_id: Optional[str] = None,
    search: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    user_id: str = Depends(get_current_user_id),
):
    return note_service.list_notes(user_id=user_id, db=db, class_id=class_id, search=search)

@router.post("", response_model=planner_model.NoteRecord, status_code=status.HTTP_201_CREATED, summary="Write a Lecture Note")
def create_note(note_create: planner_model.NoteCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return note_service.create_note(note_data=note_create, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

# --- INDIVIDUAL NOTE ENDPOINTS (/api/notes/{note_id}) ---

@router.get("/{note_id}", response_model=planner_model.NoteRecord, summary="Get a Single Note")
def get_note(note_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    note = note_service.get_note(note_id=note_id, user_id=user_id, db=db)
    if note is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Note with ID {note_id} not found")
    return note

@router.put("/{note_id}", response_model=planner_model.NoteRecord, summary="Update a Note")
def update_note(note_id: str, note_update: planner_model.NoteUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        updated = note_service.update_note(note_id=note_id, note_update=note_update, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Note with ID {note_id} not found")
    return updated

@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Note")
def delete_note(note_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    if not note_service.delete_note(note_id=note_id, db=db, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Note with ID {note_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
