# /studyhub/routers/todos_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List, Optional

from ..models import planner_model
from ..services import todo_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- TO-DO COLLECTION ENDPOINTS (/api/todos) ---

@router.get("", response_model=List[planner_model.TodoRecord], summary="List To-Do Items")
def list_todos(
    is_completed: Optional[bool] = None,
    priority: Optional[planner_model.TodoPriority] = None,
    category: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    user_id: str = Depends(get_current_user_id),
):
    return todo_service.list_todos(user_id=user_id, db=db, is_completed=is_completed, priority=priority, category=category)

@router.post("", response_model=planner_model.TodoRecord, status_code=status.HTTP_201_CREATED, summary="Create a To-Do Item")
def create_todo(todo_create: planner_model.TodoCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return todo_service.create_todo(todo_data=todo_create, db=db, user_id=user_id)

# --- INDIVIDUAL TO-DO ENDPOINTS (/api/todos/{todo_id}) ---

@router.put("/{todo_id}", response_model=planner_model.TodoRecord, summary="Update a To-Do Item")
def update_todo(todo_id: str, todo_update: planner_model.TodoUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        updated = todo_service.update_todo(todo_id=todo_id, todo_update=todo_update, db=db, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"To-do with ID {todo_id} not found")
    return updated

@router.post("/{todo_id}/toggle-complete", response_model=planner_model.TodoRecord, summary="Check or Uncheck a To-Do Item")
def toggle_todo_complete(todo_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    updated = todo_service.toggle_complete(todo_id=todo_id, db=db, user_id=user_id)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"To-do with ID {todo_id} not found")
    return updated

@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a To-Do Item")
def delete_todo(todo_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    if not todo_service.delete_todo(todo_id=todo_id, db=db, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"To-do with ID {todo_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
