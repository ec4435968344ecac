from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.user import UserOut
from app.services.user_service import list_users, to_user_out

router = APIRouter(prefix='/users', tags=['users'])


@router.get('', response_model=list[UserOut])
def list_users_endpoint(session: Session = Depends(get_session)) -> list[UserOut]:
    return [to_user_out(user) for user in list_users(session)]
