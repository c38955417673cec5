from fastapi import APIRouter, HTTPException, status

from fixturedesk.core import security
from fixturedesk.schemas import auth_schemas

router = APIRouter()

@router.post("/login", response_model=auth_schemas.Token)
def login_admin(request: auth_schemas.AdminLoginRequest):
    if not security.authenticate_admin(request.username, request.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = security.create_access_token(data={"sub": request.username, "role": security.ADMIN_ROLE})
    return {"access_token": access_token, "token_type": "bearer"}
