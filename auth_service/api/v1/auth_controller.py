# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    CreateUserRequest,
    CreateUserResponse,
    UserLoginRequest,
    TokenResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.errors import UseCaseError
from ...application.use_cases.auth.create_user import CreateUserUseCase
from ...application.use_cases.auth.create_user_errors import EmailAlreadyExist, ValuePropsError
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["authentication"])


def _status_for(error: UseCaseError) -> int:
    if isinstance(error, ValuePropsError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, EmailAlreadyExist):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.post("/register", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: CreateUserRequest) -> CreateUserResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        CreateUserResponse with the access token
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    result = await create_user_use_case.execute(request)
    if result.is_left():
        error: UseCaseError = result.value
        raise HTTPException(
            status_code=_status_for(error),
            detail=error.message
        )
    return result.value


@router.post("/login", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token
    
    Args:
        request: User login request
        
    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    token_response = await login_use_case.execute(request)
    if token_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return token_response


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Get current authenticated user information"""
    return current_user
