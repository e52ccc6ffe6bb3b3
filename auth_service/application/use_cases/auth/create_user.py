# Standard library imports
import logging
from typing import Union

# Local application imports
from ....domain.repositories.auth_repository import AuthRepository
from ....domain.services.auth_service import AuthService
from ....domain.models.product_user import ProductUser
from ....domain.models.user_profile import UserProfile
from ....domain.models.value_objects import (
    UserEmail,
    UserName,
    UserNationalId,
    UserPassword,
    UserPhoneNumber,
)
from ....domain.constants import TokenClaims
from ....domain.result import Either, Left, Right
from ...dto.auth_dto import CreateUserRequest, CreateUserResponse
from ...errors import UnexpectedError
from .create_user_errors import EmailAlreadyExist, ValuePropsError

logger = logging.getLogger(__name__)

USER_CREATED_MESSAGE = "User created successfully"

CreateUserError = Union[ValuePropsError, EmailAlreadyExist, UnexpectedError]


class CreateUserUseCase:
    """Use case for registering a new user and issuing their first token"""
    
    def __init__(self, auth_repository: AuthRepository, auth_service: AuthService) -> None:
        self.auth_repository = auth_repository
        self.auth_service = auth_service
    
    async def execute(
        self, request: CreateUserRequest
    ) -> Either[CreateUserError, CreateUserResponse]:
        """
        Register a new user
        
        Args:
            request: Registration request with credentials and profile details
            
        Returns:
            Right(CreateUserResponse) with the signed token on success,
            Left(ValuePropsError | EmailAlreadyExist | UnexpectedError) otherwise.
            Never raises.
        """
        user_result = ProductUser.create(
            email=UserEmail.create(request.email),
            password=UserPassword.create(request.password, hashed=False),
        )
        if user_result.is_failure:
            logger.debug(f"Registration rejected, invalid credentials: {user_result.error}")
            return Left(ValuePropsError(user_result))
        
        profile_result = UserProfile.create(
            email=UserEmail.create(request.email),
            first_name=UserName.create(request.first_name, label="First name"),
            last_name=UserName.create(request.last_name, label="Last name"),
            phone=UserPhoneNumber.create(request.phone),
            national_id=UserNationalId.create(request.national_id),
            location=request.location,
            avatar="",
        )
        if profile_result.is_failure:
            logger.debug(f"Registration rejected, invalid profile: {profile_result.error}")
            return Left(ValuePropsError(profile_result))
        
        user: ProductUser = user_result.get_value()
        profile: UserProfile = profile_result.get_value()
        saved = False
        
        try:
            if await self.auth_repository.exists(request.email):
                logger.info(f"Registration rejected, email already registered: {request.email}")
                return Left(EmailAlreadyExist(request.email))
            
            user.user_created(profile)
            await self.auth_repository.save_user(user)
            saved = True
            
            token = await self.auth_service.sign_jwt({
                TokenClaims.EMAIL: user.email.value,
                TokenClaims.USER_ID: user.id,
            })
        except Exception as e:
            if saved:
                # No compensating delete: the user stays registered without a token
                logger.error(
                    f"User {user.id} was saved but token issuance failed: {e}",
                    exc_info=True
                )
            else:
                logger.error(f"Unexpected error registering {request.email}: {e}", exc_info=True)
            return Left(UnexpectedError(e))
        
        logger.info(f"Registered user {user.id}")
        return Right(CreateUserResponse(token=token, message=USER_CREATED_MESSAGE))
