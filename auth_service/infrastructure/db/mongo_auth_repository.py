# Standard library imports
import asyncio
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...domain.repositories.auth_repository import AuthRepository
from ...domain.models.product_user import ProductUser
from ...domain.models.user_profile import UserProfile
from ...domain.models.value_objects import (
    UserEmail,
    UserName,
    UserNationalId,
    UserPassword,
    UserPhoneNumber,
)
from ...domain.constants import UserFields, ProfileFields
from ...core.security import hash_password
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class MongoAuthRepository(AuthRepository):
    """MongoDB implementation of AuthRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def ensure_indexes(self) -> None:
        """Create the unique email index backing duplicate registration checks"""
        await self.user_collection.create_index(
            [(UserFields.EMAIL, ASCENDING)],
            unique=True,
            name="uniq_email",
        )
        logger.info("Ensured unique email index on users collection")
    
    async def exists(self, email: str) -> bool:
        """
        Check whether a user with this email is already stored
        
        Args:
            email: Email address as supplied by the caller
            
        Returns:
            True if a user document with the normalized email exists
        """
        if not email:
            return False
        
        try:
            count = await self.user_collection.count_documents(
                {UserFields.EMAIL: _normalize_email(email)},
                limit=1,
            )
        except Exception as e:
            raise RuntimeError(f"Error checking user existence: {str(e)}") from e
        return count > 0
    
    async def save_user(self, user: ProductUser) -> None:
        """
        Save user (create new or replace existing) keyed by user ID
        
        Args:
            user: ProductUser aggregate, with its profile linked
        """
        if not user:
            raise ValueError("User cannot be None")
        
        password = user.password
        if password.hashed:
            hashed_password = password.value
        else:
            # Hashing runs in a worker thread
            hashed_password = await asyncio.to_thread(hash_password, password.value)
        
        document = self._user_to_dict(user, hashed_password)
        try:
            await self.user_collection.replace_one(
                {UserFields.MONGO_ID: user.id},
                document,
                upsert=True,
            )
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}") from e
    
    async def find_by_email(self, email: str) -> Optional[ProductUser]:
        """
        Find user by email address
        
        Returns:
            ProductUser if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: _normalize_email(email)})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[ProductUser]:
        """
        Find user by ID
        
        Returns:
            ProductUser if found, None otherwise
        """
        if not user_id:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: user_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)
    
    def _user_to_dict(self, user: ProductUser, hashed_password: str) -> dict:
        """
        Convert ProductUser aggregate to MongoDB document.
        Only the hashed password is ever stored.
        """
        user_dict = {
            UserFields.MONGO_ID: user.id,
            UserFields.EMAIL: user.email.value,
            UserFields.HASHED_PASSWORD: hashed_password,
            UserFields.PROFILE: None,
        }
        
        profile = user.profile
        if profile is not None:
            user_dict[UserFields.PROFILE] = {
                ProfileFields.FIRST_NAME: profile.first_name.value,
                ProfileFields.LAST_NAME: profile.last_name.value,
                ProfileFields.PHONE: profile.phone.value,
                ProfileFields.NATIONAL_ID: profile.national_id.value,
                ProfileFields.LOCATION: profile.location,
                ProfileFields.AVATAR: profile.avatar,
            }
        
        return user_dict
    
    def _document_to_user(self, document: dict) -> ProductUser:
        """
        Convert MongoDB document to ProductUser aggregate
        
        Raises:
            ValueError: If the document is missing fields or holds invalid values
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        email = UserEmail(document.get(UserFields.EMAIL, ""))
        user = ProductUser(
            id=str(document[UserFields.MONGO_ID]),
            email=email,
            password=UserPassword(document.get(UserFields.HASHED_PASSWORD, ""), hashed=True),
        )
        
        profile_doc = document.get(UserFields.PROFILE)
        if profile_doc:
            user.profile = UserProfile(
                email=email,
                first_name=UserName(profile_doc.get(ProfileFields.FIRST_NAME, ""), label="First name"),
                last_name=UserName(profile_doc.get(ProfileFields.LAST_NAME, ""), label="Last name"),
                phone=UserPhoneNumber(profile_doc.get(ProfileFields.PHONE, "")),
                national_id=UserNationalId(profile_doc.get(ProfileFields.NATIONAL_ID, "")),
                location=profile_doc.get(ProfileFields.LOCATION, ""),
                avatar=profile_doc.get(ProfileFields.AVATAR, ""),
            )
        
        return user
