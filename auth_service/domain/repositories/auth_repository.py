from abc import ABC, abstractmethod
from typing import Optional
from ..models.product_user import ProductUser


class AuthRepository(ABC):
    """Repository interface - defines contract for user credential storage"""
    
    @abstractmethod
    async def exists(self, email: str) -> bool:
        """Check whether a user is already registered with this email"""
        pass
    
    @abstractmethod
    async def save_user(self, user: ProductUser) -> None:
        """Persist a user together with its linked profile"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[ProductUser]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[ProductUser]:
        """Find user by ID"""
        pass
