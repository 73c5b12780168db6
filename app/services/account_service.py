import logging
from datetime import datetime, timezone
from typing import Dict, Union

from app.core.errors import NotFound
from app.schemas.account import RegisterRequest, StorageProfile, UserProfile

logger = logging.getLogger(__name__)


class AccountService:
    """Registration and profile lookup for customers and storage providers."""

    def __init__(self, store):
        self.store = store

    async def signup_storage(
        self, uid: str, name: str, phone: str, email: str, state: str, city: str,
        pincode: str, address: str, location: str, aadhar: str, pan: str,
    ) -> Dict[str, str]:
        try:
            await self.store.set_storage(StorageProfile(
                id=uid,
                name=name,
                phone=phone,
                email=email,
                state=state,
                city=city,
                pincode=pincode,
                address=address,
                location=location,
                aadhar=aadhar,
                pan=pan,
                created_at=datetime.now(timezone.utc),
            ))
            return {"message": "Storage registered successfully"}
        except Exception as e:
            logger.error(f"[SIGNUP SERVICE STORAGE] {e}")
            raise

    async def signup_user(
        self, uid: str, name: str, phone: str, email: str, state: str, city: str,
    ) -> Dict[str, str]:
        try:
            await self.store.set_user(UserProfile(
                id=uid,
                name=name,
                phone=phone,
                email=email,
                state=state,
                city=city,
                created_at=datetime.now(timezone.utc),
            ))
            return {"message": "User registered successfully"}
        except Exception as e:
            logger.error(f"[SIGNUP SERVICE USER] {e}")
            raise

    async def register_user(self, uid: str, details: RegisterRequest) -> Dict[str, str]:
        """
        Register a storage provider when all of its KYC and address fields are
        present, otherwise a plain customer.
        """
        if details.is_storage:
            return await self.signup_storage(
                uid, details.name, details.phone, details.email, details.state, details.city,
                details.pincode, details.address, details.location, details.aadhar, details.pan,
            )
        return await self.signup_user(
            uid, details.name, details.phone, details.email, details.state, details.city,
        )

    async def get_user(self, uid: str) -> Union[UserProfile, StorageProfile]:
        try:
            user = await self.store.get_user(uid)
            if user is not None:
                return user
            storage = await self.store.get_storage_profile(uid)
            if storage is not None:
                return storage
            raise NotFound("User not found")
        except Exception as e:
            logger.error(f"[GET USER] {e}")
            raise
