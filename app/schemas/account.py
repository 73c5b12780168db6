from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel
from app.schemas.booking import Document


class UserProfile(Document):
    id: str
    name: str
    phone: str
    email: str
    state: str
    city: str
    created_at: Optional[datetime] = None


class StorageFacility(Document):
    id: str
    name: str
    phone: str = ""
    email: str = ""
    state: str = ""
    city: str = ""
    pincode: str = ""
    address: str = ""
    location: str = ""
    images: Optional[List[str]] = None
    created_at: Optional[datetime] = None

    @property
    def cover_image(self) -> str:
        return self.images[0] if self.images else ""


class StorageProfile(StorageFacility):
    aadhar: str = ""
    pan: str = ""
    is_storage: bool = True


class RegisterRequest(BaseModel):
    name: str
    phone: str
    email: str
    state: str
    city: str
    # Storage providers only
    pincode: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None
    aadhar: Optional[str] = None
    pan: Optional[str] = None

    @property
    def is_storage(self) -> bool:
        return all([self.pincode, self.address, self.location, self.aadhar, self.pan])
