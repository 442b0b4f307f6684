# app/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


# Booking fields are all optional here; the ledger owns the "required" check
# so a missing email gets the same message whether it's absent or blank.
class BookingIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    projectType: Optional[str] = None
    budget: Optional[Any] = None
    message: Optional[str] = None


class ClientIn(BaseModel):
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None


class ClientUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None


class VideoSpecs(BaseModel):
    duration: Optional[int] = Field(default=None, gt=0)
    style: Optional[str] = None
    provider: Optional[str] = None
    prompt: Optional[str] = None


class ProjectIn(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    requirements: Optional[str] = None
    budget: Optional[float] = Field(default=None, ge=0)
    deadline: Optional[str] = None
    videoSpecs: Optional[VideoSpecs] = None


class GenerateVideoIn(BaseModel):
    prompt: Optional[str] = None
    overrideSpecs: Optional[VideoSpecs] = None


class VideoGenerateIn(BaseModel):
    prompt: str
    provider: Optional[str] = None
    duration: Optional[int] = Field(default=None, gt=0)
    style: Optional[str] = None
    clientId: Optional[str] = None
    projectId: Optional[str] = None


class CommunicationIn(BaseModel):
    type: str = Field(..., min_length=1)  # call, email, meeting, note
    subject: Optional[str] = None
    notes: Optional[str] = None
    followUpDate: Optional[str] = None


class QuoteIn(BaseModel):
    prompt: Optional[str] = None
    duration: Optional[int] = None
    style: Optional[str] = None
    tier: Optional[str] = None


class CheckoutIn(BaseModel):
    amount: float = Field(..., gt=0)
    currency: Optional[str] = None
    clientId: Optional[str] = None
    projectId: Optional[str] = None
    description: Optional[str] = None
    customerEmail: Optional[str] = None


class CheckoutOut(BaseModel):
    success: bool = True
    sessionId: str
    checkoutUrl: Optional[str] = None
    payment: Dict[str, Any]
