"""
Pydantic schemas for API request/response models
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from models.base import Role, Category, Channel, TaskStatus, View
from schemas.entities import MarketingRecord


# ============================================================================
# Health Check Schemas
# ============================================================================

class HealthCheckResponse(BaseModel):
    """Health check response model"""
    status: str = Field(..., description="Overall system status: healthy, unhealthy")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    store_connected: bool
    collection_sizes: Dict[str, int] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "timestamp": "2024-01-15T10:30:00Z",
                "store_connected": True,
                "collection_sizes": {"users": 3, "marketing-records": 42, "tasks": 2}
            }
        }


# ============================================================================
# Session Schemas
# ============================================================================

class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    """User without the password"""
    id: str
    username: str
    role: Role

    class Config:
        from_attributes = True


class CapabilityResponse(BaseModel):
    visible_views: List[View]
    allowed_categories: List[Category]
    allowed_channels: List[Channel]
    default_category: Category
    default_channel: Channel


class SessionResponse(BaseModel):
    """Logged-in user and what their role may do"""
    user: UserResponse
    capabilities: CapabilityResponse


# ============================================================================
# Account Schemas
# ============================================================================

class UserCreateRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    role: Role = Role.ADS_SPECIALIST


class UserUpdateRequest(BaseModel):
    role: Optional[Role] = None
    password: Optional[str] = Field(None, min_length=1)


# ============================================================================
# Task Schemas
# ============================================================================

class TaskCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    label: Optional[str] = None
    content: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO


class TaskStatusUpdateRequest(BaseModel):
    status: TaskStatus


# ============================================================================
# Schema Registry Schemas
# ============================================================================

class ChannelSchemaResponse(BaseModel):
    """Metric fields per channel and channels per category, for form rendering"""
    channel_metrics: Dict[Channel, List[str]]
    category_channels: Dict[Category, List[Channel]]


# ============================================================================
# Data Listing Schemas
# ============================================================================

class PaginationMetadata(BaseModel):
    """Pagination metadata"""
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    has_next: bool
    has_previous: bool


class RecordListResponse(BaseModel):
    """Paginated marketing records, newest first"""
    items: List[MarketingRecord]
    pagination: PaginationMetadata
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


# ============================================================================
# Error Response Schema
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str
    detail: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "error": "AuthenticationError",
                "detail": "Username atau password salah.",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
