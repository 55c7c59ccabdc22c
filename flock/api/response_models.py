"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    members: int
    rows: int
    source: str
    loaded_at: Optional[str] = None
    boundary: str
    last_error: Optional[str] = None
    last_error_at: Optional[str] = None


class DistrictsResponse(BaseModel):
    districts: list[str]
    all: str


class ReloadResponse(BaseModel):
    status: str
    members: int
    loaded_at: Optional[str] = None


class ContactToken(BaseModel):
    text: str
    emphasis: bool


class RosterCell(BaseModel):
    column: int
    label: str
    value: str
    title: str


class RosterRow(BaseModel):
    number: int
    id: int
    name: str
    district: str
    status: str
    color: str
    tokens: list[ContactToken]
    tooltip: str
    last_contact: Optional[dt.date] = None
    cells: list[RosterCell]


class MembersResponse(BaseModel):
    district: str
    presbyter: str
    boundary: str
    count: int
    members: list[RosterRow]


class MemberCard(BaseModel):
    id: int
    full_name: str
    phone: str
    district: str
    care: str
    age: str
    years_in_church: str
    address: str
    service: str
    visitation: str
    presence: str
    last_contact: str
    notes: str
    admin_actions: str
    status: str
    color: str
    last_contact_date: Optional[dt.date] = None


class StatusCount(BaseModel):
    status: str
    count: int
    pct: float
    color: str


class StatusStatsResponse(BaseModel):
    district: str
    boundary: str
    total: int
    statuses: list[StatusCount]


class DistrictStatsResponse(BaseModel):
    districts: dict[str, int]
    total: int


class DistrictStatusRow(BaseModel):
    district: str
    total: int
    fresh: int
    stale: int
    missing: int
    fresh_pct: float


class UploadResponse(BaseModel):
    status: str
    filename: str
    members: int
    rows: int
