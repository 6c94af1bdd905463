"""Booking-related Pydantic schemas.

Request and response bodies use camelCase keys on the wire.
"""

from datetime import datetime

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel

_camel_output = AliasGenerator(serialization_alias=to_camel)


class BookingRoomRequest(BaseModel):
    """Schema for creating a booking or moving it to another room."""

    room_id: PositiveInt = Field(validation_alias=AliasChoices("roomId", "room_id"))


class BookingIdResponse(BaseModel):
    """Schema returned after a booking is created or transferred."""

    model_config = ConfigDict(populate_by_name=True)

    booking_id: int = Field(alias="bookingId")


class RoomResponse(BaseModel):
    """Schema for a room nested in a booking."""

    model_config = ConfigDict(from_attributes=True, alias_generator=_camel_output)

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class BookingResponse(BaseModel):
    """Schema for the caller's booking with its room."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    room: RoomResponse = Field(serialization_alias="Room")
