"""Response Schemas — public-facing shapes of persisted entities.

Invariants:
    - Built from ORM rows (from_attributes); never expose password hashes
    - Serialized with by_alias=True so keys match the names the forms submit

Design Decisions:
    - Explicit serialization_alias per camelCase key instead of an alias
      generator: generators camel-case "choice1committee" into "choice1Committee"
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class UserResponse(ResponseModel):
    id: int
    email: str
    firstname: str
    lastname: str
    phone: str | None = None
    birthdate: date
    nationality: str
    schoolname: str | None = None
    dietary: str | None = None
    other_info: str | None = Field(None, serialization_alias="otherInfo")
    created_at: datetime = Field(serialization_alias="createdAt")


class AuthResponse(ResponseModel):
    user: UserResponse
    token: str
    token_type: str = Field("bearer", serialization_alias="tokenType")


class CommitteeResponse(ResponseModel):
    id: int
    name: str
    displayname: str
    difficulty: str
    description: str | None = None


class CommitteeDetailResponse(CommitteeResponse):
    countries: list[str] = []


class DelegationResponse(ResponseModel):
    id: int
    name: str
    country: str
    estimated_delegates: int = Field(serialization_alias="estimatedDelegates")
    delegates: int | None = None
    leader_id: int = Field(serialization_alias="delegationLeaderId")


class StaffMemberResponse(ResponseModel):
    id: int
    name: str
    position: str
    image: str
    bio: str | None = None


class ChairApplicationResponse(ResponseModel):
    id: int
    user_id: int = Field(serialization_alias="userId")
    motivation: str
    experience: str
    delegation_id: int | None = Field(None, serialization_alias="delegationId")
    choice1committee: int
    choice2committee: int
    choice3committee: int
    shirt_size: str | None = Field(None, serialization_alias="shirtSize")
    payment_status: str = Field(serialization_alias="paymentStatus")
    created_at: datetime = Field(serialization_alias="createdAt")


class DelegateApplicationResponse(ChairApplicationResponse):
    choice1country: str
    choice2country: str
    choice3country: str
