"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator


class RegisterRequest(BaseModel):
    """회원가입 요청

    지갑 주소는 서버가 배정 (요청에 포함하지 않음).
    """

    username: str = Field(..., min_length=3, max_length=50, description="사용자 이름")
    email: EmailStr = Field(..., description="이메일")
    password: str = Field(..., min_length=6, description="비밀번호")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"username": "alice", "email": "alice@example.com", "password": "secret1"},
            ]
        },
    )


class LoginRequest(BaseModel):
    """로그인 요청 (email 또는 username)"""

    email: str | None = Field(default=None, description="이메일")
    username: str | None = Field(default=None, description="사용자 이름")
    password: str = Field(..., min_length=1, description="비밀번호")

    @model_validator(mode="after")
    def _require_identity(self) -> "LoginRequest":
        if not (self.email or self.username):
            raise ValueError("email or username is required")
        return self


class TransactionCreateRequest(BaseModel):
    """거래 생성 요청

    type은 문자열로 받아 Direction.parse로 검증 (invalid_direction 에러 분리).
    receiver(원 API 이름) 또는 counterparty로 상대방 지정.
    """

    description: str = Field(..., min_length=1, max_length=500, description="거래 설명")
    amount: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2, description="금액")
    type: str = Field(..., min_length=1, description="거래 방향 (income/expense)")
    category: str | None = Field(default=None, description="카테고리 (기본: other)")
    receiver: str | None = Field(
        default=None,
        validation_alias=AliasChoices("receiver", "counterparty"),
        description="상대방 지갑/이름",
    )

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {
                    "description": "Office rent",
                    "amount": "400.00",
                    "type": "expense",
                    "category": "rent",
                },
            ]
        },
    )

    @field_validator("receiver")
    @classmethod
    def _blank_receiver(cls, value: str | None) -> str | None:
        return value or None
