from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

CONFIRMATION_MESSAGE = "Registration successful! Welcome aboard!"

# The "valid e-mail address" rule browsers apply to <input type="email">
EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


# Form Models
class FieldName(str, Enum):
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"


class FormFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = ""
    email: str = ""
    password: str = ""

    def with_field(self, name: FieldName, value: str) -> "FormFields":
        return self.model_copy(update={name.value: value})


class SessionStatus(str, Enum):
    EDITING = "editing"
    REGISTERED = "registered"


# Constraint Models
class EmailCheck(BaseModel):
    email: Annotated[str, StringConstraints(pattern=EMAIL_PATTERN)]
