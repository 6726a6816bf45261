from typing import Any

from pydantic import BaseModel

# Fields stay loosely typed so the use cases can report every problem in
# their own words instead of a generic schema error.


class RegisterRequestDTO(BaseModel):
    username: Any = None
    email: Any = None
    password: Any = None


class LoginRequestDTO(BaseModel):
    email: Any = None
    password: Any = None
