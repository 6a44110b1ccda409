from pydantic import BaseModel


class LoginIn(BaseModel):
    key: str
