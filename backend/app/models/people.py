from sqlmodel import SQLModel, Field
from typing import Optional

class Person(SQLModel, table=True):
    __tablename__ = "people"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(default="", max_length=100)
    age: int = Field(default=0)
    email: str = Field(default="", index=True)
