from pydantic import BaseModel


class Token(BaseModel):
    text: str
    is_blank: bool = False
    blank_index: int = -1  # dense index among blanks; -1 when not a blank

    model_config = {"frozen": True}
