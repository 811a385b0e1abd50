from pydantic import BaseModel, Field


class Verdict(BaseModel):
    expression: str = Field(..., description="Checked line")
    balanced: bool = Field(..., description="True when all delimiters match")

    def message(self, correct: str, incorrect: str) -> str:
        return correct if self.balanced else incorrect
