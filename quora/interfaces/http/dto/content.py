from __future__ import annotations

from pydantic import BaseModel, Field

from quora.domain.content.entities import Answer, Question


class QuestionRequestDTO(BaseModel):
    content: str = Field(min_length=1, max_length=500)


class AnswerRequestDTO(BaseModel):
    answer: str = Field(min_length=1)


class AnswerEditRequestDTO(BaseModel):
    content: str = Field(min_length=1)


class StatusResponseDTO(BaseModel):
    id: str
    status: str


class QuestionDetailsDTO(BaseModel):
    id: str
    content: str

    @classmethod
    def from_question(cls, question: Question) -> QuestionDetailsDTO:
        return cls(id=question.uuid, content=question.content)


class AnswerDetailsDTO(BaseModel):
    id: str
    question_content: str
    answer_content: str

    @classmethod
    def from_answer(cls, answer: Answer, question: Question) -> AnswerDetailsDTO:
        return cls(
            id=answer.uuid,
            question_content=question.content,
            answer_content=answer.content,
        )
