from pydantic import BaseModel, ConfigDict, Field


class RelatedFile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    path: str
    content: str
    relevance: str


class ChatHistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str
    timestamp: str | None = None


class CodeContext(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    language: str = Field(min_length=1, description="Language tag used to fence the code")
    framework: str | None = None
    user_goal: str = Field(alias="userGoal", min_length=1, description="What the user wants to achieve")
    related_files: tuple[RelatedFile, ...] = Field(default=(), alias="relatedFiles")


class AnalysisRequest(BaseModel):
    """Validated input bundle handed to the prompt builder. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    code: str = Field(min_length=1)
    context: CodeContext
    chat_history: tuple[ChatHistoryEntry, ...] = Field(default=(), alias="chatHistory")
