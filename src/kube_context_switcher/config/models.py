from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class KubeContext(BaseModel):
    """
    A single named context, projected for display.
    Cluster and user are optional; a context without them still lists.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique context name within the file")
    cluster: Optional[str] = Field(None, description="Referenced cluster name")
    user: Optional[str] = Field(None, description="Referenced user (credential) name")

class ContextBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    cluster: Optional[str] = None
    user: Optional[str] = None

class NamedContext(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    context: Optional[ContextBody] = None

class Kubeconfig(BaseModel):
    """
    Schema check for the parts of a kubeconfig this tool reads.
    Everything else is allowed through untouched; the raw document is what gets written back.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    contexts: List[NamedContext] = Field(default_factory=list)
    current_context: Optional[str] = Field(None, alias="current-context")

    @field_validator("contexts", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # `contexts: null` / `contexts:` is common in freshly generated files
        return [] if value is None else value

    def to_records(self) -> List[KubeContext]:
        records = []
        for entry in self.contexts:
            body = entry.context
            records.append(KubeContext(
                name=entry.name,
                cluster=body.cluster if body else None,
                user=body.user if body else None,
            ))
        return records
