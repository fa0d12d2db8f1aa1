from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseMetadata(BaseModel):
    """Describes a response whose body gave no usable detail.

    Attached to 404/409 failures together with the path that was requested,
    since the body itself carries no context.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        frozen=True,
    )

    status_code: int = Field(alias="status")
    reason_phrase: Optional[str] = Field(default=None, alias="statusText")
    url: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    request_path: str = Field(alias="requestPath")
