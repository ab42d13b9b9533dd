from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class UploadSuccess(BaseModel):
    status: Literal["success"] = "success"
    fileIndex: int
    filename: str
    url: str
    publicId: str
    width: int
    height: int
    thumbnail: str
    fingerprint: str
    reused: bool = False


class UploadFailure(BaseModel):
    status: Literal["error"] = "error"
    fileIndex: int
    filename: str
    error: str


UploadResult = Annotated[Union[UploadSuccess, UploadFailure], Field(discriminator="status")]


class CloudinaryPingResponse(BaseModel):
    status: str
    result: dict
