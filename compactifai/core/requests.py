"""Turn typed requests into transport-ready HTTP requests.

Everything here is a pure function of the request and the client
configuration; no network I/O happens in this module.
"""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

from compactifai.core.config import ClientConfig
from compactifai.core.models import ChatCompletionRequest, CompletionRequest, TranscriptionRequest

OCTET_STREAM = "application/octet-stream"

AUDIO_MIME_TYPES: dict[str, str] = {
    ".mp3": "audio/mpeg",
    ".mp4": "audio/mp4",
    ".m4a": "audio/mp4",
    ".wav": "audio/wav",
    ".webm": "audio/webm",
    ".ogg": "audio/ogg",
    ".flac": "audio/flac",
}

# (field name, (filename, content, content type))
FilePart = tuple[str, tuple[str, bytes, str]]


@dataclass(frozen=True)
class PreparedRequest:
    """An HTTP request ready for the transport.

    Exactly one of ``json`` or ``files`` is set for POST requests; GET
    requests carry neither.
    """

    method: str
    path: str
    json: dict[str, Any] | None = None
    data: dict[str, str] | None = None
    files: list[FilePart] | None = None


def mime_type_for(file_name: str) -> str:
    """Return the upload content type for a file name, by extension."""
    extension = PurePath(file_name).suffix.lower()
    return AUDIO_MIME_TYPES.get(extension, OCTET_STREAM)


def build_chat_request(request: ChatCompletionRequest, config: ClientConfig) -> PreparedRequest:
    """Build the POST chat/completions request, filling in the default model."""
    if not request.model:
        request = request.model_copy(update={"model": config.default_model})
    return PreparedRequest(method="POST", path="chat/completions", json=request.to_wire())


def build_completion_request(request: CompletionRequest, config: ClientConfig) -> PreparedRequest:
    """Build the POST completions request, filling in the default model."""
    if not request.model:
        request = request.model_copy(update={"model": config.default_model})
    return PreparedRequest(method="POST", path="completions", json=request.to_wire())


def build_transcription_request(request: TranscriptionRequest) -> PreparedRequest:
    """Build the multipart POST audio/transcriptions request.

    The audio goes in the ``file`` part; ``model`` is always sent and the
    remaining fields only when they are set.
    """
    data: dict[str, str] = {"model": request.model}
    if request.prompt:
        data["prompt"] = request.prompt
    if request.temperature is not None:
        data["temperature"] = str(request.temperature)
    if request.language:
        data["language"] = request.language
    if request.response_format:
        data["response_format"] = request.response_format

    files: list[FilePart] = [
        (
            "file",
            (request.file_name, request.file_content, mime_type_for(request.file_name)),
        )
    ]
    return PreparedRequest(method="POST", path="audio/transcriptions", data=data, files=files)


def build_list_models_request() -> PreparedRequest:
    return PreparedRequest(method="GET", path="models")


def build_get_model_request(model_id: str) -> PreparedRequest:
    # The id goes into the path verbatim; the service rejects bad ids
    return PreparedRequest(method="GET", path=f"models/{model_id}")
