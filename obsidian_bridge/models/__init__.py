"""Pydantic models for tool input validation and REST payload decoding.

Each input model is the input schema for one MCP tool; its JSON schema is what
hosts see in the tool catalog, and validation runs before any remote call.

Architecture:
- base: Base models (BasePathInput, BaseContentInput)
- file_models: Input models for file read/write tools
- vault_models: Input models for listing and recent-changes tools
- response_models: Decoders for the Local REST API responses
"""

from .base import BaseContentInput, BasePathInput
from .file_models import (
    BatchGetFileContentsInput,
    CreateFileInput,
    GetFileContentInput,
    UpdateFileInput,
)
from .vault_models import (
    GetRecentChangesInput,
    ListFilesInDirInput,
    ListFilesInVaultInput,
)
from .response_models import NoteContentResponse, VaultListResponse

__all__ = [
    # Base models
    "BasePathInput",
    "BaseContentInput",
    # File models
    "GetFileContentInput",
    "CreateFileInput",
    "UpdateFileInput",
    "BatchGetFileContentsInput",
    # Vault models
    "ListFilesInVaultInput",
    "ListFilesInDirInput",
    "GetRecentChangesInput",
    # Response models
    "VaultListResponse",
    "NoteContentResponse",
]
