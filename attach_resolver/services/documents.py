"""Active-editor information consumed by resolvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from typing import runtime_checkable

from attach_resolver.constants import PYTHON_LANGUAGE


@dataclass(frozen=True)
class TextDocument:
    """A document open in the editor."""

    file_name: str
    language_id: str = PYTHON_LANGUAGE

    @property
    def is_python(self) -> bool:
        return self.language_id == PYTHON_LANGUAGE


@dataclass(frozen=True)
class TextEditor:
    """The editor currently showing *document*."""

    document: TextDocument


@runtime_checkable
class IDocumentManager(Protocol):
    """Exposes the currently focused editor, if any."""

    @property
    def active_text_editor(self) -> TextEditor | None: ...


class StaticDocumentManager:
    """Document manager backed by a single, replaceable active document."""

    def __init__(self, document: TextDocument | None = None) -> None:
        self._editor = TextEditor(document) if document is not None else None

    @property
    def active_text_editor(self) -> TextEditor | None:
        return self._editor

    def set_active_document(self, document: TextDocument | None) -> None:
        self._editor = TextEditor(document) if document is not None else None
