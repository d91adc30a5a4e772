"""Data models for the Toonify studio session state."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from toonify.core.catalog import DEFAULT_STYLE, LOADING_MESSAGES, StyleOption
from toonify.core.config import DEFAULT_MAX_UPLOAD_BYTES
from toonify.core.images import encode_data_url
from toonify.core.prompt_builder import MAX_ARTISTS  # noqa: F401


class Phase(str, Enum):
    """Named phases of a studio session."""

    IDLE = "idle"
    SELECTED = "selected"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceImage:
    """The uploaded photo, already read and validated."""

    path: str
    data: bytes = field(repr=False)
    mime_type: str
    size_bytes: int

    @property
    def data_url(self) -> str:
        """The image as a self-describing ``data:`` URL."""
        return encode_data_url(self.data, self.mime_type)

    @property
    def preview_url(self) -> str:
        """What the UI shows as the "before" image."""
        return self.path


@dataclass(frozen=True)
class TransformationResult:
    """Outcome of one successful transformation.

    Attributes:
        original_url: Preview of the source photo.
        transformed_url: The stylized image as a PNG data URL.
        style: Identifier of the style used.
        influences: Artist names blended into the result, in selection order.
    """

    original_url: str
    transformed_url: str
    style: str
    influences: tuple[str, ...] = ()


@dataclass(frozen=True)
class StudioState:
    """Session state for the studio UI.

    Instances are immutable; every change goes through a transition function
    in :mod:`toonify.ui.state` and produces a new instance. Each user session
    holds its own StudioState.

    Attributes
    ----------
    phase : Phase
        Where the session is in the idle/selected/processing/succeeded/failed flow
    source : SourceImage | None
        The chosen photo
    active_style : StyleOption
        The chosen visual style
    selected_artists : tuple[str, ...]
        Ordered, unique artist names (at most MAX_ARTISTS)
    search_term : str
        Current artist search text
    status_message : str
        Rotating message shown while processing
    error : str | None
        Last user-visible error
    result : TransformationResult | None
        Last successful result
    result_path : Path | None
        Downloadable PNG for the result
    """

    phase: Phase = Phase.IDLE
    source: SourceImage | None = None
    active_style: StyleOption = DEFAULT_STYLE
    selected_artists: tuple[str, ...] = ()
    search_term: str = ""
    status_message: str = LOADING_MESSAGES[0]
    error: str | None = None
    result: TransformationResult | None = None
    result_path: Path | None = None

    @property
    def is_processing(self) -> bool:
        return self.phase is Phase.PROCESSING

    @property
    def can_transform(self) -> bool:
        """Whether the Generate action should be enabled."""
        return self.source is not None and not self.is_processing

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"StudioState(phase={self.phase.value}, "
            f"source={'yes' if self.source else 'no'}, "
            f"style={self.active_style.id.name}, "
            f"artists={len(self.selected_artists)})"
        )


# Constants for UI
MAX_UPLOAD_BYTES = DEFAULT_MAX_UPLOAD_BYTES
DEFAULT_ERROR_MESSAGE = "Something went wrong during transformation."
NO_FILE_MESSAGE = "Please select a photo first."
