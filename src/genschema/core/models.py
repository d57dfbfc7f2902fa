"""Pydantic models for the image generation prompt document.

A :class:`PromptDocument` describes one visual scene for an image
generation backend: what is in it, how it is lit, framed and shot, and the
output dimensions.  Documents are built once, in full, by the caller and are
frozen afterwards.

Field Conventions
-----------------
- **Open enumerations** (``style``, ``lighting``, ``camera.angle``, ...) are
  typed ``XOption | str``.  The ``Literal`` lists in
  :mod:`genschema.core.options` are suggestions; any string is accepted.
- **Numeric-or-label** fields (``resolution.width``, ``resolution.height``,
  ``resolution.dpi``) take one of a closed set of label strings or a raw
  number.  Use :meth:`Resolution.pixel_size` and
  :meth:`Resolution.dpi_value` to normalise before doing arithmetic.
- **Numbers** keep the kind they were given: ``guidance_scale=10`` stays an
  ``int`` and is written back as ``10``.
- Optional fields default to None and are left out of the exported
  artifact.

Validation Scope
----------------
Construction checks the *shape*: required fields, field types and unknown
keys (``extra="forbid"``).  It does not check *ranges*.  An ``opacity`` of
``1.5`` or a ``guidance_scale`` of ``200`` is kept as given, and the aspect
ratio is not compared with the pixel size (see
:func:`genschema.core.dimensions.aspect_ratio_mismatch` for a soft check).

Models
------
PromptDocument
    Root record of one image generation request.
Subject
    An entity depicted in the scene.
Background
    The environment behind the subjects.
Camera
    Virtual camera viewpoint, framing, lens and focus.
Resolution
    Output dimensions, aspect ratio and print DPI.
TextOverlay
    A text element rendered onto the image.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from genschema.core.dimensions import parse_dimension
from genschema.core.options import (
    AspectRatioOption,
    CameraAngleOption,
    CameraDistanceOption,
    CameraFocusOption,
    CameraLensOption,
    CompositionOption,
    DepthOfFieldOption,
    DpiOption,
    EnvironmentTypeOption,
    HeightOption,
    LightingOption,
    MoodOption,
    StyleOption,
    SubjectPositionOption,
    TextPositionOption,
    WidthOption,
)


class _Frozen(BaseModel):
    """Shared configuration: immutable after construction, no unknown keys."""

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())


class Subject(_Frozen):
    """A character, creature or focal object in the scene.

    Attributes:
        type: General category or archetype, e.g. ``"elderly wizard"``.
        description: Physical features, attire and distinguishing marks.
        pose: Body language or action.
        position: Placement within the frame (open enumeration).
        expression: Facial expression or emotional state.
        accessories: Items that need emphasis, e.g. jewellery or a satchel.
    """

    type: str = Field(
        ...,
        description="General category or archetype of the subject.",
        examples=["young woman", "elderly wizard", "cybernetic wolf"],
    )
    description: str = Field(
        ...,
        description="Detailed visual characteristics: physical features, attire, marks.",
    )
    pose: str = Field(
        ...,
        description="Body language or action.",
        examples=["standing confidently with arms crossed"],
    )
    position: SubjectPositionOption | str = Field(
        ...,
        description="Placement within the visual frame.",
        examples=["center frame", "foreground left, slightly out of focus"],
    )
    expression: str = Field(
        ...,
        description="Facial expression or emotional state.",
        examples=["smiling warmly and invitingly"],
    )
    accessories: list[str] | None = Field(
        default=None,
        description="Accessories, jewellery or clothing items that need emphasis.",
    )


class Background(_Frozen):
    """The environment behind the subjects.

    ``elements`` is required but may be empty.
    """

    environment_type: EnvironmentTypeOption | str | None = Field(
        default=None,
        description="General category of the background environment.",
        examples=["urban cityscape", "dense forest interior"],
    )
    elements: list[str] = Field(
        ...,
        description="Key features or objects visible in the background.",
    )
    depth_of_field: DepthOfFieldOption | str = Field(
        ...,
        description="How focus is handled for the background.",
    )


class Camera(_Frozen):
    """Virtual camera configuration."""

    angle: CameraAngleOption | str = Field(
        ...,
        description="Angle from which the scene is viewed.",
    )
    distance: CameraDistanceOption | str = Field(
        ...,
        description="How close or far the camera is from the primary subjects.",
    )
    lens_type: CameraLensOption | str | None = Field(
        default=None,
        description="Type of virtual lens; affects field of view and distortion.",
        examples=["wide-angle lens (e.g., 24mm)"],
    )
    focus: CameraFocusOption | str = Field(
        ...,
        description="Main point of focus in the image.",
    )


class Resolution(_Frozen):
    """Output dimensions, aspect ratio and DPI.

    ``width``, ``height`` and ``dpi`` take a label from a closed set or a raw
    number.  Numeric strings outside the label set are rejected rather than
    coerced, so ``"4096"`` is accepted but ``"4000"`` is not; pass ``4000``.

    The aspect ratio is free text, conventionally ``"digits:digits"``, and is
    not checked against the pixel size.
    """

    width: WidthOption | StrictInt | StrictFloat = Field(
        ...,
        description="Image width in pixels: a predefined label or any number.",
        examples=["1920", 1024],
    )
    height: HeightOption | StrictInt | StrictFloat = Field(
        ...,
        description="Image height in pixels: a predefined label or any number.",
        examples=["1080", 1024],
    )
    aspect_ratio: AspectRatioOption | str = Field(
        ...,
        description="Proportional relationship between width and height, e.g. '5:4'.",
    )
    dpi: DpiOption | StrictInt | StrictFloat = Field(
        ...,
        description="Print resolution in dots per inch: a predefined label or any number.",
        examples=["72 (Web/Screen)", 300],
    )
    label: str | None = Field(
        default=None,
        description="Human-readable name for this resolution and aspect ratio.",
        examples=["Full HD Landscape"],
    )

    def pixel_size(self) -> tuple[int | float, int | float]:
        """Return ``(width, height)`` as numbers."""
        return parse_dimension(self.width), parse_dimension(self.height)

    def dpi_value(self) -> int | float:
        """Return the DPI as a number, e.g. ``300`` for ``"300 (Standard Print)"``."""
        return parse_dimension(self.dpi)


class TextOverlay(_Frozen):
    """A text element to render onto the image.

    ``opacity`` is meant to lie in [0.0, 1.0] and ``rotation`` is in degrees,
    conventionally [-180, 180].  Neither is enforced: out-of-range values are
    kept as given.
    """

    content: str = Field(..., description="Text to display.", examples=["The Lost City"])
    position: TextPositionOption | str = Field(
        ...,
        description="Where the text is placed on the image.",
    )
    style: str = Field(
        ...,
        description="Font, colour and style description.",
        examples=["bold white sans-serif font"],
    )
    font_family: str = Field(..., description="Desired font family.", examples=["Futura Condensed Bold"])
    font_color: str = Field(..., description="Text colour.", examples=["gold", "#00FFFF"])
    size: str = Field(
        ...,
        description="Relative or absolute text size; the unit is free text.",
        examples=["large and prominent", "24pt"],
    )
    opacity: StrictInt | StrictFloat = Field(
        ...,
        description="Opacity from 0.0 (transparent) to 1.0 (opaque).",
        examples=[0.8],
    )
    rotation: StrictInt | StrictFloat | None = Field(
        default=None,
        description="Rotation in degrees.",
        examples=[-15, 90],
    )


class PromptDocument(_Frozen):
    """Root record describing one image generation request.

    Attributes:
        scene: High-level summary of the whole scene.
        subjects: Entities depicted; conventionally at least one.
        style: Artistic or visual style (open enumeration).
        lighting: Lighting conditions (open enumeration).
        mood: Emotional atmosphere (open enumeration).
        background: Environment description.
        composition: Arrangement within the frame (open enumeration).
        camera: Virtual camera configuration.
        color_palette: Dominant colours or colour schemes.
        props: Inanimate items subjects may interact with.
        resolution: Output dimensions.
        text_overlays: Text rendered onto the image.
        negative_prompt: Concepts to avoid, as one string or a list.
        seed: RNG seed for reproducibility.
        guidance_scale: Prompt adherence, conventionally 1-20.
        num_inference_steps: Denoising steps, conventionally 20-100.
        model_identifier: Backend model to use.
    """

    scene: str = Field(
        ...,
        description="Concise, high-level summary of the entire visual scene.",
        examples=["A lone astronaut discovering an ancient alien artifact on Mars."],
    )
    subjects: list[Subject] = Field(
        ...,
        description="Main characters, creatures or focal objects of the scene.",
    )
    style: StyleOption | str = Field(..., description="Overall artistic or visual style.")
    lighting: LightingOption | str = Field(
        ...,
        description="Lighting conditions, light sources and their effect.",
    )
    mood: MoodOption | str = Field(..., description="Dominant emotional atmosphere.")
    background: Background = Field(..., description="Environment behind the subjects.")
    composition: CompositionOption | str = Field(
        ...,
        description="Arrangement of visual elements within the frame.",
    )
    camera: Camera = Field(..., description="Virtual camera viewpoint, framing, lens and focus.")
    color_palette: list[str] = Field(
        ...,
        description="Dominant or significant colours, or a colour scheme.",
        examples=[["monochromatic blues and grays"]],
    )
    props: list[str] | None = Field(
        default=None,
        description="Inanimate items present in the scene.",
    )
    resolution: Resolution = Field(..., description="Output dimensions, aspect ratio and DPI.")
    text_overlays: list[TextOverlay] | None = Field(
        default=None,
        description="Text elements to render onto the image.",
    )
    negative_prompt: str | list[str] | None = Field(
        default=None,
        description="Concepts, objects or styles to avoid.",
        examples=[["text", "watermarks", "blurry", "low quality"]],
    )
    seed: StrictInt | StrictFloat | None = Field(
        default=None,
        description="Seed for the random number generator.",
        examples=[42],
    )
    guidance_scale: StrictInt | StrictFloat | None = Field(
        default=None,
        description="How strictly to follow the prompt; typical range 1-20.",
        examples=[7.5],
    )
    num_inference_steps: StrictInt | StrictFloat | None = Field(
        default=None,
        description="Number of denoising steps; typical range 20-100.",
        examples=[50],
    )
    model_identifier: str | None = Field(
        default=None,
        description="Generation model to use when several are available.",
        examples=["stable-diffusion-xl-base-1.0"],
    )
