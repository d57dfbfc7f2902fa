"""Suggested vocabularies for the open-enumeration prompt fields.

Most stylistic fields of a :class:`~genschema.core.models.PromptDocument`
are *open enumerations*: each has a list of well-known values that editors
and autocomplete can offer, but any string is accepted.  The known values
are published here as ``Literal`` aliases so type checkers and IDEs can see
them, and as plain tuples for runtime lookups.

The fields in ``models.py`` are typed ``XOption | str``.  Do not narrow them
to the ``Literal`` alone: that would turn a suggestion list into a strict
enum and reject custom descriptions.

The three numeric-or-label aliases (``WidthOption``, ``HeightOption`` and
``DpiOption``) are the exception.  Those are closed sets; the alternative to
a label is a raw number, not an arbitrary string.

Usage Example
-------------
    from genschema.core.options import VOCABULARIES, is_suggested

    VOCABULARIES["camera.angle"][:3]
    is_suggested("mood", "cozy and comforting")  # True
    is_suggested("mood", "faintly ominous")      # False, but still valid
"""

from __future__ import annotations

from typing import Literal, get_args

StyleOption = Literal[
    # Photography Styles
    "photorealistic, cinematic",
    "documentary photography",
    "street photography (e.g., Henri Cartier-Bresson style)",
    "fashion photography (e.g., Vogue, editorial)",
    "portrait photography (e.g., headshot, environmental)",
    "landscape photography (e.g., Ansel Adams style, epic vista)",
    "architectural photography (interior/exterior)",
    "fine art photography",
    "black and white photography (monochrome, high contrast B&W)",
    "sepia tone photography",
    "HDR photography (high dynamic range)",
    "macro photography (extreme close-up)",
    "wildlife photography",
    "sports photography (action shot)",
    "product photography (studio lit, clean background)",
    "food photography (appetizing, top-down)",
    "astrophotography (stars, nebulae)",
    "aerial photography (drone shot)",
    "underwater photography",
    "lomography / lomo effect",
    "Polaroid / instant film style",
    "vintage photography (e.g., daguerreotype, tintype)",
    "double exposure",
    "long exposure photography (light trails, blurred water)",
    # Painting & Illustration Styles
    "impressionistic oil painting (e.g., Monet, Renoir)",
    "expressionistic painting (e.g., Munch, Kirchner)",
    "surrealism (e.g., Dali, Magritte)",
    "abstract art (e.g., Kandinsky, Pollock)",
    "cubism (e.g., Picasso, Braque)",
    "pop art (e.g., Warhol, Lichtenstein)",
    "renaissance painting (e.g., da Vinci, Michelangelo)",
    "baroque painting (e.g., Rembrandt, Caravaggio)",
    "romanticism painting (e.g., Turner, Friedrich)",
    "watercolor painting (soft, blended)",
    "gouache illustration",
    "charcoal sketch (textured, smudged)",
    "pencil drawing (graphite, detailed)",
    "ink drawing (pen and ink, stippling, cross-hatching)",
    "comic book art (e.g., Marvel, DC style, dynamic panels)",
    "graphic novel style (cinematic illustration)",
    "concept art (for games/film, detailed environment/character)",
    "children's book illustration (whimsical, colorful)",
    "storybook illustration",
    "technical illustration (precise, diagrammatic)",
    "instructional diagram",
    "ukiyo-e (Japanese woodblock print)",
    # Digital & 3D Styles
    "anime concept art (e.g., Makoto Shinkai, Studio Ghibli)",
    "manga style (black and white, screentones)",
    "steampunk digital illustration",
    "cyberpunk aesthetic (neon, futuristic)",
    "vaporwave aesthetic",
    "synthwave aesthetic",
    "low poly 3D render",
    "high poly 3D render (detailed mesh)",
    "cel-shaded 3D (toon shading)",
    "photorealistic 3D render (Unreal Engine, Octane render)",
    "voxel art",
    "pixel art (e.g., 8-bit, 16-bit, isometric)",
    "glitch art",
    # Design & Other Styles
    "Art Nouveau poster design (e.g., Mucha)",
    "Art Deco design (geometric, luxurious)",
    "Bauhaus design (minimalist, functional)",
    "Swiss Design / International Typographic Style",
    "vector art (clean lines, flat colors)",
    "minimalist design",
    "grunge aesthetic",
    "collage art",
    "graffiti art",
    "silhouette art",
    "stained glass window style",
    "mosaic art",
    "blueprint drawing style",
    "thermal imaging style",
    "x-ray style",
    "infrared photography style",
    "cinematic still (from a film)",
    "film noir style (high contrast, shadows)",
    "sci-fi concept art (e.g., Syd Mead style)",
    "fantasy art (e.g., Frank Frazetta style)",
    "style of [Specific Artist Name, e.g., Van Gogh, H.R. Giger]",
]

LightingOption = Literal[
    # Natural Light & Time of Day
    "golden hour (sunrise/sunset, soft warm light, long shadows)",
    "blue hour (twilight, cool deep blue tones)",
    "high noon (harsh overhead sun, strong shadows)",
    "overcast day (diffused, even, soft shadows)",
    "dappled sunlight (through leaves/trees)",
    "moonlit night (cool blue, subtle highlights, deep shadows)",
    "starlight (very low light, long exposure needed for stars)",
    "aurora borealis / australis (northern/southern lights)",
    # Artificial & Studio Light
    "studio lighting (controlled, versatile)",
    "three-point lighting (key, fill, backlight)",
    "Rembrandt lighting (triangular light on cheek)",
    "split lighting (half face lit, half shadow)",
    "butterfly lighting (Paramount, shadow under nose)",
    "loop lighting (small loop shadow from nose)",
    "broad lighting (main light on side of face towards camera)",
    "short lighting (main light on side of face away from camera)",
    "rim lighting / kicker (outlines subject from behind)",
    "hair light (separates subject from background)",
    "softbox lighting (large, diffused, soft shadows)",
    "hard light (direct sun, spotlight, crisp shadows)",
    "ring light (even, often for portraits/vlogging)",
    "fluorescent lighting (cool, greenish tint typical)",
    "incandescent / tungsten lighting (warm, orange tint)",
    "LED panel lighting (versatile, dimmable, color temp adjustable)",
    "neon city lights (vibrant, colorful reflections, cyberpunk)",
    "candlelight (warm, flickering, intimate)",
    "firelight (warm, dynamic shadows)",
    "spotlight (focused beam, dramatic emphasis)",
    "lantern light",
    "halogen lamp",
    "blacklight / UV light",
    # Light Qualities & Effects
    "dramatic chiaroscuro (strong contrast, deep shadows)",
    "backlit (subject in silhouette or with glowing edges)",
    "contre-jour (shooting against the light source)",
    "silhouette lighting",
    "volumetric lighting / god rays (visible beams of light)",
    "lens flare (anamorphic, spherical)",
    "eerie bioluminescent glow (from flora/fauna)",
    "underwater caustics (light patterns through water)",
    "foggy / misty diffused light (atmospheric perspective)",
    "low-key lighting (dark tones dominate, high contrast)",
    "high-key lighting (bright tones dominate, low contrast)",
    "gel lighting (colored gels on lights for artistic effect)",
    "projected light patterns (gobos)",
    "light painting (long exposure with moving light source)",
]

MoodOption = Literal[
    # Core Emotions
    "serene and peaceful",
    "joyful and vibrant",
    "sad and melancholic",
    "angry and intense",
    "fearful and suspenseful",
    "surprised and awe-struck",
    # Atmospheric & Tonal
    "dark and ominous",
    "mysterious and enchanting",
    "nostalgic and wistful",
    "epic and awe-inspiring",
    "whimsical and playful",
    "romantic and intimate",
    "tense and dramatic",
    "eerie and unsettling",
    "hopeful and uplifting",
    "lonely and desolate",
    "powerful and commanding",
    "dreamlike and surreal",
    "chaotic and frenetic",
    "calm and tranquil",
    "cozy and comforting",
    "cold and isolating",
    "warm and inviting",
    "opulent and luxurious",
    "gritty and raw",
    "sterile and clinical",
    "sacred and reverent",
    "absurd and comical",
    # Genre-Specific
    "horror / terrifying",
    "thriller / suspenseful",
    "comedy / lighthearted",
    "sci-fi / futuristic",
    "fantasy / magical",
    "film noir / brooding",
]

DepthOfFieldOption = Literal[
    # General DoF
    "shallow (blurred background, subject sharp, f/1.2-f/2.8)",
    "medium (some background separation, f/4-f/8)",
    "deep (most of scene in focus, f/11-f/22+)",
    "everything tack sharp (infinite DoF illusion)",
    # Bokeh Quality & Style
    "strong bokeh (background heavily blurred, creamy)",
    "creamy bokeh (smooth, non-distracting blur)",
    "busy bokeh (distracting, harsh highlights in blur)",
    "swirly bokeh (vintage lens effect, Petzval)",
    "soap bubble bokeh (defined edges on highlights)",
    "anamorphic bokeh (oval-shaped)",
    "bokeh balls (distinct circular highlights)",
    # Specific Techniques & Effects
    "extreme shallow DoF (subject isolated, paper-thin focus plane)",
    "foreground blurred, subject sharp, background blurred (sandwich)",
    "subject sharp, foreground blurred, background sharp (deep focus with foreground element)",
    "tilt-shift effect (miniature faking, selective focus plane)",
    "Lensbaby effect (sweet spot of focus, surrounding blur)",
    "motion blur in background (subject sharp, panning effect)",
    "soft focus filter effect (dreamy, glowing highlights)",
]

CompositionOption = Literal[
    # Classic Rules
    "rule of thirds (intersections or lines)",
    "golden ratio (phi grid, spiral)",
    "Fibonacci spiral",
    "rule of odds (odd number of subjects)",
    # Lines & Shapes
    "leading lines (guiding eye to subject)",
    "diagonal lines (dynamic, energy)",
    "horizontal lines (calm, stability)",
    "vertical lines (strength, height)",
    "curved lines / S-curve (flow, elegance)",
    "triangles (stable or dynamic)",
    "circles / radial balance",
    # Framing & Space
    "symmetrical balance (formal, mirrored)",
    "asymmetrical balance (informal, visual weight distributed)",
    "centered subject (strong focal point, minimalist)",
    "frame within a frame (using elements to frame subject)",
    "negative space (empty areas emphasizing subject)",
    "fill the frame (subject dominates, no distractions)",
    "leading room / nose room (space in direction of gaze/movement)",
    "head room (space above subject's head)",
    # Advanced & Dynamic
    "dynamic symmetry (armature grids)",
    "pattern and repetition (rhythm, texture)",
    "breaking patterns (emphasis on the anomaly)",
    "juxtaposition (contrasting elements)",
    "visual weight and balance",
    "viewpoint / perspective (low, high, unusual)",
    "depth (foreground, middle ground, background layers)",
    "figure-ground relationship (subject distinct from background)",
]

CameraAngleOption = Literal[
    # Basic Angles
    "eye-level shot (neutral, relatable)",
    "low-angle shot (subject appears powerful, heroic)",
    "high-angle shot (subject appears small, vulnerable)",
    # Extreme & Specialty Angles
    "bird's-eye view (directly overhead, map-like)",
    "worm's-eye view (directly from below, imposing)",
    "Dutch angle / canted angle (tilted, conveys unease/dynamism)",
    # Subject-Relative Angles
    "frontal shot (direct, confrontational)",
    "profile shot (side view, emphasizes silhouette)",
    "three-quarter view (common for portraits, shows dimension)",
    "over-the-shoulder shot (OTS, connects characters)",
    "point of view (POV, sees through subject's eyes)",
    "reverse angle shot (shows opposite perspective)",
    # Other
    "canted frame (slight tilt)",
    "ground-level shot (camera very low to the ground)",
    "crane shot (camera moves vertically on a crane, implies changing perspective)",
]

CameraDistanceOption = Literal[
    # Close-Ups
    "extreme close-up (ECU) (e.g., eyes, mouth, small detail)",
    "tight close-up (TCU) (just the face)",
    "close-up (CU) (head and shoulders)",
    "medium close-up (MCU) (chest up)",
    # Medium Shots
    "medium shot (MS) (waist up, shows some environment)",
    "medium full shot / cowboy shot (MLS) (mid-thigh or knees up)",
    # Long/Full Shots
    "full shot (FS) (entire body from head to toe)",
    "long shot (LS) (subject visible, but environment dominates)",
    "wide shot (WS) (similar to LS, emphasizes breadth)",
    "extreme long shot (ELS) (subject tiny, vast landscape, establishing)",
    # Specialty Shots
    "establishing shot (opens a scene, shows location)",
    "master shot (covers all action in a scene from one angle)",
    "two-shot (frames two subjects)",
    "group shot (frames three or more subjects)",
    "insert shot (close-up of an object or detail relevant to the scene)",
    "cutaway shot (briefly shows something other than main action)",
]

CameraLensOption = Literal[
    "standard lens (e.g., 35-50mm equivalent, natural perspective)",
    "wide-angle lens (e.g., 16-35mm, expansive view, potential distortion)",
    "ultra-wide-angle lens (e.g., <16mm, extreme field of view)",
    "telephoto lens (e.g., 70-200mm, compresses perspective, isolates subject)",
    "super-telephoto lens (e.g., 300mm+, extreme compression/magnification)",
    "fisheye lens (extreme distortion, circular or very wide view)",
    "macro lens (for extreme close-ups of small details)",
    "prime lens (fixed focal length, often sharper)",
    "zoom lens (variable focal length)",
    "tilt-shift lens (selective focus plane, miniature effect)",
]

CameraFocusOption = Literal[
    # Sharpness & Clarity
    "pin-sharp focus on primary subject",
    "tack-sharp eyes, face slightly softer",
    "everything in sharp focus (deep focus, f/16+)",
    # Selective Focus & Blur
    "selective focus (isolating subject from background/foreground)",
    "shallow depth of field, sharp subject, blurred background",
    "soft focus overall (dreamy, ethereal, vintage look)",
    "out-of-focus foreground elements (framing, depth)",
    "bokehlicious (prominent, aesthetically pleasing bokeh)",
    "background completely obliterated (extreme shallow DoF)",
    # Dynamic & Artistic Focus
    "rack focus / focus pull (shifting focus between planes)",
    "follow focus (keeping a moving subject sharp)",
    "zone focusing (pre-focusing for street photography)",
    "manual focus aesthetic (implies careful control)",
    "split diopter effect (two planes of focus sharp)",
    "Lensbaby selective focus (sweet spot of sharp, artistic blur)",
    "intentional motion blur on subject (conveys movement)",
    "everything intentionally out of focus (abstract, impressionistic)",
]

AspectRatioOption = Literal[
    # Common Square & Portrait
    "1:1 (Square)",
    "9:16 (Portrait Widescreen - Stories, TikTok)",
    "4:5 (Portrait - Instagram Feed)",
    "3:4 (Portrait Standard)",
    "2:3 (Portrait Photography - DSLR/Mirrorless)",
    "5:7 (Portrait Photo Print)",
    # Common Landscape
    "16:9 (Landscape Widescreen - HD/4K Video, YouTube)",
    "3:2 (Landscape Photography - DSLR/Mirrorless)",
    "4:3 (Landscape Standard - Older TV, iPad)",
    "5:4 (Landscape - Large Format Photography)",
    "7:5 (Landscape Photo Print)",
    # Cinematic & Ultrawide
    "1.85:1 (Cinematic Widescreen - Academy Flat)",
    "2:1 (Univisium, some smartphones)",
    "2.35:1 (Cinematic Anamorphic Widescreen - older standard)",
    "2.39:1 / 2.40:1 (Cinematic Anamorphic Widescreen - current standard)",
    "21:9 (Ultrawide Monitor / Marketing term for ~2.3x:1)",
    "32:9 (Super Ultrawide Monitor)",
    # Panoramic
    "2:1 Panoramic",
    "3:1 Panoramic",
    "XPan (65:24 or ~2.7:1, Hasselblad XPan camera)",
    # Classic & Other
    "Golden Ratio (~1.618:1)",
]

SubjectPositionOption = Literal[
    "center frame",
    "center foreground",
    "center midground",
    "center background",
    "top-left foreground",
    "top-center foreground",
    "top-right foreground",
    "middle-left foreground",
    "middle-right foreground",
    "bottom-left foreground",
    "bottom-center foreground",
    "bottom-right foreground",
    "top-left midground",
    "top-center midground",
    "top-right midground",
    "middle-left midground",
    "middle-right midground",
    "bottom-left midground",
    "bottom-center midground",
    "bottom-right midground",
    "top-left background",
    "top-center background",
    "top-right background",
    "middle-left background",
    "middle-right background",
    "bottom-left background",
    "bottom-center background",
    "bottom-right background",
    "dominant in frame",
    "partially off-screen left",
    "partially off-screen right",
    "slightly off-center",
    "filling the frame",
]

EnvironmentTypeOption = Literal[
    "interior - domestic (room, house)",
    "interior - public (office, mall, station, museum)",
    "interior - industrial (factory, warehouse, lab)",
    "interior - fantastical (cave, dungeon, spaceship bridge, alien structure)",
    "exterior - urban (city street, skyscraper rooftop, alleyway, park)",
    "exterior - suburban (residential street, backyard)",
    "exterior - rural (farmland, countryside, village)",
    "exterior - nature (forest, mountain, beach, desert, jungle, plains, tundra)",
    "exterior - fantastical (alien planet, dreamscape, floating islands, underworld)",
    "studio backdrop (plain color, textured, greenscreen, cyclorama)",
    "sky / space (clouds, stars, nebula, galaxy)",
    "underwater (ocean floor, coral reef, open water)",
]

WidthOption = Literal[
    "512",
    "768",
    "1024",
    "1280",
    "1344",
    "1536",
    "1920",
    "2048",
    "2560",
    "3840",
    "4096",
    "7680",
]

HeightOption = Literal[
    "512",
    "768",
    "1024",
    "1080",
    "1200",
    "1344",
    "1440",
    "1536",
    "1920",
    "2160",
    "4096",
    "4320",
]

DpiOption = Literal[
    "72 (Web/Screen)",
    "96 (Windows Default)",
    "150 (Draft Print)",
    "300 (Standard Print)",
    "600 (High-Res Print)",
]

TextPositionOption = Literal[
    # Corners
    "top-left corner",
    "top-right corner",
    "bottom-left corner",
    "bottom-right corner",
    # Edges Centered
    "top-center edge",
    "bottom-center edge",
    "left-center edge",
    "right-center edge",
    # Overall Centered
    "center of image",
    # Banners / Strips
    "top-banner (strip across the top)",
    "bottom-banner (strip across the bottom)",
    "left-sidebar (strip down the left)",
    "right-sidebar (strip down the right)",
    # Relative Positions (often need further description for exact placement)
    "slightly above center",
    "slightly below center",
    "offset from top-left",
    "within rule-of-thirds top-left intersection",
    "aligned with subject's eyeline",
]

# ---------------------------------------------------------------------------
# Runtime views of the vocabularies, keyed by dotted field path.
# ---------------------------------------------------------------------------
STYLE_OPTIONS: tuple[str, ...] = get_args(StyleOption)
LIGHTING_OPTIONS: tuple[str, ...] = get_args(LightingOption)
MOOD_OPTIONS: tuple[str, ...] = get_args(MoodOption)
DEPTH_OF_FIELD_OPTIONS: tuple[str, ...] = get_args(DepthOfFieldOption)
COMPOSITION_OPTIONS: tuple[str, ...] = get_args(CompositionOption)
CAMERA_ANGLE_OPTIONS: tuple[str, ...] = get_args(CameraAngleOption)
CAMERA_DISTANCE_OPTIONS: tuple[str, ...] = get_args(CameraDistanceOption)
CAMERA_LENS_OPTIONS: tuple[str, ...] = get_args(CameraLensOption)
CAMERA_FOCUS_OPTIONS: tuple[str, ...] = get_args(CameraFocusOption)
ASPECT_RATIO_OPTIONS: tuple[str, ...] = get_args(AspectRatioOption)
SUBJECT_POSITION_OPTIONS: tuple[str, ...] = get_args(SubjectPositionOption)
ENVIRONMENT_TYPE_OPTIONS: tuple[str, ...] = get_args(EnvironmentTypeOption)
WIDTH_OPTIONS: tuple[str, ...] = get_args(WidthOption)
HEIGHT_OPTIONS: tuple[str, ...] = get_args(HeightOption)
DPI_OPTIONS: tuple[str, ...] = get_args(DpiOption)
TEXT_POSITION_OPTIONS: tuple[str, ...] = get_args(TextPositionOption)

VOCABULARIES: dict[str, tuple[str, ...]] = {
    "style": STYLE_OPTIONS,
    "lighting": LIGHTING_OPTIONS,
    "mood": MOOD_OPTIONS,
    "composition": COMPOSITION_OPTIONS,
    "background.environment_type": ENVIRONMENT_TYPE_OPTIONS,
    "background.depth_of_field": DEPTH_OF_FIELD_OPTIONS,
    "camera.angle": CAMERA_ANGLE_OPTIONS,
    "camera.distance": CAMERA_DISTANCE_OPTIONS,
    "camera.lens_type": CAMERA_LENS_OPTIONS,
    "camera.focus": CAMERA_FOCUS_OPTIONS,
    "resolution.width": WIDTH_OPTIONS,
    "resolution.height": HEIGHT_OPTIONS,
    "resolution.aspect_ratio": ASPECT_RATIO_OPTIONS,
    "resolution.dpi": DPI_OPTIONS,
    "subjects.position": SUBJECT_POSITION_OPTIONS,
    "text_overlays.position": TEXT_POSITION_OPTIONS,
}


def is_suggested(field: str, value: object) -> bool:
    """Return True if ``value`` is one of the known values for ``field``.

    A False result is informational only; custom values are always valid.

    Args:
        field: Dotted field path, e.g. ``"camera.focus"``.  List fields use
            the element path, e.g. ``"subjects.position"``.
        value: The field value to look up.

    Raises:
        KeyError: If ``field`` has no vocabulary.
    """
    return value in VOCABULARIES[field]
