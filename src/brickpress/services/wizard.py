"""Three-step poster wizard: capture, theme, result."""

from dataclasses import dataclass, field
from enum import IntEnum

from brickpress.domain.errors import BrickPressError
from brickpress.domain.generations import GenerationRequest, ImageUpload
from brickpress.domain.identity import Anonymous, Identity
from brickpress.domain.themes import ModelType, Theme
from brickpress.services.generation import GenerationService

THEME_REQUIRED_MESSAGE = "Please select a universe or use 'I'm Feeling Lucky'"


class WizardStep(IntEnum):
    """Wizard steps in display order."""

    CAPTURE = 1
    THEME = 2
    RESULT = 3


@dataclass
class WizardState:
    """Ephemeral state of one wizard instance."""

    step: WizardStep = WizardStep.CAPTURE
    image: ImageUpload | None = None
    name: str = ""
    description: str = ""
    theme: Theme | None = None
    use_original_prompt: bool = False
    result: str | None = None
    error: str | None = None
    loading: bool = False
    auth_prompt_open: bool = False


@dataclass
class WizardController:
    """Drive wizard transitions against the generation service."""

    generation_service: GenerationService
    identity: Identity
    state: WizardState = field(default_factory=WizardState)

    def select_image(self, image: ImageUpload | None) -> None:
        self.state.image = image

    def set_details(self, name: str, description: str) -> None:
        self.state.name = name
        self.state.description = description

    def next(self) -> bool:
        """Move from capture to theme selection when the guards allow it."""
        if self.state.step is not WizardStep.CAPTURE:
            return False
        if isinstance(self.identity, Anonymous):
            self.state.auth_prompt_open = True
            return False
        if self.state.image is None or not self.state.name:
            return False
        self.state.step = WizardStep.THEME
        self.state.error = None
        return True

    def select_theme(self, theme: Theme) -> None:
        self.state.theme = theme
        self.state.use_original_prompt = False

    def feeling_lucky(self) -> None:
        """Let the model pick the styling."""
        self.state.theme = None
        self.state.use_original_prompt = True

    async def generate(self) -> bool:
        """Request a poster; on success move to the result step."""
        if self.state.step is not WizardStep.THEME or self.state.loading:
            return False
        if self.state.theme is None and not self.state.use_original_prompt:
            self.state.error = THEME_REQUIRED_MESSAGE
            return False

        self.state.loading = True
        self.state.error = None
        request = GenerationRequest(
            image=self.state.image,
            name=self.state.name,
            description=self.state.description,
            theme=self.state.theme,
            use_original_prompt=self.state.use_original_prompt,
            owner=self.identity,
            model_type=ModelType.UNKNOWN,
        )
        try:
            outcome = await self.generation_service.generate(request)
        except BrickPressError as exc:
            self.state.error = str(exc) or "Something went wrong"
            return False
        finally:
            self.state.loading = False

        self.state.result = outcome.image.data_uri
        self.state.step = WizardStep.RESULT
        return True

    def create_another(self) -> None:
        """Reset everything and return to the capture step."""
        self.state = WizardState()

    def close_auth_prompt(self) -> None:
        self.state.auth_prompt_open = False
