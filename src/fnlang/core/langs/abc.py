"""Language helper interface.

A LangHelper holds everything runtime-specific about building a function:
image names, manifest conventions, Dockerfile instructions and boilerplate.
The build driver stays the same for every runtime; only the helper changes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LangIdentity:
    """Strings that select a helper.

    Attributes:
        name: Canonical runtime name (e.g. "java")
        aliases: Every string a user may type to pick this helper (e.g. "java11")
    """

    name: str
    aliases: tuple[str, ...]


class LangHelper(ABC):
    """Abstract interface for one language runtime."""

    @abstractmethod
    def lang_strings(self) -> list[str]:
        """All strings that select this helper. The first one is the default runtime name."""
        ...

    @abstractmethod
    def file_extensions(self) -> list[str]:
        """File suffixes (with leading dot) that identify projects of this runtime."""
        ...

    @abstractmethod
    def build_image(self) -> str:
        """Image used to compile the function.

        Raises:
            VersionResolutionError: If the FDK version cannot be determined
            UnsupportedVersionError: If the configured runtime version is unknown
        """
        ...

    @abstractmethod
    def run_image(self) -> str:
        """Minimal image used to run the compiled function.

        Raises:
            VersionResolutionError: If the FDK version cannot be determined
            UnsupportedVersionError: If the configured runtime version is unknown
        """
        ...

    @abstractmethod
    def has_boilerplate(self) -> bool: ...

    @abstractmethod
    def generate_boilerplate(self, target_dir: Path) -> None:
        """Scaffold a new project in target_dir.

        Raises:
            ManifestAlreadyExistsError: If the project manifest already exists
        """
        ...

    @abstractmethod
    def supports_pre_build_validation(self) -> bool: ...

    @abstractmethod
    def pre_build_validate(self, working_dir: Path) -> None:
        """Check working_dir looks like a buildable project.

        Raises:
            MissingManifestError: If the expected manifest is absent
        """
        ...

    @abstractmethod
    def build_stage_instructions(self) -> list[str]:
        """Dockerfile instructions for the build stage, in order."""
        ...

    @abstractmethod
    def final_stage_instructions(self) -> list[str]:
        """Dockerfile instructions copying build output into the run stage, in order."""
        ...

    @abstractmethod
    def entrypoint(self) -> str:
        """Command the run image invokes on startup."""
        ...

    @abstractmethod
    def should_pin_base_images_at_init(self) -> bool:
        """Whether image references should be frozen when a project is initialised."""
        ...

    @abstractmethod
    def custom_memory(self) -> int:
        """Memory in MB this runtime needs, or 0 for the platform default."""
        ...

    @property
    def runtime(self) -> str:
        return self.lang_strings()[0]

    def identity(self) -> LangIdentity:
        return LangIdentity(name=self.runtime, aliases=tuple(self.lang_strings()))

    def handles(self, lang: str) -> bool:
        """Case-sensitive exact match against lang_strings()."""
        return lang in self.lang_strings()

    def handles_extension(self, extension: str) -> bool:
        return extension in self.file_extensions()


class BaseLangHelper(LangHelper):
    """LangHelper with do-nothing defaults for the optional capabilities.

    Runtimes without boilerplate or pre-build checks only implement the
    image, instruction and entrypoint methods.
    """

    def has_boilerplate(self) -> bool:
        return False

    def generate_boilerplate(self, target_dir: Path) -> None:
        return None

    def supports_pre_build_validation(self) -> bool:
        return False

    def pre_build_validate(self, working_dir: Path) -> None:
        return None

    def should_pin_base_images_at_init(self) -> bool:
        return False

    def custom_memory(self) -> int:
        return 0
