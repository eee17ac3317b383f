"""Build recipes and their multi-stage Dockerfile rendering.

A BuildRecipe is a snapshot of one helper's decisions for one invocation.
The container engine consumes it as Dockerfile text; nothing here runs a build.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from fnlang.core.langs.abc import LangHelper

logger = logging.getLogger(__name__)

FUNCTION_DIR = "/function"


@dataclass(frozen=True)
class BuildRecipe:
    """Immutable result of asking a helper how to build a function.

    Attributes:
        runtime: Canonical runtime name
        build_image: Image the build stage starts from
        run_image: Image the final stage starts from
        pre_build_validated: Whether the working directory was validated
        build_instructions: Build-stage Dockerfile instructions, in order
        copy_instructions: Final-stage Dockerfile instructions, in order
        entrypoint: Command the run image invokes on startup
    """

    runtime: str
    build_image: str
    run_image: str
    pre_build_validated: bool
    build_instructions: tuple[str, ...]
    copy_instructions: tuple[str, ...]
    entrypoint: str


def build_recipe(helper: LangHelper, working_dir: Path) -> BuildRecipe:
    """Validate working_dir and collect the helper's build decisions.

    Raises:
        MissingManifestError: If pre-build validation fails
        VersionResolutionError: If the FDK version cannot be determined
        UnsupportedVersionError: If the helper's runtime version is unknown
    """
    validated = helper.supports_pre_build_validation()
    if validated:
        helper.pre_build_validate(working_dir)

    recipe = BuildRecipe(
        runtime=helper.runtime,
        build_image=helper.build_image(),
        run_image=helper.run_image(),
        pre_build_validated=validated,
        build_instructions=tuple(helper.build_stage_instructions()),
        copy_instructions=tuple(helper.final_stage_instructions()),
        entrypoint=helper.entrypoint(),
    )
    logger.debug(
        "Build recipe for %s: %s -> %s", recipe.runtime, recipe.build_image, recipe.run_image
    )
    return recipe


def render_dockerfile(recipe: BuildRecipe) -> str:
    """Render recipe as a two-stage Dockerfile."""
    lines = [
        f"FROM {recipe.build_image} as build-stage",
        f"WORKDIR {FUNCTION_DIR}",
        *recipe.build_instructions,
        f"FROM {recipe.run_image}",
        f"WORKDIR {FUNCTION_DIR}",
        *recipe.copy_instructions,
        f"CMD {json.dumps([recipe.entrypoint])}",
    ]
    return "\n".join(lines) + "\n"
