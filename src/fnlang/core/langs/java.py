"""Java runtime helper for Maven function projects."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urlparse

from fnlang.core.boilerplate import BoilerplateBundle, BoilerplateFile, write_boilerplate
from fnlang.core.errors import (
    ManifestAlreadyExistsError,
    MissingManifestError,
    UnsupportedVersionError,
)
from fnlang.core.fdk_version import (
    FdkVersionResolver,
    ResolvedFdkVersion,
    VersionSource,
    maven_version_sources,
)
from fnlang.core.langs.abc import BaseLangHelper
from fnlang.core.langs.java_templates import (
    HELLO_FUNCTION_SOURCE,
    HELLO_FUNCTION_TEST_SOURCE,
    render_pom,
)
from fnlang.ops.http import HttpFetcher

logger = logging.getLogger(__name__)

JAVA_FDK_VERSION_ENV = "FN_JAVA_FDK_VERSION"
POM_FILE = "pom.xml"
MAVEN_LOCAL_REPOSITORY = "/usr/share/maven/ref/repository"

# java version -> (build image tag prefix, run image tag prefix)
_IMAGE_TAG_PREFIXES = {
    "8": ("", ""),
    "11": ("jdk11-", "jre11-"),
}


def maven_opts(environ: Mapping[str, str]) -> str:
    """MAVEN_OPTS value carrying the caller's proxy settings into the build container.

    no_proxy uses commas between hosts; Java's http.nonProxyHosts wants pipes.
    """
    opts: list[str] = []

    for scheme in ("http", "https"):
        proxy = environ.get(f"{scheme}_proxy", "")
        if not proxy:
            continue
        parsed = urlparse(proxy)
        try:
            port = parsed.port
        except ValueError:
            logger.debug("Ignoring %s_proxy with invalid port: %s", scheme, proxy)
            continue
        if not parsed.hostname:
            logger.debug("Ignoring %s_proxy without host: %s", scheme, proxy)
            continue
        opts.append(f"-D{scheme}.proxyHost={parsed.hostname}")
        if port is not None:
            opts.append(f"-D{scheme}.proxyPort={port}")

    no_proxy = environ.get("no_proxy", "")
    if no_proxy:
        opts.append(f"-Dhttp.nonProxyHosts={no_proxy.replace(',', '|')}")

    opts.append(f"-Dmaven.repo.local={MAVEN_LOCAL_REPOSITORY}")
    return " ".join(opts)


class JavaLangHelper(BaseLangHelper):
    """Lifecycle of Java Maven function projects.

    One instance per Java version. The default instance also answers to the
    bare "java" name and owns the .java extension, so that several versions
    can live in one registry without ambiguity.
    """

    def __init__(
        self,
        version: str,
        resolver: FdkVersionResolver,
        default: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.version = version
        self.default = default
        self._resolver = resolver
        self._environ = os.environ if environ is None else environ

    @property
    def runtime(self) -> str:
        return "java"

    def lang_strings(self) -> list[str]:
        versioned = f"java{self.version}"
        if self.default:
            return ["java", versioned]
        return [versioned]

    def file_extensions(self) -> list[str]:
        if self.default:
            return [".java"]
        return []

    def fdk_version(self) -> ResolvedFdkVersion:
        return self._resolver.resolve()

    def _image_tag_prefixes(self) -> tuple[str, str]:
        prefixes = _IMAGE_TAG_PREFIXES.get(self.version)
        if prefixes is None:
            raise UnsupportedVersionError("java", self.version)
        return prefixes

    def build_image(self) -> str:
        fdk_version = self.fdk_version().version
        build_prefix, _ = self._image_tag_prefixes()
        return f"fnproject/fn-java-fdk-build:{build_prefix}{fdk_version}"

    def run_image(self) -> str:
        fdk_version = self.fdk_version().version
        _, run_prefix = self._image_tag_prefixes()
        return f"fnproject/fn-java-fdk:{run_prefix}{fdk_version}"

    def has_boilerplate(self) -> bool:
        return True

    def boilerplate_bundle(self, resolved: ResolvedFdkVersion) -> BoilerplateBundle:
        pom = render_pom(
            fdk_version=resolved.version,
            java_version=self.version,
            include_fdk_repository=resolved.source is not VersionSource.PRIMARY,
        )
        return BoilerplateBundle(
            manifest=BoilerplateFile(POM_FILE, pom),
            files=(
                BoilerplateFile(
                    "src/main/java/com/example/fn/HelloFunction.java", HELLO_FUNCTION_SOURCE
                ),
                BoilerplateFile(
                    "src/test/java/com/example/fn/HelloFunctionTest.java",
                    HELLO_FUNCTION_TEST_SOURCE,
                ),
            ),
        )

    def generate_boilerplate(self, target_dir: Path) -> None:
        # existing projects never trigger a version lookup
        pom_path = target_dir / POM_FILE
        if pom_path.exists():
            raise ManifestAlreadyExistsError(pom_path)

        write_boilerplate(target_dir, self.boilerplate_bundle(self.fdk_version()))

    def supports_pre_build_validation(self) -> bool:
        return True

    def pre_build_validate(self, working_dir: Path) -> None:
        pom_path = working_dir / POM_FILE
        if not pom_path.exists():
            raise MissingManifestError(
                pom_path, "Could not find pom.xml - are you sure this is a Maven project?"
            )

    def build_stage_instructions(self) -> list[str]:
        return [
            f"ENV MAVEN_OPTS {maven_opts(self._environ)}",
            "ADD pom.xml /function/pom.xml",
            'RUN ["mvn", "package", "dependency:copy-dependencies", "-DincludeScope=runtime", '
            '"-DskipTests=true", "-Dmdep.prependGroupId=true", "-DoutputDirectory=target", '
            '"--fail-never"]',
            "ADD src /function/src",
            'RUN ["mvn", "package"]',
        ]

    def final_stage_instructions(self) -> list[str]:
        return [
            "COPY --from=build-stage /function/target/*.jar /function/app/",
        ]

    def entrypoint(self) -> str:
        return "com.example.fn.HelloFunction::handleRequest"

    def should_pin_base_images_at_init(self) -> bool:
        return True


def java_fdk_resolver(
    metadata_url: str,
    search_url: str,
    http: HttpFetcher,
    environ: Mapping[str, str] | None = None,
) -> FdkVersionResolver:
    """Resolver for the Java FDK (com.fnproject.fn:fdk)."""
    return FdkVersionResolver(
        runtime="Java",
        override_env=JAVA_FDK_VERSION_ENV,
        sources=maven_version_sources(metadata_url, search_url),
        http=http,
        environ=environ,
    )
