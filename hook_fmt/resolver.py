"""Map a file to an ordered list of formatter candidates.

Each supported extension belongs to a :class:`FormatterFamily`. A family's builder
looks at the project around the file and the executables on the host and returns
candidates highest priority first. Only candidates that are present (project-local
binaries) or discoverable (commands on ``PATH``) are returned; build-tool commands
are returned whenever the project declares that build tool.
"""

from collections.abc import Callable
from dataclasses import dataclass
import os
import os.path
from pathlib import Path
from typing import Final
from typing import TypeAlias

import structlog

from .candidate import FormatterCandidate
from .candidate import Invocation
from .candidate import OnFailure
from .common import ImmutableDict
from .host import command_exists
from .options import DEFAULT_OPTIONS
from .options import FormatOptions
from .project import Ecosystem
from .project import find_root
from .project import GRADLE_MARKERS
from .project import has_marker
from .project import PACKAGE_JSON
from .project import POM_XML
from .result import FormatResult


logger = structlog.get_logger(__name__)

NODE_BIN_DIR: Final[Path] = Path("node_modules") / ".bin"
VENV_DIRS: Final[tuple[str, ...]] = (".venv", "venv")

_ToolSpec: TypeAlias = tuple[str, tuple[str, ...]]

NODE_LOCAL_FORMATTERS: Final[tuple[_ToolSpec, ...]] = (
    ("oxfmt", ("--write",)),
    ("biome", ("format", "--write")),
    ("prettier", ("--write",)),
)
NODE_GLOBAL_FORMATTERS: Final[tuple[_ToolSpec, ...]] = (
    ("oxfmt", ("--write",)),
    ("dprint", ("fmt",)),
)
PYTHON_FORMATTERS: Final[tuple[_ToolSpec, ...]] = (
    ("ruff", ("format",)),
    ("black", ()),
    ("autopep8", ("--in-place",)),
    ("yapf", ("-i",)),
)
JAVA_GLOBAL_FORMATTERS: Final[tuple[_ToolSpec, ...]] = (
    ("google-java-format", ("--replace",)),
    ("palantir-java-format", ("--replace",)),
)
OXFMT: Final[_ToolSpec] = ("oxfmt", ("--write",))


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a file.

    :param str label: Human-readable family label (e.g. ``"JSON"``).
    :param tuple[FormatterCandidate, ...] candidates: Candidates in priority order.
    :param result: Set when no dispatch is needed (skipped or unsupported file).
    :type result: FormatResult | None
    """

    label: str
    candidates: tuple[FormatterCandidate, ...] = ()
    result: FormatResult | None = None


CandidateBuilder: TypeAlias = Callable[[Path, FormatOptions], list[FormatterCandidate]]


@dataclass(frozen=True)
class FormatterFamily:
    """A group of extensions that share a formatter priority chain."""

    label: str
    extensions: tuple[str, ...]
    build: CandidateBuilder


def resolve(
    file_path: str | os.PathLike[str], options: FormatOptions = DEFAULT_OPTIONS
) -> Resolution:
    """Resolve the formatter candidates for ``file_path``.

    :param file_path: The edited file. Relative paths are taken from the current
        working directory.
    :type file_path: str | os.PathLike[str]
    :param FormatOptions options: Run-time options.
    :return: The family label plus either candidates or an early result.
    :rtype: Resolution
    """
    target = Path(os.path.abspath(file_path))
    if target.name == PACKAGE_JSON:
        return Resolution(PACKAGE_JSON, result=FormatResult.skipped(PACKAGE_JSON))

    ext = file_extension(target)
    family = EXTENSION_FAMILIES.get(ext)
    if family is None:
        return Resolution(ext, result=FormatResult.unsupported(ext))

    candidates = tuple(family.build(target, options))
    logger.debug(
        "candidates_resolved",
        file=str(target),
        family=family.label,
        candidates=[c.name for c in candidates],
    )
    return Resolution(family.label, candidates)


def file_extension(file_path: Path) -> str:
    """Return the extension of ``file_path`` without the dot, as written."""
    return file_path.suffix[1:]


def _global_candidates(
    target: Path, tools: tuple[_ToolSpec, ...]
) -> list[FormatterCandidate]:
    return [
        FormatterCandidate.single(name, name, args, target)
        for name, args in tools
        if command_exists(name)
    ]


def _node_local_candidates(
    root: Path | None, target: Path, tools: tuple[_ToolSpec, ...]
) -> list[FormatterCandidate]:
    if root is None:
        return []
    candidates: list[FormatterCandidate] = []
    for name, args in tools:
        local_bin = root / NODE_BIN_DIR / name
        if local_bin.exists():
            candidates.append(FormatterCandidate.single(name, local_bin, args, target))
    return candidates


def _javascript_candidates(
    target: Path, options: FormatOptions
) -> list[FormatterCandidate]:
    root = find_root(target, Ecosystem.NODE)
    candidates = _node_local_candidates(root, target, NODE_LOCAL_FORMATTERS)
    if not options.project_only:
        candidates += _global_candidates(target, NODE_GLOBAL_FORMATTERS)
    return candidates


def _rust_candidates(target: Path, options: FormatOptions) -> list[FormatterCandidate]:
    candidates: list[FormatterCandidate] = []
    root = find_root(target, Ecosystem.RUST)
    if root is not None:
        candidates.append(
            FormatterCandidate.single("cargo fmt", "cargo", ("fmt", "--"), target, root)
        )
    if not options.project_only:
        candidates += _global_candidates(target, (("rustfmt", ()),))
    return candidates


def _python_candidates(
    target: Path, options: FormatOptions
) -> list[FormatterCandidate]:
    if not options.project_only:
        return _global_candidates(target, PYTHON_FORMATTERS)

    root = find_root(target, Ecosystem.PYTHON)
    if root is None:
        return []
    candidates: list[FormatterCandidate] = []
    for name, args in PYTHON_FORMATTERS:
        for venv_dir in VENV_DIRS:
            venv_bin = root / venv_dir / "bin" / name
            if venv_bin.exists():
                candidates.append(
                    FormatterCandidate.single(name, venv_bin, args, target)
                )
                break
    return candidates


def _gradle_launcher(root: Path) -> str:
    gradlew = root / ("gradlew.bat" if os.name == "nt" else "gradlew")
    return str(gradlew) if gradlew.exists() else "gradle"


def _java_candidates(target: Path, options: FormatOptions) -> list[FormatterCandidate]:
    candidates: list[FormatterCandidate] = []
    root = find_root(target, Ecosystem.JAVA)
    if root is not None:
        if has_marker(root, POM_XML):
            candidates.append(
                FormatterCandidate.single(
                    "spotless (Maven)",
                    "mvn",
                    ("spotless:apply", f"-DspotlessFiles={target}"),
                    None,
                    root,
                    OnFailure.NEXT,
                )
            )
        if has_marker(root, *GRADLE_MARKERS):
            candidates.append(
                FormatterCandidate.single(
                    "spotless (Gradle)",
                    _gradle_launcher(root),
                    ("spotlessApply", f"-PspotlessIdeHook={target}"),
                    None,
                    root,
                    OnFailure.NEXT,
                )
            )
    if not options.project_only:
        candidates += _global_candidates(target, JAVA_GLOBAL_FORMATTERS)
    return candidates


def _go_candidates(target: Path, options: FormatOptions) -> list[FormatterCandidate]:
    root = find_root(target, Ecosystem.GO)
    if options.project_only and root is None:
        return []

    goimports = Invocation("goimports", ("-w", str(target)), root)
    gofumpt = Invocation("gofumpt", ("-w", str(target)), root)
    has_goimports = command_exists("goimports")
    has_gofumpt = command_exists("gofumpt")

    candidates: list[FormatterCandidate] = []
    if has_goimports and has_gofumpt:
        candidates.append(
            FormatterCandidate(
                "goimports + gofumpt", (goimports, gofumpt), OnFailure.NEXT
            )
        )
    if has_gofumpt:
        candidates.append(FormatterCandidate("gofumpt", (gofumpt,), OnFailure.NEXT))
    if has_goimports:
        candidates.append(FormatterCandidate("goimports", (goimports,), OnFailure.NEXT))
    if command_exists("gofmt"):
        candidates.append(
            FormatterCandidate.single("gofmt", "gofmt", ("-w",), target, root)
        )
    return candidates


def _oxfmt_candidates(target: Path, options: FormatOptions) -> list[FormatterCandidate]:
    root = find_root(target, Ecosystem.GENERIC)
    candidates = _node_local_candidates(root, target, (OXFMT,))
    if not options.project_only:
        candidates += _global_candidates(target, (OXFMT,))
    return candidates


FAMILIES: Final[tuple[FormatterFamily, ...]] = (
    FormatterFamily(
        "JavaScript/TypeScript",
        ("js", "jsx", "ts", "tsx", "mjs", "cjs"),
        _javascript_candidates,
    ),
    FormatterFamily("Rust", ("rs",), _rust_candidates),
    FormatterFamily("Python", ("py", "pyi"), _python_candidates),
    FormatterFamily("Java", ("java",), _java_candidates),
    FormatterFamily("Go", ("go",), _go_candidates),
    FormatterFamily("JSON", ("json", "jsonc", "json5"), _oxfmt_candidates),
    FormatterFamily("YAML", ("yaml", "yml"), _oxfmt_candidates),
    FormatterFamily("TOML", ("toml",), _oxfmt_candidates),
    FormatterFamily("HTML", ("html", "htm"), _oxfmt_candidates),
    FormatterFamily("Vue", ("vue",), _oxfmt_candidates),
    FormatterFamily("CSS", ("css",), _oxfmt_candidates),
    FormatterFamily("SCSS", ("scss",), _oxfmt_candidates),
    FormatterFamily("Less", ("less",), _oxfmt_candidates),
    FormatterFamily("Markdown", ("md", "markdown"), _oxfmt_candidates),
    FormatterFamily("MDX", ("mdx",), _oxfmt_candidates),
    FormatterFamily("GraphQL", ("graphql", "gql"), _oxfmt_candidates),
    FormatterFamily("Handlebars", ("hbs", "handlebars"), _oxfmt_candidates),
)

EXTENSION_FAMILIES: Final[ImmutableDict[str, FormatterFamily]] = ImmutableDict(
    {ext: family for family in FAMILIES for ext in family.extensions}
)
