"""Cyclopts CLI entrypoint for generating API documentation from a class dump.

The ``dumpling`` console script defined here merges a JSON API dump with the
optional reflection metadata and supplemental content, then writes either a
single-page "mini wiki", a site with one page per class, or the merged model
back out as JSON. Every option can also be supplied through a ``DUMPLING_``
environment variable, which keeps CI invocations short.

Examples
--------
Render the single-page reference:

>>> from dumpling.cli import app
>>> app.run(
...     ["miniwiki", "--dump", "API-Dump.json", "--output", "miniwiki.html"]
... )  # doctest: +SKIP

Render one page per class with community descriptions:

>>> app.run(
...     ["site", "--dump", "API-Dump.json", "--content", "content", "--output", "site"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_config
from .dump import encode_dump
from .generator import FullSiteBuilder, SinglePageBuilder
from .pipeline import load_dump

if typ.TYPE_CHECKING:
    from .config import DumplingConfig
    from .dump import Dump

app = App(name="dumpling", config=cyclopts.config.Env("DUMPLING_", command=False))  # type: ignore[unknown-argument]

DumpOption = typ.Annotated[
    Path, Parameter(help="Path to the JSON API dump", env_var="DUMPLING_DUMP")
]
MetadataOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to the reflection metadata XML", env_var="DUMPLING_METADATA"),
]
ContentOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Supplemental content file or directory", env_var="DUMPLING_CONTENT"
    ),
]
ConfigOption = typ.Annotated[
    Path | None, Parameter(help="Path to a YAML config file", env_var="DUMPLING_CONFIG")
]
VerboseOption = typ.Annotated[
    bool, Parameter(help="Log merge progress", env_var="DUMPLING_VERBOSE")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _prepare(
    dump: Path,
    metadata: Path | None,
    content: Path | None,
    config: Path | None,
    *,
    verbose: bool,
) -> tuple[Dump, DumplingConfig]:
    _configure_logging(verbose=verbose)
    settings = load_config(config)
    merged = load_dump(
        dump, metadata_path=metadata, content_path=content, config=settings
    )
    return merged, settings


@app.command(help="Render every class and enum onto one HTML page.")
def miniwiki(
    *,
    dump: DumpOption,
    output: typ.Annotated[
        Path, Parameter(help="HTML file to write", env_var="DUMPLING_OUTPUT")
    ],
    metadata: MetadataOption = None,
    content: ContentOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write the single-page reference.

    Parameters
    ----------
    dump : Path
        JSON API dump (``DUMPLING_DUMP``).
    output : Path
        Destination HTML file; parent folders are created.
    metadata : Path or None, optional
        Reflection metadata XML whose summaries become descriptions.
    content : Path or None, optional
        Supplemental Markdown file or directory.
    config : Path or None, optional
        YAML configuration; defaults apply when omitted.
    verbose : bool, optional
        Log each merge step at info level.
    """
    merged, settings = _prepare(dump, metadata, content, config, verbose=verbose)
    written = SinglePageBuilder(merged, config=settings).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Render one HTML page per class.")
def site(
    *,
    dump: DumpOption,
    output: typ.Annotated[
        Path, Parameter(help="Output folder for the site", env_var="DUMPLING_OUTPUT")
    ],
    metadata: MetadataOption = None,
    content: ContentOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write ``<output>/<class_dir>/<Class>.html`` for each class in the dump."""
    merged, settings = _prepare(dump, metadata, content, config, verbose=verbose)
    for path in FullSiteBuilder(merged, config=settings).run(output):
        print(f"wrote {_format_path(path)}")


@app.command(help="Write the merged API model as a single JSON file.")
def megadump(
    *,
    dump: DumpOption,
    output: typ.Annotated[
        Path, Parameter(help="JSON file to write", env_var="DUMPLING_OUTPUT")
    ],
    metadata: MetadataOption = None,
    content: ContentOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write the dump with every description source merged onto it."""
    merged, _ = _prepare(dump, metadata, content, config, verbose=verbose)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(encode_dump(merged))
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `dumpling` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
