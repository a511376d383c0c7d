"""Emit API documentation as one HTML page or as a page per class.

This module turns a merged :class:`~dumpling.dump.Dump` into HTML. Both
builders share :class:`ApiModelBuilder`, which converts classes and members
into template models, asking the active :class:`~dumpling.links.LinkResolver`
for every element id and structural link (superclass, value, parameter, and
return types). Description prose is rendered by
:class:`~dumpling.generator.renderer.HtmlContentRenderer` with the
cross-reference extension wired to the same resolver, so links written in prose
and links generated from the dump agree.

Example
-------
>>> from pathlib import Path
>>> from dumpling.generator import SinglePageBuilder
>>> from dumpling.pipeline import load_dump
>>> dump = load_dump(Path("API-Dump.json"))  # doctest: +SKIP
>>> SinglePageBuilder(dump).run(Path("miniwiki.html"))  # doctest: +SKIP
PosixPath('miniwiki.html')
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from dumpling._constants import DEPRECATED_TAG, SIGNAL_TYPE_NAME
from dumpling.config import DumplingConfig
from dumpling.dump import (
    DumpCallback,
    DumpEvent,
    DumpFunction,
    DumpProperty,
    tag_names,
)
from dumpling.generator.link_hook import CrossReferenceExtension
from dumpling.generator.models import (
    ClassModel,
    EnumItemModel,
    EnumModel,
    MemberModel,
    MemberSectionModel,
    ParameterModel,
    ReturnModel,
    TypeLinkModel,
)
from dumpling.generator.renderer import HtmlContentRenderer
from dumpling.index import SymbolIndex
from dumpling.links import OutputMode, build_link_resolver
from dumpling.references import ClassType, DataType, EnumType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from dumpling.dump import (
        Dump,
        DumpClass,
        DumpClassMember,
        DumpEnum,
        DumpParameter,
        DumpReturn,
    )
    from dumpling.links import LinkResolver
    from dumpling.references import TypeReference

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

_MEMBER_SECTIONS: tuple[tuple[str, str], ...] = (
    ("Properties", "properties"),
    ("Functions", "functions"),
    ("Events", "events"),
    ("Callbacks", "callbacks"),
)


class ApiModelBuilder:
    """Convert dump classes into template models for one link strategy."""

    def __init__(self, resolver: LinkResolver, renderer: HtmlContentRenderer) -> None:
        self.resolver = resolver
        self.renderer = renderer

    def class_model(self, dump_class: DumpClass) -> ClassModel:
        """Return the template model for ``dump_class`` and all of its members."""
        element_class = "dump-class"
        tags = tag_names(dump_class.tags)
        if DEPRECATED_TAG in tags:
            element_class += " dump-class-deprecated"

        superclass = None
        if dump_class.superclass:
            superclass = self.type_link(ClassType(dump_class.superclass))

        sections: list[MemberSectionModel] = []
        for title, accessor in _MEMBER_SECTIONS:
            members: cabc.Sequence[DumpClassMember] = getattr(dump_class, accessor)()
            if members:
                sections.append(
                    MemberSectionModel(
                        title=title,
                        members=[self.member_model(dump_class, m) for m in members],
                    )
                )

        return ClassModel(
            anchor=self.resolver.class_id(dump_class.name),
            name=dump_class.name,
            element_class=element_class,
            superclass=superclass,
            tags=tags,
            description_html=self.renderer.description(dump_class.description),
            description_source=_source_label(dump_class.description_source),
            sections=sections,
        )

    def member_model(self, dump_class: DumpClass, member: DumpClassMember) -> MemberModel:
        """Return the template model for one member of ``dump_class``."""
        model = MemberModel(
            anchor=self.resolver.class_member_id(dump_class.name, member.name),
            name=member.name,
            kind="",
            element_class="",
            description_html=self.renderer.description(member.description),
            description_source=_source_label(member.description_source),
        )
        match member:
            case DumpProperty():
                model.kind = "property"
                model.value_type = self.type_link(member.value_type)
            case DumpFunction():
                model.kind = "function"
                self._add_signature(model, member.parameters)
                model.return_types = self._return_types(member.return_type, member.returns)
                model.returns = [self._return_model(ret) for ret in member.returns]
            case DumpEvent():
                model.kind = "event"
                model.value_type = self.type_link(DataType(SIGNAL_TYPE_NAME))
                self._add_signature(model, member.parameters)
            case DumpCallback():
                model.kind = "callback"
                self._add_signature(model, member.parameters)
                model.return_types = self._return_types(member.return_type, member.returns)
                model.returns = [self._return_model(ret) for ret in member.returns]

        model.element_class = f"dump-class-member dump-class-{model.kind}"
        if DEPRECATED_TAG in tag_names(member.tags):
            model.element_class += " dump-member-deprecated"
        return model

    def enum_model(self, dump_enum: DumpEnum) -> EnumModel:
        """Return the template model for an enum; anchors follow ``Enum.Name.Item``."""
        anchor = EnumType(dump_enum.name).qualified_name
        return EnumModel(
            anchor=anchor,
            name=dump_enum.name,
            items=[
                EnumItemModel(anchor=f"{anchor}.{item.name}", name=item.name, value=item.value)
                for item in dump_enum.items
            ],
        )

    def type_link(self, type_reference: TypeReference) -> TypeLinkModel:
        """Return a type name with its link, or without one when unresolvable."""
        link = self.resolver.type_link(type_reference)
        if link is None:
            return TypeLinkModel(name=type_reference.qualified_name)
        return TypeLinkModel(
            name=type_reference.qualified_name, url=link.url, title=link.title
        )

    def _add_signature(
        self, model: MemberModel, parameters: cabc.Sequence[DumpParameter]
    ) -> None:
        model.parameters = [
            ParameterModel(
                name=param.name,
                type_link=self.type_link(param.kind),
                default=param.default,
                description_html=self.renderer.markdown(param.description or ""),
            )
            for param in parameters
        ]
        model.show_parameter_table = any(param.description for param in parameters)
        model.show_defaults = any(param.default is not None for param in parameters)

    def _return_types(
        self, return_type: TypeReference, returns: cabc.Sequence[DumpReturn]
    ) -> list[TypeLinkModel]:
        """Prefer documented returns over the dump's single return type."""
        if not returns:
            return [self.type_link(return_type)]
        return [self.type_link(ret.kind) for ret in returns]

    def _return_model(self, ret: DumpReturn) -> ReturnModel:
        model = ReturnModel(type_link=self.type_link(ret.kind))
        if ret.description:
            model.description_html = self.renderer.markdown(ret.description)
        return model


class _ApiPageBuilder:
    """Shared Jinja and renderer wiring for both output shapes."""

    template_name: typ.ClassVar[str]
    output_mode: typ.ClassVar[OutputMode]

    def __init__(
        self,
        dump: Dump,
        *,
        config: DumplingConfig | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with the link resolver for its output shape.

        Parameters
        ----------
        dump : Dump
            Merged API model.
        config : DumplingConfig, optional
            Rendering options; defaults to :class:`DumplingConfig`.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        """
        self.dump = dump
        self.config = config or DumplingConfig()
        self.resolver = build_link_resolver(self.output_mode, SymbolIndex.from_dump(dump))
        self.renderer = HtmlContentRenderer(
            self.config.pygments_style,
            link_extension=CrossReferenceExtension(self.resolver),
            default_description=self.config.default_description,
        )
        self.models = ApiModelBuilder(self.resolver, self.renderer)
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(self.template_name)


class SinglePageBuilder(_ApiPageBuilder):
    """Render every class and enum onto one self-contained HTML document."""

    template_name = "miniwiki.jinja"
    output_mode = OutputMode.SINGLE_PAGE

    def render(self) -> str:
        """Return the complete HTML document."""
        return self.template.render(
            title=self.config.title,
            classes=[self.models.class_model(c) for c in self.dump.classes],
            enums=[self.models.enum_model(e) for e in self.dump.enums],
            pygments_css=self.renderer.stylesheet,
        )

    def run(self, output_path: Path) -> Path:
        """Write the document to ``output_path``, creating parent folders."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


class FullSiteBuilder(_ApiPageBuilder):
    """Render one HTML page per class, linked to each other by class name."""

    template_name = "class_page.jinja"
    output_mode = OutputMode.FULL_SITE

    def render_class(self, dump_class: DumpClass) -> str:
        """Return the HTML page for ``dump_class``."""
        return self.template.render(
            title=dump_class.name,
            dump_class=self.models.class_model(dump_class),
            pygments_css=self.renderer.stylesheet,
        )

    def run(self, output_dir: Path) -> list[Path]:
        """Write ``<output_dir>/<class_dir>/<Class>.html`` for every class.

        Returns
        -------
        list[Path]
            Written pages in dump order.
        """
        class_folder = output_dir / self.config.class_dir
        class_folder.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for dump_class in self.dump.classes:
            page_path = class_folder / f"{dump_class.name}.html"
            page_path.write_text(self.render_class(dump_class), encoding="utf-8")
            written.append(page_path)
        return written


def _source_label(source: object | None) -> str | None:
    return None if source is None else str(source)


__all__ = ["ApiModelBuilder", "FullSiteBuilder", "SinglePageBuilder"]
