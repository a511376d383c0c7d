"""Shared dataclasses passed to the API documentation templates."""

from __future__ import annotations

import dataclasses as dc

from markupsafe import Markup


@dc.dataclass(slots=True)
class TypeLinkModel:
    """A type name and, when the active resolver has one, its link.

    Attributes
    ----------
    name : str
        Name shown to the reader.
    url : str or None
        Link target; ``None`` renders the name as plain text.
    title : str or None
        Title attribute for the link.
    """

    name: str
    url: str | None = None
    title: str | None = None


@dc.dataclass(slots=True)
class ParameterModel:
    name: str
    type_link: TypeLinkModel
    default: str | None = None
    description_html: Markup = dc.field(default_factory=Markup)


@dc.dataclass(slots=True)
class ReturnModel:
    type_link: TypeLinkModel
    description_html: Markup = dc.field(default_factory=Markup)


@dc.dataclass(slots=True)
class MemberModel:
    """Structured data for one member row.

    Attributes
    ----------
    anchor : str
        Element id assigned by the link resolver.
    name : str
        Member name.
    kind : str
        ``"property"``, ``"function"``, ``"event"``, or ``"callback"``.
    element_class : str
        CSS classes, including the deprecation marker when tagged.
    value_type : TypeLinkModel or None
        Property type, or the signal type of an event.
    parameters : list[ParameterModel]
        Parameters in declaration order.
    return_types : list[TypeLinkModel]
        One entry for a single return, several for a tuple return.
    description_html : Markup
        Rendered description.
    description_source : str or None
        Where the description came from.
    show_parameter_table : bool
        Whether any parameter has its own description.
    show_defaults : bool
        Whether the parameter table needs a default-value column.
    returns : list[ReturnModel]
        Documented return values for the returns table.
    """

    anchor: str
    name: str
    kind: str
    element_class: str
    value_type: TypeLinkModel | None = None
    parameters: list[ParameterModel] = dc.field(default_factory=list)
    return_types: list[TypeLinkModel] = dc.field(default_factory=list)
    description_html: Markup = dc.field(default_factory=Markup)
    description_source: str | None = None
    show_parameter_table: bool = False
    show_defaults: bool = False
    returns: list[ReturnModel] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class MemberSectionModel:
    title: str
    members: list[MemberModel]


@dc.dataclass(slots=True)
class ClassModel:
    """Structured data for one class block or class page."""

    anchor: str
    name: str
    element_class: str
    superclass: TypeLinkModel | None
    tags: list[str]
    description_html: Markup
    description_source: str | None
    sections: list[MemberSectionModel]


@dc.dataclass(slots=True)
class EnumItemModel:
    anchor: str
    name: str
    value: int


@dc.dataclass(slots=True)
class EnumModel:
    anchor: str
    name: str
    items: list[EnumItemModel]


__all__ = [
    "ClassModel",
    "EnumItemModel",
    "EnumModel",
    "MemberModel",
    "MemberSectionModel",
    "ParameterModel",
    "ReturnModel",
    "TypeLinkModel",
]
