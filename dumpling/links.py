"""Turn parsed references into navigable links for each output shape.

A :class:`LinkResolver` wraps a :class:`~dumpling.index.SymbolIndex` and owns
every decision about URL shape and element ids, so class headings, member rows,
structural type links, and links written in prose all agree with each other.
Two strategies exist:

* :class:`SinglePageLinkResolver` puts the whole API on one document and
  addresses everything with fragment anchors (``#Part.Size``).
* :class:`FullSiteLinkResolver` gives each class its own page and can only link
  to classes and class members (``Part#Size``).

Example
-------
>>> from dumpling.index import SymbolIndex
>>> from dumpling.links import SinglePageLinkResolver
>>> resolver = SinglePageLinkResolver(SymbolIndex.from_names({"Part": ["Size"]}))
>>> resolver.resolve_reference("Part.Size")
ResolvedLink(url='#Part.Size', title='Part.Size')
"""

from __future__ import annotations

import abc
import enum
import typing as typ

from .references import ClassType, MemberReference, TypeReference, parse_reference

if typ.TYPE_CHECKING:
    from .index import SymbolIndex


class ResolvedLink(typ.NamedTuple):
    """Link target and human-readable title; never contains markup."""

    url: str
    title: str


class OutputMode(enum.StrEnum):
    """Shape of the generated documentation."""

    SINGLE_PAGE = "single-page"
    FULL_SITE = "full-site"


class LinkResolver(abc.ABC):
    """Map references and types onto URLs and element ids."""

    def __init__(self, index: SymbolIndex) -> None:
        self.index = index

    def resolve_reference(self, reference: str) -> ResolvedLink | None:
        """Parse ``reference`` and return its link, or ``None`` when unresolvable.

        Parameters
        ----------
        reference : str
            Dotted path such as ``"Part"``, ``"Part.Size"``, or
            ``"Enum.Material.Plastic"``.

        Returns
        -------
        ResolvedLink | None
            The link, or ``None`` when the path does not parse or the strategy
            has nowhere to point it.
        """
        parsed = parse_reference(reference, self.index)
        match parsed:
            case None:
                return None
            case MemberReference(owner=owner, member=member):
                return self.member_link(owner, member)
            case _:
                return self.type_link(parsed)

    @abc.abstractmethod
    def type_link(self, type_reference: TypeReference) -> ResolvedLink | None:
        """Return the link to a type's own documentation, if it has any."""

    @abc.abstractmethod
    def member_link(self, owner: TypeReference, member: str) -> ResolvedLink | None:
        """Return the link to one member of ``owner``, if it has any."""

    @abc.abstractmethod
    def class_id(self, class_name: str) -> str:
        """Return the element id placed on a class heading."""

    @abc.abstractmethod
    def class_member_id(self, class_name: str, member_name: str) -> str:
        """Return the element id placed on a member row."""


class SinglePageLinkResolver(LinkResolver):
    """Link within one document where every class shares the anchor space."""

    def type_link(self, type_reference: TypeReference) -> ResolvedLink | None:
        name = type_reference.qualified_name
        return ResolvedLink(f"#{name}", name)

    def member_link(self, owner: TypeReference, member: str) -> ResolvedLink | None:
        title = f"{owner.qualified_name}.{member}"
        return ResolvedLink(f"#{title}", title)

    def class_id(self, class_name: str) -> str:
        return class_name

    def class_member_id(self, class_name: str, member_name: str) -> str:
        return f"{class_name}.{member_name}"


class FullSiteLinkResolver(LinkResolver):
    """Link between per-class pages; only classes have pages."""

    def type_link(self, type_reference: TypeReference) -> ResolvedLink | None:
        if not isinstance(type_reference, ClassType):
            return None
        return ResolvedLink(type_reference.name, type_reference.name)

    def member_link(self, owner: TypeReference, member: str) -> ResolvedLink | None:
        if not isinstance(owner, ClassType):
            return None
        return ResolvedLink(f"{owner.name}#{member}", f"{owner.name}.{member}")

    def class_id(self, class_name: str) -> str:
        return class_name

    def class_member_id(self, class_name: str, member_name: str) -> str:
        # Member ids are scoped to the class's own page.
        return member_name


def build_link_resolver(mode: OutputMode | str, index: SymbolIndex) -> LinkResolver:
    """Return the resolver strategy for ``mode``.

    Raises
    ------
    ValueError
        If ``mode`` is not a known :class:`OutputMode`.
    """
    match OutputMode(mode):
        case OutputMode.SINGLE_PAGE:
            return SinglePageLinkResolver(index)
        case OutputMode.FULL_SITE:
            return FullSiteLinkResolver(index)


__all__ = [
    "FullSiteLinkResolver",
    "LinkResolver",
    "OutputMode",
    "ResolvedLink",
    "SinglePageLinkResolver",
    "build_link_resolver",
]
