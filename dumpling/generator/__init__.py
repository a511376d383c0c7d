"""Render the merged API model into HTML documentation."""

from .link_hook import CrossReferenceExtension
from .models import ClassModel, EnumModel, MemberModel
from .page_generator import ApiModelBuilder, FullSiteBuilder, SinglePageBuilder
from .renderer import HtmlContentRenderer

__all__ = [
    "ApiModelBuilder",
    "ClassModel",
    "CrossReferenceExtension",
    "EnumModel",
    "FullSiteBuilder",
    "HtmlContentRenderer",
    "MemberModel",
    "SinglePageBuilder",
]
