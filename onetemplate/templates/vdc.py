"""Template of virtual datacenters."""

from enum import StrEnum

from .base import TemplateView


class VdcTemplateKey(StrEnum):
    NAME = "NAME"
    DESCRIPTION = "DESCRIPTION"


class VdcTemplate(TemplateView):
    pass


__all__ = ["VdcTemplate", "VdcTemplateKey"]
