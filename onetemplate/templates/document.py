"""Template of generic documents (service templates, flows...)."""

from enum import StrEnum

from .base import TemplateView


class DocumentTemplateKey(StrEnum):
    NAME = "NAME"
    DESCRIPTION = "DESCRIPTION"
    BODY = "BODY"


class DocumentTemplate(TemplateView):
    pass


__all__ = ["DocumentTemplate", "DocumentTemplateKey"]
