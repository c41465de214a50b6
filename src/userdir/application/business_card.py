"""Business card rendering: a fixed two-line template over a user's name and phone.

The template is parsed once when the renderer is built. Rendering is a pure
function of (name, phone); values are substituted literally.
"""

from string import Template

from userdir.application.errors import TemplateConfigError

CARD_TEMPLATE_VERSION = 1
CARD_TEMPLATE = "Name: $name\nPhone: $phone"

_CARD_FIELDS = frozenset({"name", "phone"})


class BusinessCardRenderer:
    """Renders business cards from a template holding only $name and $phone."""

    def __init__(self, template: str = CARD_TEMPLATE) -> None:
        parsed = Template(template)
        if not parsed.is_valid():
            raise TemplateConfigError(f"parse template: invalid placeholder in {template!r}")
        unknown = set(parsed.get_identifiers()) - _CARD_FIELDS
        if unknown:
            raise TemplateConfigError(
                f"parse template: unknown fields {sorted(unknown)} in {template!r}"
            )
        self._template = parsed

    def render(self, name: str, phone: str) -> str:
        return self._template.substitute(name=name, phone=phone)


_default_renderer = BusinessCardRenderer()


def render_business_card(name: str, phone: str) -> str:
    """Render with the default card template."""
    return _default_renderer.render(name, phone)
