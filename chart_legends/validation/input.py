from chart_legends.errors import InvalidLegendRequest
from chart_legends.renderer.templates import TEMPLATES

SUPPORTED_FORMATS = {"svg", "png"}


def validate_template(template: str) -> str:
    template = template.lower().strip()
    if template not in TEMPLATES:
        raise InvalidLegendRequest(
            f"Unsupported template '{template}'. Supported: {', '.join(sorted(TEMPLATES))}"
        )
    return template


def validate_format(format: str) -> str:
    format = format.lower().strip()
    if format not in SUPPORTED_FORMATS:
        raise InvalidLegendRequest(
            f"Unsupported format '{format}'. Supported: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )
    return format
